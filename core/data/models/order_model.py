"""SQLAlchemy ORM models for cashiers and their orders."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .base import Base


class CashierModel(Base):
    """SQLAlchemy ORM model for cashiers table."""

    __tablename__ = "cashiers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)

    orders = relationship(
        "OrderModel", back_populates="cashier", order_by="OrderModel.id", lazy="raise"
    )

    def __repr__(self):
        return f"<CashierModel(id={self.id}, first_name={self.first_name}, last_name={self.last_name})>"


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    cashier_id = Column(Integer, ForeignKey("cashiers.id"), nullable=False, index=True)
    # Naive timestamp; tzinfo is stripped before write
    paid_on_date = Column(DateTime, nullable=True, index=True)

    cashier = relationship("CashierModel", back_populates="orders", lazy="raise")

    # Lines are removed with their order (by the database, without loading them)
    order_products = relationship(
        "OrderLineModel",
        back_populates="order",
        order_by="OrderLineModel.id",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="raise",
    )

    def __repr__(self):
        return f"<OrderModel(id={self.id}, cashier_id={self.cashier_id}, paid_on_date={self.paid_on_date})>"


class OrderLineModel(Base):
    """SQLAlchemy ORM model for order_products table (order ↔ product join)."""

    __tablename__ = "order_products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(
        Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True
    )
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)

    order = relationship("OrderModel", back_populates="order_products", lazy="raise")
    product = relationship("ProductModel", lazy="raise")

    def __repr__(self):
        return f"<OrderLineModel(id={self.id}, order_id={self.order_id}, product_id={self.product_id}, quantity={self.quantity})>"
