"""SQLAlchemy repositories for categories and products."""

from typing import List, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager, selectinload

from ..models import CategoryModel, ProductModel


class SqlAlchemyCategoryRepository:
    """Category queries."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_all_with_products(self) -> List[CategoryModel]:
        """List categories with their products loaded.

        Returns:
            List of CategoryModel ordered by id
        """
        result = await self._session.execute(
            select(CategoryModel)
            .options(selectinload(CategoryModel.products))
            .order_by(CategoryModel.id)
        )
        return list(result.scalars().all())

    async def add(self, category: CategoryModel) -> CategoryModel:
        """Stage a new category and flush it to obtain its id."""
        self._session.add(category)
        await self._session.flush()
        return category


class SqlAlchemyProductRepository:
    """Product queries."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, product_id: int) -> Optional[ProductModel]:
        """Load a single product without its category.

        Args:
            product_id: Product ID

        Returns:
            ProductModel if found, None otherwise
        """
        return await self._session.get(ProductModel, product_id)

    async def search_with_category(self, term: Optional[str] = None) -> List[ProductModel]:
        """List products joined with their category.

        Args:
            term: Case-insensitive substring matched against the product
                name or the category name; ``None`` lists everything

        Returns:
            List of ProductModel ordered by id, ``category`` loaded
        """
        query = (
            select(ProductModel)
            .join(ProductModel.category)
            .options(contains_eager(ProductModel.category))
            .order_by(ProductModel.id)
        )

        if term:
            needle = term.lower()
            query = query.where(
                or_(
                    func.lower(ProductModel.product_name).contains(needle, autoescape=True),
                    func.lower(CategoryModel.category_name).contains(needle, autoescape=True),
                )
            )

        result = await self._session.execute(query)
        return list(result.scalars().all())

    async def add(self, product: ProductModel) -> ProductModel:
        """Stage a new product and flush it to obtain its id."""
        self._session.add(product)
        await self._session.flush()
        return product
