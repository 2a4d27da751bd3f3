"""Application DTOs for categories and products."""

from typing import List, Optional

from pydantic import Field

from .base import Amount, TransferModel


class CategoryDTO(TransferModel):
    """Response DTO for a category."""

    id: int = Field(..., description="Category ID")
    category_name: str = Field(..., description="Category name")
    products: Optional[List["ProductDTO"]] = Field(
        None, description="Products in the category, without their category"
    )


class ProductDTO(TransferModel):
    """Response DTO for a product."""

    id: int = Field(..., description="Product ID")
    product_name: str = Field(..., description="Product name")
    price: Amount = Field(..., description="Unit price")
    brand: Optional[str] = Field(None, description="Brand")
    category_id: int = Field(..., description="Category ID")
    category: Optional[CategoryDTO] = Field(
        None, description="Category, without its products"
    )


CategoryDTO.model_rebuild()


class CreateCategoryRequest(TransferModel):
    """Request DTO for creating a category."""

    category_name: str = Field(..., description="Category name")


class ProductRequest(TransferModel):
    """Request DTO for creating or replacing a product."""

    product_name: str = Field(..., description="Product name")
    price: Amount = Field(..., description="Unit price")
    brand: Optional[str] = Field(None, description="Brand")
    category_id: int = Field(..., description="Category ID")
