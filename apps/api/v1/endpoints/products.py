"""Product and category endpoints for REST API."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from core.application.dtos import (
    CategoryDTO,
    CreateCategoryRequest,
    ProductDTO,
    ProductRequest,
)
from core.application.services import CatalogApplicationService

from apps.api.deps import get_catalog_service

router = APIRouter(prefix="/products", tags=["products"])
categories_router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=List[ProductDTO])
async def list_products(
    search: Optional[str] = Query(
        default=None, description="Matches product name or category name, case-insensitive"
    ),
    service: CatalogApplicationService = Depends(get_catalog_service),
) -> List[ProductDTO]:
    """List products with their category, optionally filtered by a search term."""
    return await service.list_products(search)


@router.post("", response_model=ProductDTO, status_code=status.HTTP_201_CREATED)
async def create_product(
    request: ProductRequest,
    response: Response,
    service: CatalogApplicationService = Depends(get_catalog_service),
) -> ProductDTO:
    """Create a new product.

    Args:
        request: ProductRequest DTO
        response: Outgoing response (for the Location header)
        service: CatalogApplicationService instance

    Returns:
        ProductDTO with the assigned id
    """
    product = await service.create_product(request)
    response.headers["Location"] = f"/api/products/{product.id}"
    return product


@router.put("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def update_product(
    product_id: int,
    request: ProductRequest,
    service: CatalogApplicationService = Depends(get_catalog_service),
) -> Response:
    """Replace name, price, brand and category of a product.

    Raises:
        EntityNotFoundError: If the product does not exist (404)
    """
    await service.update_product(product_id, request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@categories_router.get("", response_model=List[CategoryDTO])
async def list_categories(
    service: CatalogApplicationService = Depends(get_catalog_service),
) -> List[CategoryDTO]:
    """List categories, each with its products."""
    return await service.list_categories()


@categories_router.post("", response_model=CategoryDTO, status_code=status.HTTP_201_CREATED)
async def create_category(
    request: CreateCategoryRequest,
    response: Response,
    service: CatalogApplicationService = Depends(get_catalog_service),
) -> CategoryDTO:
    """Create a new category."""
    category = await service.create_category(request)
    response.headers["Location"] = f"/api/categories/{category.id}"
    return category
