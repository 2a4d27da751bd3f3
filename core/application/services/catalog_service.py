"""Application service for the product catalog (categories and products)."""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos import (
    CategoryDTO,
    CreateCategoryRequest,
    ProductDTO,
    ProductRequest,
)
from core.data.mappers import CategoryMapper, ProductMapper
from core.data.models import CategoryModel, ProductModel
from core.data.uow import create_uow
from core.domain.exceptions import EntityNotFoundError


logger = logging.getLogger(__name__)


class CatalogApplicationService:
    """
    Application service for categories and products.

    Products are always listed with their category; categories are listed
    with their products.
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize catalog application service.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory

    async def list_products(self, search: Optional[str] = None) -> List[ProductDTO]:
        """List products with their category.

        Args:
            search: Case-insensitive text matched against the product name
                or the category name, as given; blank means no filter

        Returns:
            Matching ProductDTOs, possibly empty
        """
        term = search if search and search.strip() else None
        async with create_uow(self._session_factory) as uow:
            products = await uow.products.search_with_category(term)
            return [ProductMapper.to_dto(product) for product in products]

    async def create_product(self, request: ProductRequest) -> ProductDTO:
        """Create a product.

        Args:
            request: ProductRequest DTO

        Returns:
            Shallow ProductDTO with the assigned id
        """
        async with create_uow(self._session_factory) as uow:
            product = await uow.products.add(
                ProductModel(
                    product_name=request.product_name,
                    price=request.price,
                    brand=request.brand,
                    category_id=request.category_id,
                )
            )
            await uow.commit()
            logger.info(f"Created product {product.id} ({product.product_name})")
            return ProductMapper.to_dto(product)

    async def update_product(self, product_id: int, request: ProductRequest) -> None:
        """Overwrite name, price, brand and category of a product.

        Args:
            product_id: Product ID
            request: ProductRequest DTO with the new values

        Raises:
            EntityNotFoundError: If no product has this id
        """
        async with create_uow(self._session_factory) as uow:
            product = await uow.products.get(product_id)
            if product is None:
                raise EntityNotFoundError("Product", product_id)

            product.product_name = request.product_name
            product.price = request.price
            product.brand = request.brand
            product.category_id = request.category_id
            await uow.commit()

        logger.info(f"Updated product {product_id}")

    async def list_categories(self) -> List[CategoryDTO]:
        """List categories, each with its products."""
        async with create_uow(self._session_factory) as uow:
            categories = await uow.categories.find_all_with_products()
            return [CategoryMapper.to_dto(category) for category in categories]

    async def create_category(self, request: CreateCategoryRequest) -> CategoryDTO:
        """Create a category.

        Args:
            request: CreateCategoryRequest DTO

        Returns:
            Shallow CategoryDTO with the assigned id
        """
        async with create_uow(self._session_factory) as uow:
            category = await uow.categories.add(
                CategoryModel(category_name=request.category_name)
            )
            await uow.commit()
            logger.info(f"Created category {category.id} ({category.category_name})")
            return CategoryMapper.to_dto(category)
