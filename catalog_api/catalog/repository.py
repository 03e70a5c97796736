"""Repositories for catalog database operations.

Handlers depend on the abstract ``ProductRepository`` and
``CategoryRepository`` interfaces; the SQLAlchemy implementations
below are wired in through FastAPI dependencies.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

import structlog
from sqlalchemy import Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from catalog_api.catalog.models import Category, Product
from catalog_api.catalog.service import PaginatedResult, PaginationParams, ProductFilter
from catalog_api.domain.exceptions import RepositoryError

logger = structlog.get_logger()


class ProductRepository(ABC):
    """Read access to products."""

    @abstractmethod
    async def list_products(
        self,
        filters: ProductFilter,
        pagination: PaginationParams,
    ) -> PaginatedResult[Product]:
        """List products matching filters.

        Args:
            filters: Category and price filters.
            pagination: Offset and limit.

        Returns:
            Page of products with their category and variants loaded, and
            the total count matching the filters.

        Raises:
            RepositoryError: If the store fails.
        """

    @abstractmethod
    async def get_by_code(self, code: str) -> Product | None:
        """Get product by code.

        Args:
            code: Product code.

        Returns:
            Product with category and variants loaded, or None if not found.

        Raises:
            RepositoryError: If the store fails.
        """


class CategoryRepository(ABC):
    """Read/create access to categories."""

    @abstractmethod
    async def get_all(self) -> Sequence[Category]:
        """Get all categories in storage order.

        Raises:
            RepositoryError: If the store fails.
        """

    @abstractmethod
    async def create(self, category: Category) -> Category:
        """Persist a new category.

        Raises:
            RepositoryError: If the store fails, including a duplicate code.
        """


class SqlProductRepository(ProductRepository):
    """SQLAlchemy implementation of ProductRepository.

    Example usage:
        async with async_session_factory() as session:
            repo = SqlProductRepository(session)
            page = await repo.list_products(
                ProductFilter(category_code="shoes"),
                PaginationParams(offset=0, limit=10),
            )
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def list_products(
        self,
        filters: ProductFilter,
        pagination: PaginationParams,
    ) -> PaginatedResult[Product]:
        query = self._apply_filters(select(Product), filters)
        count_query = self._apply_filters(select(func.count(Product.id)), filters)

        try:
            total = (await self.session.execute(count_query)).scalar_one()

            query = (
                query.options(
                    selectinload(Product.category),
                    selectinload(Product.variants),
                )
                .offset(pagination.offset)
                .limit(pagination.limit)
            )
            result = await self.session.execute(query)
            products = list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.exception(
                "Failed to list products",
                category=filters.category_code,
                offset=pagination.offset,
                limit=pagination.limit,
            )
            raise RepositoryError("products.list", str(e)) from e

        return PaginatedResult(items=products, total=total)

    async def get_by_code(self, code: str) -> Product | None:
        query = (
            select(Product)
            .where(Product.code == code)
            .options(
                selectinload(Product.category),
                selectinload(Product.variants),
            )
        )

        try:
            result = await self.session.execute(query)
            return result.scalars().first()
        except SQLAlchemyError as e:
            logger.exception("Failed to fetch product", code=code)
            raise RepositoryError("products.get_by_code", str(e)) from e

    @staticmethod
    def _apply_filters(query: Select, filters: ProductFilter) -> Select:
        """Add WHERE/JOIN clauses for the given filters.

        Args:
            query: Base select over products.
            filters: Filters to apply.

        Returns:
            Filtered select.
        """
        if filters.category_code:
            query = query.join(Category, Category.id == Product.category_id).where(
                Category.code == filters.category_code
            )

        if filters.price_less_than is not None:
            query = query.where(Product.price < filters.price_less_than)

        return query


class SqlCategoryRepository(CategoryRepository):
    """SQLAlchemy implementation of CategoryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def get_all(self) -> Sequence[Category]:
        try:
            result = await self.session.execute(select(Category))
            return result.scalars().all()
        except SQLAlchemyError as e:
            logger.exception("Failed to list categories")
            raise RepositoryError("categories.get_all", str(e)) from e

    async def create(self, category: Category) -> Category:
        self.session.add(category)
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.exception("Failed to create category", code=category.code)
            raise RepositoryError("categories.create", str(e)) from e
        return category
