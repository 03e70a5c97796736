"""Catalog API endpoints.

Provides endpoints for listing products and fetching a product with
its variants.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.api.schemas import (
    CatalogResponse,
    CategorySummary,
    ErrorResponse,
    ProductDetailsResponse,
    ProductResponse,
    VariantResponse,
)
from catalog_api.catalog.models import Category, Product
from catalog_api.catalog.repository import ProductRepository, SqlProductRepository
from catalog_api.catalog.service import PaginationParams, ProductFilter
from catalog_api.domain.exceptions import RepositoryError
from catalog_api.infrastructure.database import get_session

logger = structlog.get_logger()

router = APIRouter(prefix="/catalog", tags=["Catalog"])


# ============================================================================
# Dependencies
# ============================================================================


def get_product_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ProductRepository:
    """Get product repository bound to the request session."""
    return SqlProductRepository(session)


# ============================================================================
# Converters
# ============================================================================


def category_to_summary(category: Category | None) -> CategorySummary | None:
    """Convert Category model to embedded summary."""
    if category is None:
        return None
    return CategorySummary(code=category.code, name=category.name)


def product_to_response(product: Product) -> ProductResponse:
    """Convert Product model to listing entry."""
    return ProductResponse(
        code=product.code,
        price=float(product.price),
        category=category_to_summary(product.category),
    )


def product_to_details(product: Product) -> ProductDetailsResponse:
    """Convert Product model to detail response, resolving variant prices."""
    return ProductDetailsResponse(
        code=product.code,
        price=float(product.price),
        category=category_to_summary(product.category),
        variants=[
            VariantResponse(
                name=variant.name,
                sku=variant.sku,
                price=float(variant.effective_price(product.price)),
            )
            for variant in product.variants
        ],
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=CatalogResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
    summary="List products",
    description="List products with optional category and price filters.",
)
async def list_products(
    repo: Annotated[ProductRepository, Depends(get_product_repository)],
    offset: Annotated[str | None, Query()] = None,
    limit: Annotated[str | None, Query()] = None,
    category: Annotated[str | None, Query()] = None,
    price_less_than: Annotated[str | None, Query()] = None,
) -> CatalogResponse:
    """List products.

    Query values are parsed leniently: anything that does not parse
    falls back to that parameter's default instead of failing.

    Args:
        repo: Product repository.
        offset: Rows to skip (default 0).
        limit: Page size, clamped to [1, 100] (default 10).
        category: Category code filter.
        price_less_than: Strict upper price bound.

    Returns:
        Page of products and the total matching the filters.

    Raises:
        HTTPException: If the store fails.
    """
    filters = ProductFilter.from_query(category=category, price_less_than=price_less_than)
    pagination = PaginationParams.from_query(offset=offset, limit=limit)

    try:
        page = await repo.list_products(filters, pagination)
    except RepositoryError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="failed to fetch products",
        )

    return CatalogResponse(
        products=[product_to_response(p) for p in page.items],
        total=page.total,
    )


@router.get(
    "/{code}",
    response_model=ProductDetailsResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Get product",
    description="Get a product by code, including its variants.",
)
async def get_product(
    code: str,
    repo: Annotated[ProductRepository, Depends(get_product_repository)],
) -> ProductDetailsResponse:
    """Get a product by code.

    Args:
        code: Product code.
        repo: Product repository.

    Returns:
        Product details with resolved variant prices.

    Raises:
        HTTPException: 400 for an empty code, 404 if not found,
            500 if the store fails.
    """
    if not code.strip():
        logger.warning("Rejected product lookup with empty code")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="product code is required",
        )

    try:
        product = await repo.get_by_code(code)
    except RepositoryError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="failed to fetch product",
        )

    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="product not found",
        )

    return product_to_details(product)
