"""Category API endpoints.

Provides endpoints for listing and creating categories.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import TypeAdapter, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.api.schemas import CategoryCreateRequest, CategoryResponse, ErrorResponse
from catalog_api.catalog.models import Category
from catalog_api.catalog.repository import CategoryRepository, SqlCategoryRepository
from catalog_api.domain.exceptions import RepositoryError
from catalog_api.infrastructure.database import get_session

logger = structlog.get_logger()

router = APIRouter(prefix="/categories", tags=["Categories"])

# A JSON null body decodes to None and is reported as missing fields.
_create_request_adapter = TypeAdapter(CategoryCreateRequest | None)


# ============================================================================
# Dependencies
# ============================================================================


def get_category_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CategoryRepository:
    """Get category repository bound to the request session."""
    return SqlCategoryRepository(session)


async def parse_create_request(request: Request) -> CategoryCreateRequest:
    """Decode and validate the category creation body.

    The body is decoded by hand so that malformed JSON and missing
    fields both answer 400 rather than FastAPI's 422.

    Raises:
        HTTPException: 400 on malformed JSON or missing fields.
    """
    try:
        body = _create_request_adapter.validate_json(await request.body())
    except ValidationError:
        logger.warning("Rejected category with invalid body")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="invalid request body",
        )

    if body is None or not body.code or not body.name:
        logger.warning("Rejected category with missing fields")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="code and name are required",
        )

    return body


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=list[CategoryResponse],
    responses={500: {"model": ErrorResponse}},
    summary="List categories",
    description="List all categories.",
)
async def list_categories(
    repo: Annotated[CategoryRepository, Depends(get_category_repository)],
) -> list[CategoryResponse]:
    """List all categories in storage order.

    Raises:
        HTTPException: If the store fails.
    """
    try:
        categories = await repo.get_all()
    except RepositoryError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="failed to fetch categories",
        )

    return [CategoryResponse(code=c.code, name=c.name) for c in categories]


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Create category",
    description="Create a category from a JSON body with code and name.",
)
async def create_category(
    body: Annotated[CategoryCreateRequest, Depends(parse_create_request)],
    repo: Annotated[CategoryRepository, Depends(get_category_repository)],
) -> CategoryResponse:
    """Create a category.

    Args:
        body: Validated request body.
        repo: Category repository.

    Returns:
        The created category.

    Raises:
        HTTPException: If the store fails, including a duplicate code.
    """
    category = Category(code=body.code, name=body.name)

    try:
        created = await repo.create(category)
    except RepositoryError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="failed to create category",
        )

    logger.info("Category created", code=created.code)
    return CategoryResponse(code=created.code, name=created.name)
