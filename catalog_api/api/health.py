"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

import structlog
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from catalog_api.infrastructure import database
from catalog_api.infrastructure.config import settings

logger = structlog.get_logger()

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    return HealthResponse(
        status="healthy",
        service="catalog-api",
        version=settings.api_version,
    )


@router.get("/ready")
async def readiness_check() -> dict[str, str]:
    """Check if service is ready to accept requests.

    Returns:
        Readiness status.

    Raises:
        HTTPException: 503 if the database is unreachable.
    """
    try:
        await database.ping()
    except (SQLAlchemyError, OSError):
        logger.exception("Readiness check failed")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="database unavailable",
        )
    return {"status": "ready"}
