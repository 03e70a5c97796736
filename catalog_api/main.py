"""Catalog API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog_api.api.catalog import router as catalog_router
from catalog_api.api.categories import router as categories_router
from catalog_api.api.health import router as health_router
from catalog_api.api.middleware import setup_middleware
from catalog_api.infrastructure.config import settings
from catalog_api.infrastructure.database import create_tables, engine
from catalog_api.infrastructure.logging import configure_logging

configure_logging(settings.log_level, debug=settings.debug)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    logger.info(
        "Starting catalog API",
        version=settings.api_version,
        debug=settings.debug,
    )

    if settings.create_tables_on_startup:
        await create_tables()
        logger.info("Database tables ensured")

    yield

    logger.info("Shutting down catalog API")
    await engine.dispose()


app = FastAPI(
    title="Catalog API",
    description="Product catalog: products, categories and variants",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_middleware(app)

app.include_router(health_router, tags=["Health"])
app.include_router(catalog_router)
app.include_router(categories_router)
