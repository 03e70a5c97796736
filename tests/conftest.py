"""Shared fixtures for catalog API tests."""

from collections.abc import AsyncGenerator, Generator
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from catalog_api.api.catalog import get_product_repository
from catalog_api.api.categories import get_category_repository
from catalog_api.catalog.models import Category, Product, Variant
from catalog_api.catalog.repository import CategoryRepository, ProductRepository
from catalog_api.infrastructure.database import Base
from catalog_api.main import app


# ============================================================================
# Client Fixtures
# ============================================================================


@pytest.fixture
def product_repo() -> AsyncMock:
    """Product repository double."""
    return AsyncMock(spec=ProductRepository)


@pytest.fixture
def category_repo() -> AsyncMock:
    """Category repository double."""
    return AsyncMock(spec=CategoryRepository)


@pytest.fixture
def client(
    product_repo: AsyncMock, category_repo: AsyncMock
) -> Generator[TestClient, None, None]:
    """Create test client with repository doubles wired in."""
    app.dependency_overrides[get_product_repository] = lambda: product_repo
    app.dependency_overrides[get_category_repository] = lambda: category_repo
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def clothing() -> Category:
    """Sample category."""
    return Category(id=1, code="clothing", name="Clothing")


@pytest.fixture
def sample_product(clothing: Category) -> Product:
    """Product with one priced and one inheriting variant."""
    return Product(
        id=1,
        code="PROD001",
        price=Decimal("10.99"),
        category_id=clothing.id,
        category=clothing,
        variants=[
            Variant(id=1, product_id=1, name="Variant A", sku="SKU001A", price=Decimal("11.99")),
            Variant(id=2, product_id=1, name="Variant B", sku="SKU001B", price=Decimal("0")),
        ],
    )


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest_asyncio.fixture
async def session() -> AsyncGenerator[AsyncSession, None]:
    """In-memory SQLite session with the catalog schema created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as db_session:
        yield db_session

    await engine.dispose()
