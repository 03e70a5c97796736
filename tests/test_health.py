"""Tests for health check endpoints."""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from catalog_api.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client."""
    return TestClient(app)


def test_health_check(client: TestClient) -> None:
    """Test health endpoint returns healthy status."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "catalog-api"
    assert "version" in data


def test_readiness_check(client: TestClient) -> None:
    """Test readiness endpoint returns ready when the database answers."""
    with patch("catalog_api.infrastructure.database.ping", new=AsyncMock()):
        response = client.get("/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ready"}


def test_readiness_check_database_down(client: TestClient) -> None:
    """Test readiness endpoint returns 503 when the database is unreachable."""
    failing_ping = AsyncMock(side_effect=OperationalError("SELECT 1", {}, Exception("down")))
    with patch("catalog_api.infrastructure.database.ping", new=failing_ping):
        response = client.get("/ready")
    assert response.status_code == 503
    assert response.json() == {"error": "database unavailable"}
