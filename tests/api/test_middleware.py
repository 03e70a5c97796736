"""Tests for request ID middleware and error rendering."""

from unittest.mock import AsyncMock

from fastapi.testclient import TestClient

from catalog_api.catalog.service import PaginatedResult
from catalog_api.main import app


class TestRequestIdMiddleware:
    """Tests for X-Request-ID handling."""

    def test_generates_request_id(self, client: TestClient, category_repo: AsyncMock) -> None:
        """Should add a request ID when the client sends none."""
        category_repo.get_all.return_value = []

        response = client.get("/categories")

        assert response.headers.get("X-Request-ID")

    def test_echoes_request_id(self, client: TestClient, product_repo: AsyncMock) -> None:
        """Should echo the client's request ID."""
        product_repo.list_products.return_value = PaginatedResult(items=[], total=0)

        response = client.get("/catalog", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"


class TestErrorEnvelope:
    """Tests for the {"error": ...} envelope."""

    def test_unknown_route(self, client: TestClient) -> None:
        """Should render 404 for unknown routes in the envelope."""
        response = client.get("/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_method_not_allowed(self, client: TestClient) -> None:
        """Should render 405 in the envelope."""
        response = client.delete("/categories")

        assert response.status_code == 405
        assert response.json() == {"error": "Method Not Allowed"}

    def test_unhandled_exception(self, product_repo: AsyncMock) -> None:
        """Should hide unexpected errors behind a generic 500."""
        from catalog_api.api.catalog import get_product_repository

        product_repo.list_products.side_effect = RuntimeError("unexpected")
        app.dependency_overrides[get_product_repository] = lambda: product_repo
        try:
            client = TestClient(app, raise_server_exceptions=False)
            response = client.get("/catalog", headers={"X-Request-ID": "req-500"})
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {"error": "internal server error"}
        assert response.headers["X-Request-ID"] == "req-500"
