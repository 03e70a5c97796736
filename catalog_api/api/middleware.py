"""API middleware and error rendering.

Provides:
- Request ID correlation, access logging and the 500 fallback
- The ``{"error": <message>}`` envelope for every error response
"""

import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, HTTPException, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger()


# ============================================================================
# Request ID Middleware
# ============================================================================


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Middleware to add request ID for correlation.

    Generates or extracts a request ID and adds it to:
    - Request state for access in handlers
    - Response headers for client correlation
    - Log context for tracing
    """

    HEADER_NAME = "X-Request-ID"

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Process request with correlation ID.

        Args:
            request: Incoming request.
            call_next: Next middleware/handler.

        Returns:
            Response with request ID header.
        """
        request_id = request.headers.get(self.HEADER_NAME) or str(uuid4())
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(
                "Unhandled exception",
                path=request.url.path,
                method=request.method,
                error=str(e),
            )
            response = error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR, "internal server error"
            )

        duration_ms = (time.perf_counter() - start_time) * 1000

        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
        )

        structlog.contextvars.unbind_contextvars("request_id")

        response.headers[self.HEADER_NAME] = request_id

        return response


# ============================================================================
# Exception Handlers
# ============================================================================


def error_response(status_code: int, message: str) -> JSONResponse:
    """Render the standard error envelope.

    Args:
        status_code: HTTP status.
        message: Client-facing message.

    Returns:
        JSON response ``{"error": message}``.
    """
    return JSONResponse(status_code=status_code, content={"error": message})


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle HTTP exceptions with consistent format."""
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report request validation failures as 400."""
    logger.warning(
        "Request validation failed",
        path=request.url.path,
        errors=exc.errors(),
    )
    return error_response(status.HTTP_400_BAD_REQUEST, "invalid request")


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions with consistent format."""
    logger.exception(
        "Unhandled exception in handler",
        path=request.url.path,
        method=request.method,
        error=str(exc),
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal server error")


# ============================================================================
# Setup
# ============================================================================


def setup_middleware(app: FastAPI) -> None:
    """Configure middleware and exception handlers for the application.

    Args:
        app: FastAPI application instance.
    """
    app.add_middleware(RequestIdMiddleware)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
