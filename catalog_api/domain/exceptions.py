"""Domain exceptions.

Errors raised below the HTTP layer. Handlers translate them into
status codes; the messages and details never reach the client.
"""

from typing import Any


class CatalogError(Exception):
    """Base class for all catalog exceptions.

    All catalog errors should inherit from this class to allow
    catching them at the API layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize catalog error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class RepositoryError(CatalogError):
    """Raised when a query or connection to the store fails."""

    def __init__(self, operation: str, reason: str) -> None:
        """Initialize repository error.

        Args:
            operation: Repository operation that failed (e.g. "products.list").
            reason: Underlying failure description.
        """
        super().__init__(
            f"Repository operation '{operation}' failed: {reason}",
            details={"operation": operation, "reason": reason},
        )
        self.operation = operation
