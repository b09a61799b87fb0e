"""Domain error classes.

Errors raised by the listings core when a request cannot be served.
They carry no HTTP knowledge; the exception handlers in
``entrypoints.http`` turn them into responses.
"""

from typing import Any


class DomainError(Exception):
    """Root of the listings error hierarchy.

    Subclasses only pick an ``error_code``; the HTTP layer derives the
    status code and the response envelope from it.
    """

    # Stable machine-readable code, echoed to clients as "code"
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable description, safe to show to a client for 4xx
            **context: Extra data for logs and handlers (e.g. operation="search")
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Flatten message, code and context into a plain dict."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Malformed or out-of-range input.

    Always recoverable by the caller and never retried.

    Examples:
        - limit above the page ceiling
        - status outside {active, inactive}
        - listing title shorter than 3 characters
        - categoryId pointing at a missing category

    Protocol mappings:
        - REST: 400 Bad Request with per-field details
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Summary line; defaults depend on whether field errors are given
            errors: One dict per offending field with "field", "message" and "code"
                   Example: [{"field": "limit", "message": "Must be <= 50"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Include the per-field errors when there are any."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class UnauthorizedError(DomainError):
    """Caller identity missing or invalid.

    Protocol mappings:
        - REST: 401 Unauthorized
    """

    error_code: str = "UNAUTHORIZED"


class ForbiddenError(DomainError):
    """Caller identified but not allowed to perform the operation.

    Protocol mappings:
        - REST: 403 Forbidden
    """

    error_code: str = "FORBIDDEN"


class BackendError(DomainError):
    """Failure reported by the persistence layer.

    Connection loss, statement timeouts and constraint violations all end up
    here. The message is for logs only; callers get an opaque response.

    Protocol mappings:
        - REST: 500 Internal Server Error (generic body)
    """

    error_code: str = "BACKEND_ERROR"

