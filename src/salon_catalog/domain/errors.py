"""Domain error classes.

Protocol-agnostic errors that represent catalog failures.
These errors are translated to HTTP responses by the entrypoint adapters.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Protocol-agnostic. Contains error information that can be
    translated to an HTTP (or any other) response format.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context for the error (e.g., field names, urls)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Validation error for caller-supplied parameters.

    Examples:
        - Unknown price bucket ("cheap" instead of "low")
        - Negative display offset

    Protocol mappings:
        - REST: 422 Unprocessable Entity
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
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "price_bucket", "message": "Unknown bucket"}]
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
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Service identity not present in the current catalog

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Service")
            identifier: Resource identifier
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class CatalogFetchError(DomainError):
    """A catalog traversal could not complete.

    Fatal to the current traversal attempt: whatever was accumulated
    from earlier pages is discarded, and the previously loaded catalog
    (if any) stays in place.

    Protocol mappings:
        - REST: 502 Bad Gateway
    """

    error_code: str = "UPSTREAM_ERROR"


class TransportFailure(CatalogFetchError):
    """Network-level failure while requesting a listing page."""

    error_code: str = "UPSTREAM_UNAVAILABLE"

    def __init__(self, message: str, url: str | None = None, **context: Any) -> None:
        super().__init__(message, url=url, **context)


class HttpStatusFailure(CatalogFetchError):
    """The listing endpoint answered a page request with a non-2xx status."""

    error_code: str = "UPSTREAM_STATUS"

    def __init__(
        self,
        status_code: int,
        reason: str = "",
        url: str | None = None,
        **context: Any,
    ) -> None:
        self.status_code = status_code
        message = f"HTTP {status_code}: {reason}" if reason else f"HTTP {status_code}"
        super().__init__(message, status_code=status_code, url=url, **context)
