"""Domain errors raised at the catalog's edges.

Search input is normalized, never rejected, so these only surface for an
unknown vehicle slug, an invalid lead or an unreadable catalog file.
"""

from typing import Any


class DomainError(Exception):
    """Base class; carries an error code and context for the HTTP layer."""

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """A lead failed validation (422). `errors` holds field/message pairs."""

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        self.errors: list[dict[str, str]] | None = errors or None
        default = "Validation failed" if self.errors else "Validation error"
        super().__init__(message or default, **context)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.errors:
            data["errors"] = self.errors
        return data


class NotFoundError(DomainError):
    """No vehicle for the requested slug (404)."""

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class InternalError(DomainError):
    """Unexpected failure (500)."""

    error_code: str = "INTERNAL_ERROR"


class CatalogLoadError(InternalError):
    """The static vehicle dataset could not be read or parsed."""

    error_code: str = "CATALOG_LOAD_ERROR"
