"""Exceptions raised by the API layer.

Each exception carries a machine-readable ``error_code`` and optional
``details``; :mod:`users_api.api.exception_handlers` maps them to HTTP
responses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pydantic import ValidationError


class UsersApiError(Exception):
    """Base exception for all errors surfaced to API callers.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context.
    """

    status_code = 400
    default_error_code = "BAD_REQUEST"

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class BadRequestError(UsersApiError):
    """Raised for a missing or malformed body or an unusable identifier."""


class UnprocessableEntityError(UsersApiError):
    """Raised when a well-formed payload fails field validation.

    ``details`` maps each offending field to its list of messages.
    """

    status_code = 422
    default_error_code = "VALIDATION_ERROR"

    def __init__(
        self,
        errors: dict[str, list[str]],
        message: str = "One or more validation errors occurred.",
    ) -> None:
        super().__init__(message, details=errors)

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> UnprocessableEntityError:
        """Group pydantic errors by field name."""
        errors: dict[str, list[str]] = {}
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"]) or "body"
            message = error["msg"].removeprefix("Value error, ")
            errors.setdefault(field, []).append(message)
        return cls(errors)


class UserNotFoundApiError(UsersApiError):
    """Raised when the requested user does not exist."""

    status_code = 404
    default_error_code = "RESOURCE_NOT_FOUND"

    def __init__(self, user_id: object) -> None:
        super().__init__(f"User {user_id} not found", details={"user_id": str(user_id)})
