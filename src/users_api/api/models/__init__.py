"""Models used for API request and response payloads."""

from users_api.api.models.users import (
    PaginationMetadata,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "PaginationMetadata",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
]
