"""Shared models and cross-cutting helpers for the service."""

from users_api.shared.pagination import Page
from users_api.shared.users import (
    LOGIN_MAX_LENGTH,
    NAME_MAX_LENGTH,
    NIL_USER_ID,
    UserEntity,
)

__all__ = [
    "LOGIN_MAX_LENGTH",
    "NAME_MAX_LENGTH",
    "NIL_USER_ID",
    "Page",
    "UserEntity",
]
