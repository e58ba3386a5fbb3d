"""Service layer for API-specific logic."""

from users_api.api.services.mapping import UserMapper
from users_api.api.services.patching import apply_patch, validate_payload

__all__ = [
    "UserMapper",
    "apply_patch",
    "validate_payload",
]
