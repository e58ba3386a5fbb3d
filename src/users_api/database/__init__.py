"""Database connectivity helpers and user storage adapters."""

from users_api.database.base import BaseSchema
from users_api.database.dependencies import (
    get_database,
    get_memory_repository,
    get_user_repository,
)
from users_api.database.repositories import (
    InMemoryUserRepository,
    SqlAlchemyUserRepository,
    UserNotFoundError,
    UserRepository,
)
from users_api.database.schemas import UserSchema
from users_api.database.service import DatabaseService
from users_api.settings import BackendSettings, get_settings, settings

__all__ = [
    "BackendSettings",
    "BaseSchema",
    "DatabaseService",
    "InMemoryUserRepository",
    "SqlAlchemyUserRepository",
    "UserNotFoundError",
    "UserRepository",
    "UserSchema",
    "get_database",
    "get_memory_repository",
    "get_settings",
    "get_user_repository",
    "settings",
]
