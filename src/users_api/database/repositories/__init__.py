"""User repository contract and its storage adapters."""

from users_api.database.repositories.base import UserNotFoundError, UserRepository
from users_api.database.repositories.memory import InMemoryUserRepository
from users_api.database.repositories.user import SqlAlchemyUserRepository

__all__ = [
    "InMemoryUserRepository",
    "SqlAlchemyUserRepository",
    "UserNotFoundError",
    "UserRepository",
]
