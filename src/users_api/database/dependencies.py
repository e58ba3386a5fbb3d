"""FastAPI dependencies for user storage."""

from collections.abc import Iterator
from functools import cache
from typing import Annotated

from fastapi import Depends

from users_api.database.repositories import (
    InMemoryUserRepository,
    SqlAlchemyUserRepository,
    UserRepository,
)
from users_api.database.service import DatabaseService
from users_api.settings import BackendSettings, get_settings

SettingsDep = Annotated[BackendSettings, Depends(get_settings)]


@cache
def _build_database_service(database_url: str) -> DatabaseService:
    """Create a cached :class:`DatabaseService` for the given connection string."""
    return DatabaseService(database_url)


@cache
def get_memory_repository() -> InMemoryUserRepository:
    """Return the process-wide in-memory repository."""
    return InMemoryUserRepository()


def get_database(settings: SettingsDep) -> DatabaseService:
    """Return the cached database service instance."""
    return _build_database_service(settings.database_url)


def get_user_repository(settings: SettingsDep) -> Iterator[UserRepository]:
    """Yield the repository selected by ``user_repository_backend``.

    The database backend opens one transactional session per request.
    """
    if settings.user_repository_backend == "memory":
        yield get_memory_repository()
        return
    with get_database(settings).session() as session:
        yield SqlAlchemyUserRepository(session)
