"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import Depends

from users_api.api.services import UserMapper
from users_api.database import UserRepository, get_user_repository

_user_mapper = UserMapper()


def get_user_mapper() -> UserMapper:
    """Return the shared :class:`UserMapper` instance."""

    return _user_mapper


def parse_user_id(raw: str) -> UUID | None:
    """Return *raw* as a UUID, or ``None`` when it is not one."""

    try:
        return UUID(raw)
    except ValueError:
        return None


RepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
MapperDep = Annotated[UserMapper, Depends(get_user_mapper)]

__all__ = ["MapperDep", "RepositoryDep", "get_user_mapper", "parse_user_id"]
