"""SQLAlchemy-backed implementation of :class:`UserRepository`."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import uuid4

from sqlalchemy import func, select

from users_api.database.repositories.base import UserNotFoundError
from users_api.database.schemas import UserSchema
from users_api.shared import Page, UserEntity

if TYPE_CHECKING:
    from uuid import UUID

    from sqlalchemy.orm import Session


def _to_entity(row: UserSchema) -> UserEntity:
    return UserEntity(
        id=row.id,
        login=row.login,
        first_name=row.first_name,
        last_name=row.last_name,
        games_played=row.games_played,
        current_game_id=row.current_game_id,
    )


def _copy_fields(user: UserEntity, row: UserSchema) -> None:
    row.login = user.login
    row.first_name = user.first_name
    row.last_name = user.last_name
    row.games_played = user.games_played
    row.current_game_id = user.current_game_id


class SqlAlchemyUserRepository:
    """Encapsulates persistence operations for :class:`UserSchema`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_by_id(self, user_id: UUID) -> UserEntity | None:
        """Return user entity by user's ID."""
        row = self._session.get(UserSchema, user_id)
        return _to_entity(row) if row is not None else None

    def insert(self, user: UserEntity) -> UserEntity:
        """Add new user to database."""
        if user.has_identity:
            msg = "Cannot insert a user that already has an identifier."
            raise ValueError(msg)
        row = UserSchema(id=uuid4())
        _copy_fields(user, row)
        self._session.add(row)
        self._session.flush()
        return _to_entity(row)

    def update(self, user: UserEntity) -> None:
        """Overwrite the stored columns of an existing user."""
        row = self._session.get(UserSchema, user.id)
        if row is None:
            raise UserNotFoundError(user.id)
        _copy_fields(user, row)
        self._session.flush()

    def update_or_insert(self, user: UserEntity) -> bool:
        """Update the user in place, or add it under its own ID."""
        row = self._session.get(UserSchema, user.id)
        is_new = row is None
        if row is None:
            row = UserSchema(id=user.id)
            self._session.add(row)
        _copy_fields(user, row)
        self._session.flush()
        return is_new

    def delete(self, user_id: UUID) -> None:
        """Remove user from database."""
        row = self._session.get(UserSchema, user_id)
        if row is None:
            raise UserNotFoundError(user_id)
        self._session.delete(row)
        self._session.flush()

    def get_page(self, page_number: int, page_size: int) -> Page[UserEntity]:
        """Return one page of users ordered by login."""
        total = self._session.scalar(select(func.count()).select_from(UserSchema))
        stmt = (
            select(UserSchema)
            .order_by(UserSchema.login, UserSchema.id)
            .offset((page_number - 1) * page_size)
            .limit(page_size)
        )
        rows = self._session.scalars(stmt).all()
        return Page(
            items=[_to_entity(row) for row in rows],
            total_count=total or 0,
            current_page=page_number,
            page_size=page_size,
        )
