"""Process-local implementation of :class:`UserRepository`."""

from __future__ import annotations

import threading
from dataclasses import replace
from typing import TYPE_CHECKING
from uuid import uuid4

from users_api.database.repositories.base import UserNotFoundError
from users_api.shared import Page, UserEntity

if TYPE_CHECKING:
    from uuid import UUID


class InMemoryUserRepository:
    """Dictionary-backed user store guarded by a lock.

    Entities are copied on the way in and on the way out so callers never
    hold a reference to stored state.
    """

    def __init__(self) -> None:
        self._users: dict[UUID, UserEntity] = {}
        self._lock = threading.Lock()

    def find_by_id(self, user_id: UUID) -> UserEntity | None:
        with self._lock:
            user = self._users.get(user_id)
            return replace(user) if user is not None else None

    def insert(self, user: UserEntity) -> UserEntity:
        if user.has_identity:
            msg = "Cannot insert a user that already has an identifier."
            raise ValueError(msg)
        with self._lock:
            stored = replace(user, id=uuid4())
            self._users[stored.id] = stored
            return replace(stored)

    def update(self, user: UserEntity) -> None:
        with self._lock:
            if user.id not in self._users:
                raise UserNotFoundError(user.id)
            self._users[user.id] = replace(user)

    def update_or_insert(self, user: UserEntity) -> bool:
        with self._lock:
            is_new = user.id not in self._users
            self._users[user.id] = replace(user)
            return is_new

    def delete(self, user_id: UUID) -> None:
        with self._lock:
            if self._users.pop(user_id, None) is None:
                raise UserNotFoundError(user_id)

    def get_page(self, page_number: int, page_size: int) -> Page[UserEntity]:
        with self._lock:
            ordered = sorted(
                self._users.values(), key=lambda user: (user.login, str(user.id))
            )
            start = (page_number - 1) * page_size
            items = [replace(user) for user in ordered[start : start + page_size]]
            return Page(
                items=items,
                total_count=len(ordered),
                current_page=page_number,
                page_size=page_size,
            )

    def clear(self) -> None:
        """Drop every stored user."""
        with self._lock:
            self._users.clear()
