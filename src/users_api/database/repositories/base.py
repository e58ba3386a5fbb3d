"""Repository contract shared by every user storage backend.

The API layer only talks to :class:`UserRepository`; concrete adapters
(in-memory, SQLAlchemy) are chosen at wiring time and must comply with this
protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from uuid import UUID

    from users_api.shared import Page, UserEntity


class UserNotFoundError(LookupError):
    """Raised when an operation targets a user that is not stored."""

    def __init__(self, user_id: UUID) -> None:
        super().__init__(f"User {user_id} does not exist.")
        self.user_id = user_id


class UserRepository(Protocol):
    """Protocol describing how users are persisted."""

    def find_by_id(self, user_id: UUID) -> UserEntity | None:
        """Return the user stored under *user_id* or ``None``."""

    def insert(self, user: UserEntity) -> UserEntity:
        """Store *user* under a freshly generated identifier and return it."""

    def update(self, user: UserEntity) -> None:
        """Replace the stored user sharing *user*'s identifier."""

    def update_or_insert(self, user: UserEntity) -> bool:
        """Store *user* under its own identifier; return True if it was new."""

    def delete(self, user_id: UUID) -> None:
        """Remove the user stored under *user_id*."""

    def get_page(self, page_number: int, page_size: int) -> Page[UserEntity]:
        """Return one page of users ordered by login."""
