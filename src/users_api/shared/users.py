"""User entity shared by the repository and API layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

NIL_USER_ID = UUID(int=0)
LOGIN_MAX_LENGTH = 64
NAME_MAX_LENGTH = 128


@dataclass(slots=True)
class UserEntity:
    """Server-side representation of a user."""

    id: UUID = NIL_USER_ID
    login: str = ""
    first_name: str = ""
    last_name: str = ""
    games_played: int = 0
    current_game_id: UUID | None = field(default=None)

    @property
    def has_identity(self) -> bool:
        """Return True once the entity carries a non-nil identifier."""
        return self.id != NIL_USER_ID
