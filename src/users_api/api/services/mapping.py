"""Translation between stored users and their API representations."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from users_api.api.models import UserCreateRequest, UserResponse, UserUpdateRequest
from users_api.shared import UserEntity

if TYPE_CHECKING:
    from collections.abc import Iterable
    from uuid import UUID


class UserMapper:
    """Maps :class:`UserEntity` objects to DTOs and back."""

    def to_response(self, user: UserEntity) -> UserResponse:
        return UserResponse(
            id=user.id,
            login=user.login,
            full_name=f"{user.last_name} {user.first_name}",
            games_played=user.games_played,
            current_game_id=user.current_game_id,
        )

    def to_responses(self, users: Iterable[UserEntity]) -> list[UserResponse]:
        return [self.to_response(user) for user in users]

    def from_create_request(self, request: UserCreateRequest) -> UserEntity:
        """Build an entity without identity; the repository assigns one."""
        return UserEntity(
            login=request.login,
            first_name=request.first_name,
            last_name=request.last_name,
        )

    def from_update_request(self, request: UserUpdateRequest, user_id: UUID) -> UserEntity:
        """Build a fresh entity under *user_id* from a full replacement."""
        return UserEntity(
            id=user_id,
            login=request.login,
            first_name=request.first_name,
            last_name=request.last_name,
        )

    def to_update_request(self, user: UserEntity) -> UserUpdateRequest:
        """Project the editable fields of *user*.

        ``model_construct`` skips validation: stored data is projected as-is
        and validated only after a patch is applied.
        """
        return UserUpdateRequest.model_construct(
            login=user.login,
            first_name=user.first_name,
            last_name=user.last_name,
        )

    def merge_update(self, request: UserUpdateRequest, user: UserEntity) -> UserEntity:
        """Return *user* with the editable fields taken from *request*."""
        return replace(
            user,
            login=request.login,
            first_name=request.first_name,
            last_name=request.last_name,
        )
