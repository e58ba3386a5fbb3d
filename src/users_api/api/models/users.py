"""Pydantic models for the users resource."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from users_api.shared import LOGIN_MAX_LENGTH, NAME_MAX_LENGTH

DEFAULT_FIRST_NAME = "John"
DEFAULT_LAST_NAME = "Doe"
INVALID_LOGIN_MESSAGE = "Invalid login format"


def _validate_login(value: str) -> str:
    # Letters and decimal digits only; other numerics such as "²" are rejected.
    if not value or not all(char.isalpha() or char.isdecimal() for char in value):
        raise ValueError(INVALID_LOGIN_MESSAGE)
    return value


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserCreateRequest(_CamelModel):
    """Payload for creating a new user."""

    login: str = Field(max_length=LOGIN_MAX_LENGTH)
    first_name: str = Field(default=DEFAULT_FIRST_NAME, max_length=NAME_MAX_LENGTH)
    last_name: str = Field(default=DEFAULT_LAST_NAME, max_length=NAME_MAX_LENGTH)

    @field_validator("login")
    @classmethod
    def validate_login(cls, value: str) -> str:
        return _validate_login(value)


class UserUpdateRequest(_CamelModel):
    """Full replacement of a user's editable fields.

    Also serves as the document JSON Patch operations are applied to.
    """

    login: str = Field(max_length=LOGIN_MAX_LENGTH)
    first_name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    last_name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)

    @field_validator("login")
    @classmethod
    def validate_login(cls, value: str) -> str:
        return _validate_login(value)


class UserResponse(_CamelModel):
    """Public representation of a stored user."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    login: str
    full_name: str
    games_played: int
    current_game_id: UUID | None = None


class PaginationMetadata(_CamelModel):
    """Navigation data sent in the ``X-Pagination`` header."""

    previous_page_link: str | None
    next_page_link: str | None
    total_count: int
    page_size: int
    current_page: int
    total_pages: int
