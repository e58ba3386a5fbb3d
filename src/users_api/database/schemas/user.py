"""User database schema."""

from uuid import UUID, uuid4

from sqlalchemy import Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from users_api.database.base import BaseSchema, TimestampMixin
from users_api.shared import LOGIN_MAX_LENGTH, NAME_MAX_LENGTH


class UserSchema(TimestampMixin, BaseSchema):
    """SQLAlchemy model for stored users."""

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    login: Mapped[str] = mapped_column(
        String(LOGIN_MAX_LENGTH), nullable=False, index=True
    )
    first_name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    last_name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    games_played: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    current_game_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), nullable=True
    )
