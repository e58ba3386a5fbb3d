"""SQLAlchemy schemas backing the repositories."""

from users_api.database.schemas.user import UserSchema

__all__ = ["UserSchema"]
