"""Route definitions for public HTTP endpoints."""

from users_api.api.routers.users import router as users_router

__all__ = ["users_router"]
