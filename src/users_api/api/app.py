"""Factory for constructing the FastAPI application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from users_api.api.exception_handlers import register_exception_handlers
from users_api.api.routers import users_router
from users_api.settings import BackendSettings, get_settings
from users_api.shared.logging import setup_logging

logger = logging.getLogger(__name__)


def create_api(settings: BackendSettings | None = None) -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    config = settings or get_settings()
    setup_logging(config)

    app = FastAPI(title="Users API", debug=config.debug)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location", "X-Pagination"],
    )
    register_exception_handlers(app)
    app.include_router(users_router)
    logger.debug(
        "Users API configured with %s repository backend",
        config.user_repository_backend,
    )
    return app
