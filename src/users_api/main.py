"""Users API entrypoint."""

from __future__ import annotations

import uvicorn

from users_api.api import create_api
from users_api.settings import get_settings

app = create_api()


def run(*, reload: bool | None = None) -> None:
    """Serve :data:`app` with uvicorn; auto-reload follows ``debug`` unless given."""
    config = get_settings()
    uvicorn.run(
        "users_api.main:app",
        host=config.api_host,
        port=config.api_port,
        reload=config.debug if reload is None else reload,
        log_level="debug" if config.debug else "info",
    )
