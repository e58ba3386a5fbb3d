"""Logging configuration for the service."""

from __future__ import annotations

import logging
import sys

from users_api.settings import BackendSettings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(settings: BackendSettings | None = None) -> None:
    """Configure application-wide logging.

    Level is DEBUG when ``debug`` is enabled, otherwise INFO. Output goes to
    stdout.
    """
    config = settings or get_settings()
    level = logging.DEBUG if config.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("users_api").setLevel(level)
