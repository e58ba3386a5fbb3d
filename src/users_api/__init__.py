"""Users API package wiring and entrypoints."""

from users_api.settings import BackendSettings, get_settings, settings


def main() -> None:
    """Run the ASGI server configured by :class:`BackendSettings`."""
    from users_api.main import run

    run()


__all__ = [
    "BackendSettings",
    "get_settings",
    "main",
    "settings",
]
