"""API layer: application factory, routers, payload models and services."""

from users_api.api.app import create_api

__all__ = ["create_api"]
