"""Test configuration and fixtures for the users API test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from users_api.api import create_api
from users_api.database import InMemoryUserRepository, get_user_repository
from users_api.settings import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("USER_REPOSITORY_BACKEND", "memory")
    monkeypatch.setenv("DEBUG", "false")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def client(repository: InMemoryUserRepository) -> Iterator[TestClient]:
    app = create_api()
    app.dependency_overrides[get_user_repository] = lambda: repository
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
