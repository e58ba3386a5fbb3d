from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID, uuid4

import pytest

from users_api.database import InMemoryUserRepository
from users_api.shared import NIL_USER_ID, UserEntity

if TYPE_CHECKING:
    from fastapi.testclient import TestClient


class SpyUserRepository(InMemoryUserRepository):
    """In-memory repository that records write calls."""

    def __init__(self) -> None:
        super().__init__()
        self.inserted: list[UserEntity] = []
        self.updated: list[UserEntity] = []

    def insert(self, user: UserEntity) -> UserEntity:
        self.inserted.append(user)
        return super().insert(user)

    def update(self, user: UserEntity) -> None:
        self.updated.append(user)
        super().update(user)


@pytest.fixture
def repository() -> SpyUserRepository:
    return SpyUserRepository()


@pytest.fixture
def stored_user(repository: SpyUserRepository) -> UserEntity:
    user = repository.insert(
        UserEntity(login="mjohnson", first_name="Mike", last_name="Johnson")
    )
    repository.inserted.clear()
    return user


def test_get_user_by_id(client: TestClient, stored_user: UserEntity) -> None:
    response = client.get(f"/api/users/{stored_user.id}")

    assert response.status_code == 200
    assert response.json() == {
        "id": str(stored_user.id),
        "login": "mjohnson",
        "fullName": "Johnson Mike",
        "gamesPlayed": 0,
        "currentGameId": None,
    }


def test_get_unknown_user_returns_404(client: TestClient) -> None:
    response = client.get(f"/api/users/{uuid4()}")

    assert response.status_code == 404
    assert response.json()["error"] == "RESOURCE_NOT_FOUND"


def test_get_user_with_malformed_id_returns_404(client: TestClient) -> None:
    assert client.get("/api/users/not-a-guid").status_code == 404


def test_head_user_returns_headers_only(
    client: TestClient, stored_user: UserEntity
) -> None:
    response = client.head(f"/api/users/{stored_user.id}")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json; charset=utf-8"
    assert response.content == b""


def test_head_unknown_user_returns_404(client: TestClient) -> None:
    assert client.head(f"/api/users/{uuid4()}").status_code == 404


def test_create_user(client: TestClient, repository: SpyUserRepository) -> None:
    response = client.post(
        "/api/users", json={"login": "player1", "firstName": "Ann", "lastName": "Lee"}
    )

    assert response.status_code == 201
    user_id = UUID(response.json())
    assert response.headers["location"] == f"http://testserver/api/users/{user_id}"
    stored = repository.find_by_id(user_id)
    assert stored is not None
    assert (stored.login, stored.first_name, stored.last_name) == ("player1", "Ann", "Lee")


def test_create_user_uses_default_names(
    client: TestClient, repository: SpyUserRepository
) -> None:
    response = client.post("/api/users", json={"login": "player2"})

    assert response.status_code == 201
    fetched = client.get(response.headers["location"]).json()
    assert fetched["fullName"] == "Doe John"


@pytest.mark.parametrize("login", ["", "bad login", "with-dash", "semi;colon"])
def test_create_user_with_invalid_login_returns_422(
    client: TestClient, repository: SpyUserRepository, login: str
) -> None:
    response = client.post("/api/users", json={"login": login})

    assert response.status_code == 422
    assert response.json()["details"] == {"login": ["Invalid login format"]}
    assert repository.inserted == []


def test_create_user_without_login_returns_422(
    client: TestClient, repository: SpyUserRepository
) -> None:
    response = client.post("/api/users", json={"firstName": "Ann"})

    assert response.status_code == 422
    assert "login" in response.json()["details"]
    assert repository.inserted == []


def test_create_user_without_body_returns_400(
    client: TestClient, repository: SpyUserRepository
) -> None:
    response = client.post("/api/users")

    assert response.status_code == 400
    assert repository.inserted == []


def test_create_user_with_malformed_json_returns_400(client: TestClient) -> None:
    response = client.post(
        "/api/users",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400


def test_replace_unknown_user_inserts_under_requested_id(
    client: TestClient, repository: SpyUserRepository
) -> None:
    user_id = uuid4()
    response = client.put(
        f"/api/users/{user_id}",
        json={"login": "newbie", "firstName": "New", "lastName": "User"},
    )

    assert response.status_code == 201
    assert response.json() == str(user_id)
    assert response.headers["location"].endswith(f"/api/users/{user_id}")
    assert repository.find_by_id(user_id) is not None


def test_replace_existing_user_returns_204(
    client: TestClient, repository: SpyUserRepository, stored_user: UserEntity
) -> None:
    response = client.put(
        f"/api/users/{stored_user.id}",
        json={"login": "renamed", "firstName": "Mike", "lastName": "Smith"},
    )

    assert response.status_code == 204
    assert response.content == b""
    updated = repository.find_by_id(stored_user.id)
    assert updated is not None
    assert updated.id == stored_user.id
    assert (updated.login, updated.last_name) == ("renamed", "Smith")


def test_replace_with_nil_id_returns_400(client: TestClient) -> None:
    response = client.put(
        f"/api/users/{NIL_USER_ID}",
        json={"login": "someone", "firstName": "A", "lastName": "B"},
    )

    assert response.status_code == 400


def test_replace_with_nil_id_is_rejected_before_validation(client: TestClient) -> None:
    response = client.put(f"/api/users/{NIL_USER_ID}", json={"login": "bad login"})

    assert response.status_code == 400


def test_replace_without_body_returns_400(client: TestClient) -> None:
    assert client.put(f"/api/users/{uuid4()}").status_code == 400


def test_replace_with_invalid_body_returns_422(
    client: TestClient, repository: SpyUserRepository
) -> None:
    user_id = uuid4()
    response = client.put(
        f"/api/users/{user_id}",
        json={"login": "ok", "firstName": "", "lastName": "Doe"},
    )

    assert response.status_code == 422
    assert "firstName" in response.json()["details"]
    assert repository.find_by_id(user_id) is None


def test_patch_user(
    client: TestClient, repository: SpyUserRepository, stored_user: UserEntity
) -> None:
    response = client.patch(
        f"/api/users/{stored_user.id}",
        json=[
            {"op": "replace", "path": "/login", "value": "mikej"},
            {"op": "replace", "path": "/lastName", "value": "Jackson"},
        ],
        headers={"Content-Type": "application/json-patch+json"},
    )

    assert response.status_code == 204
    patched = repository.find_by_id(stored_user.id)
    assert patched is not None
    assert (patched.login, patched.first_name, patched.last_name) == (
        "mikej",
        "Mike",
        "Jackson",
    )


def test_patch_keeps_fields_outside_the_projection(
    client: TestClient, repository: SpyUserRepository, stored_user: UserEntity
) -> None:
    game_id = uuid4()
    repository.update(
        UserEntity(
            id=stored_user.id,
            login=stored_user.login,
            first_name=stored_user.first_name,
            last_name=stored_user.last_name,
            games_played=7,
            current_game_id=game_id,
        )
    )

    response = client.patch(
        f"/api/users/{stored_user.id}",
        json=[{"op": "replace", "path": "/firstName", "value": "Michael"}],
    )

    assert response.status_code == 204
    patched = repository.find_by_id(stored_user.id)
    assert patched is not None
    assert (patched.games_played, patched.current_game_id) == (7, game_id)


def test_patch_unknown_user_returns_404_without_mutation(
    client: TestClient, repository: SpyUserRepository
) -> None:
    response = client.patch(
        f"/api/users/{uuid4()}",
        json=[{"op": "replace", "path": "/login", "value": "ghost"}],
    )

    assert response.status_code == 404
    assert repository.updated == []


def test_patch_nil_id_returns_404(client: TestClient) -> None:
    response = client.patch(
        f"/api/users/{NIL_USER_ID}",
        json=[{"op": "replace", "path": "/login", "value": "ghost"}],
    )

    assert response.status_code == 404


def test_patch_without_document_returns_400(
    client: TestClient, stored_user: UserEntity
) -> None:
    assert client.patch(f"/api/users/{stored_user.id}").status_code == 400


def test_patch_with_object_instead_of_array_returns_400(
    client: TestClient, stored_user: UserEntity
) -> None:
    response = client.patch(f"/api/users/{stored_user.id}", json={"login": "x"})

    assert response.status_code == 400


def test_patch_producing_invalid_login_returns_422(
    client: TestClient, repository: SpyUserRepository, stored_user: UserEntity
) -> None:
    response = client.patch(
        f"/api/users/{stored_user.id}",
        json=[{"op": "replace", "path": "/login", "value": "not valid!"}],
    )

    assert response.status_code == 422
    assert response.json()["details"] == {"login": ["Invalid login format"]}
    assert repository.updated == []


def test_patch_removing_required_field_returns_422(
    client: TestClient, stored_user: UserEntity
) -> None:
    response = client.patch(
        f"/api/users/{stored_user.id}",
        json=[{"op": "remove", "path": "/lastName"}],
    )

    assert response.status_code == 422
    assert "lastName" in response.json()["details"]


def test_patch_unknown_member_returns_422(
    client: TestClient, stored_user: UserEntity
) -> None:
    response = client.patch(
        f"/api/users/{stored_user.id}",
        json=[{"op": "add", "path": "/nickname", "value": "mj"}],
    )

    assert response.status_code == 422
    assert "nickname" in response.json()["details"]


def test_patch_with_unapplicable_operation_returns_422(
    client: TestClient, stored_user: UserEntity
) -> None:
    response = client.patch(
        f"/api/users/{stored_user.id}",
        json=[{"op": "test", "path": "/login", "value": "someoneelse"}],
    )

    assert response.status_code == 422
    assert "patch" in response.json()["details"]


def test_delete_user(
    client: TestClient, repository: SpyUserRepository, stored_user: UserEntity
) -> None:
    response = client.delete(f"/api/users/{stored_user.id}")

    assert response.status_code == 204
    assert repository.find_by_id(stored_user.id) is None


def test_second_delete_returns_404(client: TestClient, stored_user: UserEntity) -> None:
    assert client.delete(f"/api/users/{stored_user.id}").status_code == 204
    assert client.delete(f"/api/users/{stored_user.id}").status_code == 404


def test_delete_unknown_user_returns_404(client: TestClient) -> None:
    assert client.delete(f"/api/users/{uuid4()}").status_code == 404


def test_options_lists_allowed_verbs(client: TestClient) -> None:
    response = client.options("/api/users")

    assert response.status_code == 200
    assert response.headers["allow"] == "GET, POST, OPTIONS"
    assert response.content == b""


@pytest.mark.parametrize("login", ["²³", "x½", "abc⅓"])
def test_create_user_with_non_decimal_numeric_login_returns_422(
    client: TestClient, repository: SpyUserRepository, login: str
) -> None:
    response = client.post("/api/users", json={"login": login})

    assert response.status_code == 422
    assert response.json()["details"] == {"login": ["Invalid login format"]}
    assert repository.inserted == []


def test_create_user_accepts_unicode_letters_and_digits(client: TestClient) -> None:
    response = client.post("/api/users", json={"login": "Jürgen٣"})

    assert response.status_code == 201


def test_patch_to_non_decimal_numeric_login_returns_422(
    client: TestClient, repository: SpyUserRepository, stored_user: UserEntity
) -> None:
    response = client.patch(
        f"/api/users/{stored_user.id}",
        json=[{"op": "replace", "path": "/login", "value": "²³"}],
    )

    assert response.status_code == 422
    assert repository.updated == []


def test_create_user_with_too_long_login_returns_422(
    client: TestClient, repository: SpyUserRepository
) -> None:
    response = client.post("/api/users", json={"login": "a" * 65})

    assert response.status_code == 422
    assert "login" in response.json()["details"]
    assert repository.inserted == []


def test_create_user_with_login_at_length_limit(client: TestClient) -> None:
    assert client.post("/api/users", json={"login": "a" * 64}).status_code == 201


def test_create_user_with_too_long_name_returns_422(client: TestClient) -> None:
    response = client.post("/api/users", json={"login": "ok", "lastName": "L" * 129})

    assert response.status_code == 422
    assert "lastName" in response.json()["details"]


def test_replace_with_too_long_login_returns_422(
    client: TestClient, repository: SpyUserRepository
) -> None:
    user_id = uuid4()
    response = client.put(
        f"/api/users/{user_id}",
        json={"login": "a" * 65, "firstName": "A", "lastName": "B"},
    )

    assert response.status_code == 422
    assert "login" in response.json()["details"]
    assert repository.find_by_id(user_id) is None


def test_patch_to_too_long_login_returns_422(
    client: TestClient, repository: SpyUserRepository, stored_user: UserEntity
) -> None:
    response = client.patch(
        f"/api/users/{stored_user.id}",
        json=[{"op": "replace", "path": "/login", "value": "a" * 65}],
    )

    assert response.status_code == 422
    assert "login" in response.json()["details"]
    assert repository.updated == []
