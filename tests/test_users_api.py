"""HTTP-level tests for the /users routes."""

import pytest


DAN = {"name": "Dan", "email": "dan@example.com"}


# --- GET /users ---

def test_list_returns_seed_users(client):
    resp = client.get("/users")
    assert resp.status_code == 200
    body = resp.json()
    assert [u["name"] for u in body["users"]] == ["Alice Johnson", "Bob Smith", "Carol White"]
    assert body["total"] == 3
    assert body["page"] == 1
    assert body["limit"] == 20
    assert body["totalPages"] == 1


def test_list_second_page(client):
    body = client.get("/users", params={"limit": 2, "page": 2}).json()
    assert [u["name"] for u in body["users"]] == ["Carol White"]
    assert body["page"] == 2
    assert body["totalPages"] == 2


def test_list_filter_role(client):
    body = client.get("/users", params={"role": "admin"}).json()
    assert body["total"] == 1
    assert body["users"][0]["name"] == "Alice Johnson"


@pytest.mark.parametrize("term", ["bob", "BOB", "BoB"])
def test_list_search_is_case_insensitive(client, term):
    body = client.get("/users", params={"search": term}).json()
    assert [u["name"] for u in body["users"]] == ["Bob Smith"]


def test_list_search_matches_email(client):
    body = client.get("/users", params={"search": "carol@"}).json()
    assert [u["id"] for u in body["users"]] == [3]


def test_list_role_and_search_combined(client):
    body = client.get("/users", params={"role": "user", "search": "example.com"}).json()
    assert [u["id"] for u in body["users"]] == [2, 3]


def test_list_no_match_has_one_page(client):
    body = client.get("/users", params={"search": "nobody"}).json()
    assert body["users"] == []
    assert body["total"] == 0
    assert body["page"] == 1
    assert body["totalPages"] == 1


def test_list_malformed_numbers_fall_back_to_defaults(client):
    resp = client.get("/users", params={"page": "abc", "limit": "lots"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["page"] == 1
    assert body["limit"] == 20


def test_list_clamps_limit_and_page(client):
    body = client.get("/users", params={"limit": 1000, "page": 99}).json()
    assert body["limit"] == 100
    assert body["page"] == 1

    body = client.get("/users", params={"limit": 0, "page": -5}).json()
    assert body["limit"] == 1
    assert body["page"] == 1
    assert [u["id"] for u in body["users"]] == [1]


# --- GET /users/{id} ---

def test_get_user(client):
    resp = client.get("/users/1")
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "name": "Alice Johnson", "email": "alice@example.com", "role": "admin"}


def test_get_user_not_found(client):
    resp = client.get("/users/999")
    assert resp.status_code == 404
    assert resp.json() == {"error": "User with id 999 not found"}


@pytest.mark.parametrize("raw_id", ["abc", "0", "-3", "\u0661", "9" * 5000])
def test_get_user_invalid_id(client, raw_id):
    resp = client.get(f"/users/{raw_id}")
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid user ID"}


def test_list_oversized_numbers_fall_back_to_defaults(client):
    resp = client.get("/users", params={"page": "9" * 5000, "limit": "9" * 5000})
    assert resp.status_code == 200
    body = resp.json()
    assert body["page"] == 1
    assert body["limit"] == 20


def test_list_non_ascii_digits_are_ignored(client):
    body = client.get("/users", params={"limit": "\u0662"}).json()
    assert body["limit"] == 20


def test_get_user_id_with_trailing_text(client):
    resp = client.get("/users/2abc")
    assert resp.status_code == 200
    assert resp.json()["id"] == 2


# --- POST /users ---

def test_create_user(client):
    resp = client.post("/users", json=DAN)
    assert resp.status_code == 201
    assert resp.json() == {"id": 4, "name": "Dan", "email": "dan@example.com", "role": "user"}
    assert client.get("/users").json()["users"][-1]["id"] == 4


def test_create_user_with_role(client):
    resp = client.post("/users", json={**DAN, "role": "admin"})
    assert resp.status_code == 201
    assert resp.json()["role"] == "admin"


@pytest.mark.parametrize("payload", [
    {"email": "x@example.com"},
    {"name": "X"},
    {"name": "", "email": "x@example.com"},
    {},
])
def test_create_user_missing_fields(client, payload):
    resp = client.post("/users", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Name and email are required"}


def test_create_user_without_body(client):
    resp = client.post("/users")
    assert resp.status_code == 400
    assert resp.json() == {"error": "Name and email are required"}


def test_create_user_wrong_type(client):
    resp = client.post("/users", json={"name": 42, "email": "x@example.com"})
    assert resp.status_code == 400
    assert "name" in resp.json()["error"]


def test_create_user_duplicate_email(client):
    resp = client.post("/users", json={"name": "ALICE", "email": "alice@example.com"})
    assert resp.status_code == 409
    assert resp.json() == {"error": "A user with this email already exists"}


def test_create_user_email_is_case_sensitive(client):
    resp = client.post("/users", json={"name": "Alice", "email": "ALICE@example.com"})
    assert resp.status_code == 201


def test_ids_increase_and_are_not_reused(client):
    first = client.post("/users", json=DAN).json()["id"]
    client.delete(f"/users/{first}")
    second = client.post("/users", json={"name": "Eve", "email": "eve@example.com"}).json()["id"]
    assert second > first > 3


# --- PUT /users/{id} ---

def test_update_user_partial(client):
    resp = client.put("/users/2", json={"role": "admin"})
    assert resp.status_code == 200
    assert resp.json() == {"id": 2, "name": "Bob Smith", "email": "bob@example.com", "role": "admin"}
    assert client.get("/users/2").json()["role"] == "admin"


def test_update_user_empty_name_is_ignored(client):
    resp = client.put("/users/1", json={"name": "", "email": "alice.j@example.com"})
    assert resp.status_code == 200
    assert resp.json()["name"] == "Alice Johnson"
    assert resp.json()["email"] == "alice.j@example.com"


def test_update_user_keeps_own_email(client):
    resp = client.put("/users/1", json={"email": "alice@example.com"})
    assert resp.status_code == 200


def test_update_user_email_conflict(client):
    resp = client.put("/users/1", json={"email": "bob@example.com"})
    assert resp.status_code == 409
    assert resp.json() == {"error": "A user with this email already exists"}
    assert client.get("/users/1").json()["email"] == "alice@example.com"


def test_update_user_not_found(client):
    resp = client.put("/users/42", json={"name": "Nobody"})
    assert resp.status_code == 404


def test_update_user_invalid_id(client):
    resp = client.put("/users/nope", json={"name": "Nobody"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid user ID"}


# --- DELETE /users/{id} ---

def test_delete_user(client):
    resp = client.delete("/users/2")
    assert resp.status_code == 200
    assert resp.json() == {
        "message": "User Bob Smith deleted successfully",
        "user": {"id": 2, "name": "Bob Smith", "email": "bob@example.com", "role": "user"},
    }
    assert client.get("/users/2").status_code == 404
    assert [u["id"] for u in client.get("/users").json()["users"]] == [1, 3]


def test_delete_user_not_found(client):
    assert client.delete("/users/999").status_code == 404


def test_delete_user_invalid_id(client):
    resp = client.delete("/users/0")
    assert resp.status_code == 400


# --- scenario ---

def test_create_then_delete_scenario(client):
    created = client.post("/users", json=DAN)
    assert created.status_code == 201
    assert created.json() == {"id": 4, "name": "Dan", "email": "dan@example.com", "role": "user"}

    deleted = client.delete("/users/2")
    assert deleted.status_code == 200
    assert deleted.json()["user"]["name"] == "Bob Smith"

    assert client.get("/users/2").status_code == 404


def test_each_app_starts_from_seed(client, settings):
    from fastapi.testclient import TestClient

    from users_api.app.main import create_app

    client.delete("/users/1")
    with TestClient(create_app(settings=settings)) as other:
        assert other.get("/users").json()["total"] == 3
