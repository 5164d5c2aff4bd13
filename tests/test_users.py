import asyncio
import threading

import pytest

from account_api.app.core.store import InMemoryStore
from account_api.app.schemas.user import UserCreate
from account_api.app.services import user_service


# REGISTER TESTS
def test_register_success(client, store, test_user_data):
    response = client.post("/api/register", json=test_user_data)

    assert response.status_code == 201
    assert response.json() == {
        "message": "User registered",
        "user": {"email": "a@x.com", "fullname": "Test User"},
    }
    records = store.load()
    assert len(records) == 1
    assert records[0]["email"] == "a@x.com"
    assert records[0]["password"] != test_user_data["password"]


def test_register_omits_missing_optional_fields(client, store):
    response = client.post("/api/register", json={"email": "a@x.com", "password": "p", "fullname": "A"})

    assert response.status_code == 201
    assert set(store.load()[0]) == {"email", "password", "fullname"}


def test_register_duplicate_email(client, test_user_data):
    first = client.post("/api/register", json=test_user_data)
    second = client.post("/api/register", json=test_user_data)

    assert first.status_code == 201
    assert second.status_code == 409
    assert second.json() == {"message": "User already exists"}


@pytest.mark.parametrize("missing", ["email", "password", "fullname"])
def test_register_missing_required_field(client, store, created_user, test_user_data, missing):
    payload = dict(test_user_data, email="other@x.com")
    del payload[missing]

    response = client.post("/api/register", json=payload)

    assert response.status_code == 400
    assert response.json() == {"message": "Missing required fields"}
    assert len(store.load()) == 1


def test_register_empty_fullname(client, store):
    response = client.post("/api/register", json={"email": "a@x.com", "password": "p", "fullname": ""})

    assert response.status_code == 400
    assert store.load() == []


def test_register_then_read_profile(client):
    response = client.post("/api/register", json={"email": "a@x.com", "password": "p", "fullname": "A"})
    assert response.status_code == 201

    response = client.get("/api/profile", params={"email": "a@x.com"})
    assert response.status_code == 200
    assert response.json()["fullname"] == "A"
    assert "password" not in response.json()


# LOGIN TESTS
def test_login_success(client, created_user):
    response = client.post(
        "/api/login",
        json={"email": created_user["email"], "password": created_user["password"]},
    )

    assert response.status_code == 200
    body = response.json()
    assert "password" not in body
    assert body["email"] == created_user["email"]
    assert body["fullname"] == created_user["fullname"]
    assert body["city"] == created_user["city"]


def test_login_wrong_password_and_unknown_email_look_the_same(client, created_user):
    wrong_password = client.post("/api/login", json={"email": created_user["email"], "password": "nope"})
    unknown_email = client.post("/api/login", json={"email": "ghost@x.com", "password": "nope"})

    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"message": "Invalid email or password"}


def test_login_missing_password(client, created_user):
    response = client.post("/api/login", json={"email": created_user["email"]})
    assert response.status_code == 401


# PROFILE READ TESTS
def test_get_profile(client, created_user):
    response = client.get("/api/profile", params={"email": created_user["email"]})

    assert response.status_code == 200
    assert response.json() == {
        "email": "a@x.com",
        "fullname": "Test User",
        "phone": "12345678",
        "city": "Copenhagen",
        "country": "Denmark",
    }


def test_get_profile_not_found(client):
    response = client.get("/api/profile", params={"email": "ghost@x.com"})
    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}


def test_get_profile_without_email(client, created_user):
    response = client.get("/api/profile")
    assert response.status_code == 404


def test_profile_never_exposes_password(client, store):
    for i in range(3):
        client.post("/api/register", json={"email": f"u{i}@x.com", "password": "secret", "fullname": f"U{i}"})

    for record in store.load():
        profile = client.get("/api/profile", params={"email": record["email"]})
        login = client.post("/api/login", json={"email": record["email"], "password": "secret"})
        assert "password" not in profile.json()
        assert "password" not in login.json()


# UPDATE TESTS
def test_update_profile(client, created_user):
    response = client.patch("/api/profile", json={"email": created_user["email"], "city": "X"})

    assert response.status_code == 200
    assert response.json() == {"message": "Profile updated"}

    profile = client.get("/api/profile", params={"email": created_user["email"]}).json()
    assert profile["city"] == "X"
    assert profile["fullname"] == created_user["fullname"]
    assert profile["phone"] == created_user["phone"]
    assert profile["country"] == created_user["country"]


def test_update_profile_keeps_password(client, created_user):
    client.patch("/api/profile", json={"email": created_user["email"], "fullname": "New Name"})

    response = client.post(
        "/api/login",
        json={"email": created_user["email"], "password": created_user["password"]},
    )
    assert response.status_code == 200
    assert response.json()["fullname"] == "New Name"


def test_update_profile_missing_email(client, created_user):
    response = client.patch("/api/profile", json={"city": "X"})
    assert response.status_code == 400
    assert response.json() == {"message": "Email is required"}


def test_update_profile_not_found(client):
    response = client.patch("/api/profile", json={"email": "ghost@x.com", "city": "X"})
    assert response.status_code == 404


@pytest.mark.parametrize("field", ["password", "is_admin"])
def test_update_profile_rejects_unknown_fields(client, store, created_user, field):
    before = store.load()

    response = client.patch("/api/profile", json={"email": created_user["email"], field: "x"})

    assert response.status_code == 400
    assert store.load() == before


# DELETE TESTS
def test_delete_profile_from_body(client, store, created_user):
    response = client.request("DELETE", "/api/profile", json={"email": created_user["email"]})

    assert response.status_code == 200
    assert response.json() == {"message": "User deleted"}
    assert store.load() == []
    assert client.get("/api/profile", params={"email": created_user["email"]}).status_code == 404


def test_delete_profile_from_query(client, store, created_user):
    response = client.delete("/api/profile", params={"email": created_user["email"]})

    assert response.status_code == 200
    assert store.load() == []


def test_delete_profile_body_takes_precedence(client, store, created_user):
    client.post("/api/register", json={"email": "b@x.com", "password": "p", "fullname": "B"})

    response = client.request(
        "DELETE",
        "/api/profile",
        params={"email": "b@x.com"},
        json={"email": created_user["email"]},
    )

    assert response.status_code == 200
    assert [record["email"] for record in store.load()] == ["b@x.com"]


def test_delete_profile_missing_email(client, created_user):
    response = client.delete("/api/profile")
    assert response.status_code == 400
    assert response.json() == {"message": "Email is required"}


def test_delete_profile_not_found(client, created_user):
    response = client.delete("/api/profile", params={"email": "ghost@x.com"})
    assert response.status_code == 404


def test_delete_keeps_insertion_order(client, store):
    for name in ("a", "b", "c"):
        client.post("/api/register", json={"email": f"{name}@x.com", "password": "p", "fullname": name})

    client.delete("/api/profile", params={"email": "b@x.com"})

    assert [record["email"] for record in store.load()] == ["a@x.com", "c@x.com"]


def test_register_stores_fields_in_order(client, store, test_user_data):
    client.post("/api/register", json=test_user_data)

    assert list(store.load()[0]) == ["email", "password", "fullname", "phone", "city", "country"]


def test_register_hashes_off_the_event_loop(monkeypatch):
    hashing_threads = []

    def fake_hash(password):
        hashing_threads.append(threading.get_ident())
        return "1$00$00"

    monkeypatch.setattr(user_service, "hash_password", fake_hash)
    data = UserCreate(email="a@x.com", password="p", fullname="A")

    asyncio.run(user_service.UserService.register(InMemoryStore(), data))

    assert hashing_threads and hashing_threads[0] != threading.get_ident()


# HAND-EDITED RECORDS
@pytest.fixture
def loose_record(store, client):
    client.post("/api/register", json={"email": "a@x.com", "password": "p", "fullname": "A"})
    records = store.load()
    records[0].update({"zipcode": 1620, "newsletter": True})
    store.save(records)
    return records[0]


def test_profile_returns_non_string_and_extra_fields(client, loose_record):
    response = client.get("/api/profile", params={"email": "a@x.com"})

    assert response.status_code == 200
    assert response.json()["zipcode"] == 1620
    assert response.json()["newsletter"] is True
    assert "password" not in response.json()


def test_login_returns_non_string_and_extra_fields(client, loose_record):
    response = client.post("/api/login", json={"email": "a@x.com", "password": "p"})

    assert response.status_code == 200
    assert response.json()["zipcode"] == 1620
    assert response.json()["newsletter"] is True
    assert "password" not in response.json()


@pytest.mark.parametrize("stored_hash", ["0$aa$bb", "-5$aa$bb", 12345])
def test_login_with_corrupted_hash_is_rejected(client, store, stored_hash):
    store.save([{"email": "a@x.com", "password": stored_hash, "fullname": "A"}])

    response = client.post("/api/login", json={"email": "a@x.com", "password": "p"})

    assert response.status_code == 401
