# File: tests/test_auth.py

import pytest
from fastapi.testclient import TestClient

from med_portal.api.deps import get_user_store
from med_portal.core.config import Settings
from med_portal.main import app
from med_portal.services.user_store import FileUserStore, InMemoryUserStore

client = TestClient(app)


@pytest.fixture
def store():
    store = InMemoryUserStore()
    app.dependency_overrides[get_user_store] = lambda: store
    yield store
    app.dependency_overrides.clear()


@pytest.fixture
def file_store(tmp_path):
    store = FileUserStore(tmp_path / "users.txt")
    app.dependency_overrides[get_user_store] = lambda: store
    yield store
    app.dependency_overrides.clear()


class BrokenStore:
    def ensure(self):
        raise OSError("disk on fire")

    def load(self):
        raise OSError("disk on fire")

    def append(self, email, name, password_hash):
        raise OSError("disk on fire")


def register(name="Ada Lovelace", email="ada@example.com", password="s3cret"):
    return client.post(
        "/register", json={"name": name, "email": email, "password": password}
    )


def test_register_missing_fields(store):
    resp = client.post("/register", json={})
    assert resp.status_code == 400
    assert resp.json() == {"ok": False, "msg": "Name, email, password required."}


def test_register_empty_field(store):
    resp = register(name="")
    assert resp.status_code == 400
    assert store.lines == []


def test_register_then_login(store):
    resp = register()
    assert resp.status_code == 200
    assert resp.json() == {"ok": True, "msg": "Registered successfully."}

    resp = client.post("/login", json={"email": "ada@example.com", "password": "s3cret"})
    assert resp.status_code == 200
    assert resp.json() == {"ok": True, "msg": "Login successful", "name": "Ada Lovelace"}


def test_register_duplicate_email_is_case_insensitive(store):
    assert register(email="Ada@Example.com").status_code == 200

    resp = register(name="Someone Else", email="ADA@example.COM")
    assert resp.status_code == 409
    assert resp.json() == {"ok": False, "msg": "Email already registered."}
    assert len(store.lines) == 1


def test_login_uses_lowercased_email(store):
    register(email="Grace@Example.com", name="Grace")
    resp = client.post("/login", json={"email": "GRACE@example.com", "password": "s3cret"})
    assert resp.status_code == 200
    assert resp.json()["name"] == "Grace"


def test_login_missing_fields(store):
    resp = client.post("/login", json={"email": "ada@example.com"})
    assert resp.status_code == 400
    assert resp.json() == {"ok": False, "msg": "Email and password required."}


def test_login_unknown_email(store):
    resp = client.post("/login", json={"email": "nobody@example.com", "password": "x"})
    assert resp.status_code == 401
    assert resp.json() == {"ok": False, "msg": "Wrong credentials: email not found."}


def test_login_wrong_password(store):
    register()
    resp = client.post("/login", json={"email": "ada@example.com", "password": "nope"})
    assert resp.status_code == 401
    assert resp.json() == {"ok": False, "msg": "Wrong credentials: incorrect password."}


def test_name_with_commas_round_trips(file_store):
    assert register(name="Lovelace, Ada").status_code == 200

    line = file_store.path.read_text(encoding="utf-8")
    email, name, password_hash = line.rstrip("\n").split(",")
    assert email == "ada@example.com"
    assert name == "Lovelace  Ada"
    assert password_hash.startswith("$2b$10$")

    resp = client.post("/login", json={"email": "ada@example.com", "password": "s3cret"})
    assert resp.status_code == 200
    assert resp.json()["name"] == "Lovelace  Ada"


def test_form_encoded_body(store):
    resp = client.post(
        "/register",
        data={"name": "Form User", "email": "form@example.com", "password": "pw"},
    )
    assert resp.status_code == 200

    resp = client.post("/login", data={"email": "form@example.com", "password": "pw"})
    assert resp.status_code == 200
    assert resp.json()["name"] == "Form User"


def test_malformed_json_body(store):
    resp = client.post(
        "/login",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json()["ok"] is False


def test_malformed_form_body(store):
    # multipart without a boundary can't be parsed
    resp = client.post(
        "/login",
        content=b"email=a@example.com",
        headers={"Content-Type": "multipart/form-data"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"ok": False, "msg": "Invalid request body."}


def test_only_json_media_types_are_parsed(store):
    body = b'{"email": "nobody@example.com", "password": "pw"}'

    resp = client.post("/login", content=body, headers={"Content-Type": "text/x-json"})
    assert resp.status_code == 400
    assert resp.json()["msg"] == "Email and password required."

    resp = client.post(
        "/login", content=body, headers={"Content-Type": "application/jsonp"}
    )
    assert resp.status_code == 400

    resp = client.post(
        "/login",
        content=body,
        headers={"Content-Type": "application/vnd.api+json; charset=utf-8"},
    )
    assert resp.status_code == 401
    assert resp.json()["msg"] == "Wrong credentials: email not found."


def test_default_store_uses_configured_users_file(tmp_path, monkeypatch):
    users_file = tmp_path / "users.txt"
    monkeypatch.setattr(
        "med_portal.api.deps.get_settings",
        lambda: Settings(user_store_backend="file", users_file=users_file),
    )
    get_user_store.cache_clear()
    try:
        assert register(name="Cached Store").status_code == 200
        assert users_file.read_text(encoding="utf-8").startswith(
            "ada@example.com,Cached Store,$2b$"
        )

        resp = client.post("/login", json={"email": "ada@example.com", "password": "s3cret"})
        assert resp.status_code == 200
        assert resp.json()["name"] == "Cached Store"
    finally:
        get_user_store.cache_clear()


def test_non_string_field(store):
    resp = client.post("/login", json={"email": 42, "password": "pw"})
    assert resp.status_code == 400


def test_storage_failure_is_server_error():
    app.dependency_overrides[get_user_store] = lambda: BrokenStore()
    try:
        resp = register()
        assert resp.status_code == 500
        assert resp.json() == {"ok": False, "msg": "Server error."}

        resp = client.post("/login", json={"email": "ada@example.com", "password": "pw"})
        assert resp.status_code == 500
        assert resp.json() == {"ok": False, "msg": "Server error."}
    finally:
        app.dependency_overrides.clear()
