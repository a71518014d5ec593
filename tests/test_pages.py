# File: tests/test_pages.py

from fastapi.testclient import TestClient

from med_portal.main import app

client = TestClient(app)


def test_health_endpoint():
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_root_serves_main_page():
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert "Med Portal" in resp.text


def test_static_pages_are_served():
    for page in ("login.html", "register.html", "main.html"):
        resp = client.get(f"/{page}")
        assert resp.status_code == 200, page


def test_unknown_static_file():
    resp = client.get("/nope.html")
    assert resp.status_code == 404
