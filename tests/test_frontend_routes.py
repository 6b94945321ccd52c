# tests/test_frontend_routes.py
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app

INDEX = "<!doctype html><title>Meal Snap</title>"


@pytest.fixture
def client(tmp_path) -> TestClient:
    (tmp_path / "index.html").write_text(INDEX)
    (tmp_path / "app.js").write_text("console.log('hi')")
    cfg = Settings(_env_file=None, gemini_api_key="test-key", env_name="test", static_dir=str(tmp_path))
    return TestClient(create_app(cfg))


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "env": "test"}


@pytest.mark.parametrize("path", ["/", "/history", "/meals/42/detail"])
def test_unknown_paths_serve_index(client, path):
    r = client.get(path)
    assert r.status_code == 200
    assert r.text == INDEX


def test_static_file_is_served(client):
    r = client.get("/app.js")
    assert r.status_code == 200
    assert r.text == "console.log('hi')"


@pytest.mark.parametrize("path", ["/api", "/api/v1/nope", "/api/v1/analyze-image"])
def test_unmatched_api_get_is_404(client, path):
    r = client.get(path)
    assert r.status_code == 404
    assert r.json() == {"error": "API route not found"}


@pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE"])
def test_unmatched_api_is_404_for_every_method(client, method):
    r = client.request(method, "/api/v1/nope", json={})
    assert r.status_code == 404
    assert r.json() == {"error": "API route not found"}


def test_non_get_on_frontend_path_is_405(client):
    r = client.post("/history", json={})
    assert r.status_code == 405
    assert "error" in r.json()


def test_unhandled_error_is_json_500(tmp_path):
    cfg = Settings(_env_file=None, gemini_api_key="test-key", static_dir=str(tmp_path))
    app = create_app(cfg)

    def boom():
        raise RuntimeError("kaboom")

    app.add_api_route("/boom", boom, methods=["POST"])
    r = TestClient(app, raise_server_exceptions=False).post("/boom")

    assert r.status_code == 500
    assert r.json() == {"error": "An internal server error occurred."}


def test_missing_index_is_404(tmp_path):
    cfg = Settings(_env_file=None, gemini_api_key="test-key", static_dir=str(tmp_path / "empty"))
    r = TestClient(create_app(cfg)).get("/")
    assert r.status_code == 404
