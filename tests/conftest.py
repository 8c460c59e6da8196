"""Shared pytest fixtures for the StreamStore API tests."""

import pytest
import requests
from fastapi.testclient import TestClient

from streamstore_api.app.core.config import settings
from streamstore_api.app.core.db import init_db
from streamstore_api.app.core.security import hash_password
from streamstore_api.app.main import app

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "s3cret-pass"


@pytest.fixture
def app_settings(tmp_path, monkeypatch):
    """Point the app at an empty database file and a known admin password."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "store.db"))
    monkeypatch.setattr(settings, "seed_demo_data", False)
    monkeypatch.setattr(settings, "secret_key", "test-secret-key")
    monkeypatch.setattr(settings, "admin_username", ADMIN_USERNAME)
    monkeypatch.setattr(settings, "admin_password_hash", hash_password(ADMIN_PASSWORD))
    init_db()
    return settings


@pytest.fixture
def client(app_settings):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin_headers(client):
    response = client.post(
        "/api/auth/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def service(client, admin_headers):
    response = client.post(
        "/api/services",
        json={"name": "Netflix", "logo": "https://example.com/netflix.svg"},
        headers=admin_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestClientSession:
    """Session stand-in that sends ``requests``-style calls to the app.

    Responses are converted to ``requests.Response`` so the client's
    error handling runs exactly as it does against a real server.
    """

    def __init__(self, client: TestClient):
        self.client = client
        self.calls = []

    def request(self, method, url, params=None, json=None, headers=None, timeout=None):
        self.calls.append((method, url, params))
        resp = self.client.request(method, url, params=params, json=json, headers=headers)
        out = requests.Response()
        out.status_code = resp.status_code
        out._content = resp.content
        out.headers.update(resp.headers)
        out.url = url
        out.reason = resp.reason_phrase
        return out


@pytest.fixture
def api_session(client):
    return TestClientSession(client)
