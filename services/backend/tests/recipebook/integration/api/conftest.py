"""Pytest fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from recipebook.presentation.api.app import create_app
from recipebook_config.settings import Settings

ALICE = {
    "user_name": "alice",
    "email": "alice@example.com",
    "password": "alice-password-1",
}
BOB = {
    "user_name": "bob",
    "email": "bob@example.com",
    "password": "bob-password-1",
}


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Test settings with both stores in temporary SQLite files."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path}/app.db",
        credential_database_url=f"sqlite+aiosqlite:///{tmp_path}/directory.db",
        password_hash_rounds=4,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
    )


@pytest.fixture
def test_client(api_settings):
    """Create a test client; the lifespan creates the tables."""
    with TestClient(create_app(settings=api_settings)) as client:
        yield client


@pytest.fixture
def alice(test_client: TestClient) -> dict:
    """Sign up alice and return her account data."""
    response = test_client.post("/user/create", json=ALICE)
    assert response.status_code == 201
    return response.json()["user"]


@pytest.fixture
def alice_auth() -> tuple[str, str]:
    return (ALICE["user_name"], ALICE["password"])
