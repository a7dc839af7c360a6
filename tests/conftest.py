"""
Shared fixtures.

Every test gets its own data directory with the two default accounts
seeded: student "1" (student / student123) and warden "2"
(warden / warden123).
"""

import asyncio
import json

import pytest
from fastapi.testclient import TestClient

from hostel.api.app import create_app
from hostel.auth.passwords import PasswordHasher
from hostel.auth.seed import seed_default_users
from hostel.config import Settings
from hostel.storage import JsonFileRecordStore


STUDENT = {"role": "student", "username": "student", "password": "student123"}
WARDEN = {"role": "warden", "username": "warden", "password": "warden123"}


async def _prepare(settings: Settings) -> None:
    store = JsonFileRecordStore(settings.data_dir)
    await store.ensure_collections()
    await seed_default_users(store, PasswordHasher(rounds=settings.bcrypt_rounds))


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway data directory."""
    return Settings(
        data_dir=tmp_path / "data",
        static_dir=tmp_path / "public",
        secret_key="test-secret",
        bcrypt_rounds=4,
        sentry_dsn="",
    )


@pytest.fixture
def seeded(settings):
    """Data directory with empty collections and the default users."""
    asyncio.run(_prepare(settings))
    return settings


@pytest.fixture
def client(seeded):
    """Anonymous client against a fresh app."""
    app = create_app(seeded)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def read_collection(settings):
    """Read a collection file straight from disk."""

    def read(name: str) -> list:
        return json.loads((settings.data_dir / f"{name}.json").read_text(encoding="utf-8"))

    return read


# =============================================================================
# Helpers
# =============================================================================


def login(client: TestClient, credentials: dict) -> dict:
    """Log in (replacing any current session) and return the user payload."""
    response = client.post("/api/auth/login", json=credentials)
    assert response.status_code == 200, response.text
    return response.json()["user"]


def login_student(client: TestClient) -> dict:
    return login(client, STUDENT)


def login_warden(client: TestClient) -> dict:
    return login(client, WARDEN)
