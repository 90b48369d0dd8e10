from __future__ import annotations

import os
import tempfile
from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient

# Configuration must be in place before the app module is imported
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+pysqlite:///" + os.path.join(tempfile.gettempdir(), f"eventhub-test-{os.getpid()}.db"),
)
os.environ.setdefault("JWT_SECRET", "test_jwt_secret_32_chars_minimum")
os.environ.setdefault("PORT", "8000")
os.environ.setdefault("ENV", "test")
os.environ.setdefault("LOG_JSON", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("PASSWORD_TIME_COST", "1")

from eventhub.db import SessionLocal  # noqa: E402
from eventhub.main import app  # noqa: E402
from eventhub.models import Base  # noqa: E402

DEFAULT_PASSWORD = "StrongPass123"


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()


@pytest.fixture(autouse=True)
def clean_db():
    # Ensure a clean slate for each test
    db = SessionLocal()
    try:
        for table in reversed(Base.metadata.sorted_tables):
            db.execute(table.delete())
        db.commit()
    finally:
        db.close()
    yield


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def signup(client: TestClient) -> Callable[..., dict]:
    """Register a user through the API and return the response body."""

    def _signup(email: str, role: str | None = None, name: str = "Test User") -> dict:
        payload = {"name": name, "email": email, "password": DEFAULT_PASSWORD}
        if role:
            payload["role"] = role
        resp = client.post("/api/auth/register", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _signup


@pytest.fixture
def admin_token(signup) -> str:
    return signup("admin@example.com", role="admin", name="Admin")["token"]


@pytest.fixture
def create_event(client: TestClient, admin_token: str) -> Callable[..., dict]:
    def _create(**overrides) -> dict:
        payload = {
            "title": "Test Event",
            "description": "An event for tests",
            "date": "2030-05-01T18:00:00+00:00",
            "location": "Main Hall",
            "capacity": 10,
        }
        payload.update(overrides)
        resp = client.post("/api/events", json=payload, headers=auth_headers(admin_token))
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _create
