"""
Pytest configuration and fixtures for API testing.

Every test gets its own app built by create_app() against an in-memory
SQLite database, so tests never share rows.
"""
import pytest
from fastapi.testclient import TestClient

from xeno_api.core.config import Settings
from xeno_api.main import create_app

TEST_JWT_SECRET = "test-jwt-secret-key-with-at-least-32-bytes"
TEST_SECRET_KEY = "test-secret-key-for-fernet-derivation"


@pytest.fixture
def settings():
    """Settings for an isolated test app; low bcrypt cost keeps tests fast"""
    return Settings(
        _env_file=None,
        ENVIRONMENT="test",
        DATABASE_URL="sqlite://",
        SECRET_KEY=TEST_SECRET_KEY,
        JWT_SECRET_KEY=TEST_JWT_SECRET,
        BCRYPT_ROUNDS=4,
        SYNC_PROVIDER="noop",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """TestClient with lifespan running, so tables exist"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(app, client):
    """Direct session on the app database for setup and assertions"""
    session = app.state.database.session()
    try:
        yield session
    finally:
        session.close()


# ============================================================================
# HELPERS
# ============================================================================

def register(client, email, company, password="pw12345", name="Test User"):
    """Register a tenant through the public API and return the response JSON"""
    response = client.post("/api/auth/register", json={
        "email": email,
        "name": name,
        "password": password,
        "companyName": company,
    })
    assert response.status_code == 200, response.text
    return response.json()


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def acme(client):
    """Registered tenant Acme with its token and headers"""
    data = register(client, "a@x.com", "Acme")
    data["headers"] = auth_headers(data["token"])
    return data


@pytest.fixture
def globex(client):
    """A second, unrelated tenant"""
    data = register(client, "b@y.com", "Globex")
    data["headers"] = auth_headers(data["token"])
    return data
