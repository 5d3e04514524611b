"""
Integration test fixtures. Overrides get_db for API tests with a seeded in-memory DB.
"""
import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def override_get_db(session_factory):
    """Seed the in-memory database (demo users included) and hand out sessions on it."""
    from malasngoding.services.seed_service import seed_reference_data
    db = session_factory()
    try:
        seed_reference_data(db)
    finally:
        db.close()

    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    return _get_db


@pytest.fixture
def api_client(override_get_db):
    """FastAPI TestClient with in-memory DB override."""
    from malasngoding.api import app
    from malasngoding.config import get_db
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


def login(client: TestClient, username: str, password: str) -> dict:
    response = client.post("/api/auth/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['accessToken']}"}


@pytest.fixture
def auth_headers(api_client):
    """Bearer headers for a freshly registered user with no points."""
    api_client.post(
        "/api/auth/register",
        json={"username": "u1", "password": "pw123456", "email": "u1@x.com"},
    )
    return login(api_client, "u1", "pw123456")


@pytest.fixture
def demo_headers(api_client):
    return login(api_client, "user", "user123")
