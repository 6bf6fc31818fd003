"""
Fixtures for route tests: the FastAPI app wired to a fake model client and
a fresh in-memory session store per test.
"""
import pytest
from fastapi.testclient import TestClient

from credit_assist.flows.dependencies import get_model_client
from credit_assist.main import app
from credit_assist.services.session_store import SessionStore, get_session_store


@pytest.fixture
def session_store():
    return SessionStore()


@pytest.fixture
def client(fake_model_client, session_store):
    """Create test client with the model and session store overridden."""
    app.dependency_overrides[get_model_client] = lambda: fake_model_client
    app.dependency_overrides[get_session_store] = lambda: session_store

    yield TestClient(app)

    # Clean up after test
    app.dependency_overrides.clear()


def _login(client, email):
    response = client.post("/auth/login", json={"email": email})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['session_token']}"}


@pytest.fixture
def beneficiary_headers(client):
    return _login(client, "beneficiary@example.com")


@pytest.fixture
def officer_headers(client):
    return _login(client, "officer@example.com")


@pytest.fixture
def admin_headers(client):
    return _login(client, "admin@example.com")
