import pytest
from fastapi.testclient import TestClient

from src.config.settings import TestingConfig
from src.fastapi_app import create_fastapi_app
from src.infrastructure.persistence.memory_repositories import InMemoryStore
from src.setup.ioc.container import InMemoryStorageProvider, create_container
from tests.factories import TickingClock


@pytest.fixture()
def store():
    return InMemoryStore(clock=TickingClock())


@pytest.fixture()
def app(store):
    """Create a FastAPI app on in-memory storage for each test."""
    container = create_container(
        TestingConfig, storage_provider=InMemoryStorageProvider(store)
    )
    return create_fastapi_app(container=container, config=TestingConfig)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def register(client):
    def _register(username="alice", password="secret-pass"):
        response = client.post(
            "/api/auth/register", json={"username": username, "password": password}
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture()
def auth_headers(register):
    """Authentication headers for a freshly registered user."""
    body = register()
    return {"Authorization": f"Bearer {body['token']}"}
