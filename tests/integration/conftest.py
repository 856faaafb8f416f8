import pytest
from fastapi.testclient import TestClient

from src.infrastructure.config.settings import Settings
from src.infrastructure.database.memory_repository import InMemoryStore
from src.presentation.api.main import create_app

@pytest.fixture
def store():
    return InMemoryStore()

@pytest.fixture
def app(store):
    return create_app(store, Settings())

@pytest.fixture
def client(app):
    return TestClient(app)
