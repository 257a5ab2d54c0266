import pytest
from fastapi.testclient import TestClient

from string_analyzer.api.routes import get_store
from string_analyzer.main import app
from string_analyzer.store import StringStore


@pytest.fixture
def store():
    """Fresh in-memory store (no snapshot file)."""
    return StringStore()


@pytest.fixture
def client(store):
    """TestClient wired to the ``store`` fixture instead of the startup store."""
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
