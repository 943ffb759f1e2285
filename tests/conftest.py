import pytest
from fastapi.testclient import TestClient

from restobill.app.main import create_app
from restobill.modules.store.services.document_store import InMemoryDocumentStore


@pytest.fixture
def api_store():
    return InMemoryDocumentStore()


@pytest.fixture
def client(api_store):
    """Test client over a freshly seeded in-memory store"""
    app = create_app(store=api_store, seed=True)
    with TestClient(app) as test_client:
        yield test_client
