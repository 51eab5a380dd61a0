import pytest
from fastapi.testclient import TestClient

from grubdash.config import Settings
from grubdash.main import create_app
from grubdash.store import MemoryStore


@pytest.fixture
def dish_store():
    return MemoryStore()


@pytest.fixture
def order_store():
    return MemoryStore()


@pytest.fixture
def client(dish_store, order_store):
    app = create_app(Settings(), dish_store=dish_store, order_store=order_store)
    with TestClient(app) as c:
        yield c
