"""
Centralized Test Configuration.
"""

import pytest
from httpx import AsyncClient, ASGITransport

from backend.app.main import app
from backend.app.db.storage import MemStorage, get_storage


@pytest.fixture
def storage():
    """Fresh, unseeded storage so ids start at 1 in every test."""
    return MemStorage()


@pytest.fixture(autouse=True)
def apply_overrides(storage):
    """Route every request in the test to the per-test storage."""
    app.dependency_overrides[get_storage] = lambda: storage
    yield
    app.dependency_overrides = {}


@pytest.fixture
async def client():
    """Async client for testing."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def berlin_driver(client):
    """Create a Berlin-based driver and return its JSON."""
    response = await client.post("/api/drivers", json={"name": "Anna", "location": "Berlin"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
async def hamburg_driver(client):
    """Create a Hamburg-based driver and return its JSON."""
    response = await client.post("/api/drivers", json={"name": "Maria Schmidt", "location": "Hamburg"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def tour_payload():
    """Build a Berlin -> Hamburg tour body, overriding any fields given."""
    def build(**overrides):
        payload = {
            "customerName": "Great Company",
            "shipmentDate": "2025-06-01",
            "locationFrom": "Berlin",
            "locationTo": "Hamburg",
        }
        payload.update(overrides)
        return payload
    return build
