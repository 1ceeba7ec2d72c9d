from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from mass_assignment_demo.deps import get_store
from mass_assignment_demo.main import app
from mass_assignment_demo.store import InMemoryUserStore


@pytest.fixture
def store() -> InMemoryUserStore:
    s = InMemoryUserStore()
    app.dependency_overrides[get_store] = lambda: s
    yield s
    app.dependency_overrides.pop(get_store, None)


@pytest.fixture
def client(store: InMemoryUserStore) -> TestClient:
    return TestClient(app)
