from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from core import db
from main import app

from fakes import AGENT_ROWS, FakeConnection, FakePool


@pytest.fixture
def fake_pool() -> FakePool:
    return FakePool(FakeConnection({"agents": AGENT_ROWS}))


@pytest.fixture
def use_pool():
    """
    Install a pool for the app's `get_pool` dependency; undone after the test.
    """

    def _install(pool: FakePool) -> FakePool:
        app.dependency_overrides[db.get_pool] = lambda: pool
        return pool

    yield _install
    app.dependency_overrides.pop(db.get_pool, None)


@pytest.fixture
def client(fake_pool: FakePool, use_pool) -> TestClient:
    use_pool(fake_pool)
    return TestClient(app)
