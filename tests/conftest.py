"""
Shared fixtures.

Every test gets its own SQLite file under ``tmp_path`` so tests never
share user records.
"""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from record_api.app.core.config import Settings
from record_api.app.core.db import ConnectionPool, init_db
from record_api.app.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(database_url=str(tmp_path / "test.db"), api_key="", player_seed_count=5)


@pytest.fixture
def pool(settings):
    pool = ConnectionPool.from_settings(settings)
    init_db(pool)
    try:
        yield pool
    finally:
        pool.close()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # Entering the context runs the startup handlers (migrations).
    with TestClient(app) as c:
        yield c
