"""
Test fixtures for API tests.

Every test gets a freshly built application and a ``TestClient`` whose
context manager runs the startup hook, so the in‑memory store starts
from the seed data each time.
"""

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from rest_basics_api.app.core.config import Settings
from rest_basics_api.app.core.store import MemoryStore, get_store, init_store
from rest_basics_api.app.main import create_app


@pytest.fixture
def test_settings() -> Settings:
    """Settings independent of the environment the tests run in."""
    return Settings(api_prefix="", seed_users=True, log_level="INFO", log_file=None)


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    return create_app(test_settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client
    init_store()


@pytest.fixture
def store(client: TestClient) -> MemoryStore:
    """The store used by ``client``, already initialised."""
    return get_store()
