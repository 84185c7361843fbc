"""
pytest configuration and fixtures.

Every test gets its own application with a freshly seeded store, so
mutations never leak between tests.
"""

from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from catalog_api.app.core.config import Settings
from catalog_api.app.core.store import DataStore
from catalog_api.app.main import create_app


@pytest.fixture
def settings() -> Settings:
    """Development settings with the default names and version."""
    return Settings(
        project_name="Catalog API",
        server_name="catalog-api",
        api_version="1.0.0",
        environment="development",
    )


@pytest.fixture
def store() -> DataStore:
    """Store holding the two seed users and products."""
    return DataStore.seeded()


@pytest.fixture
def app(settings: Settings, store: DataStore) -> FastAPI:
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c
