"""Shared fixtures: a fresh application and test client per test."""

import pytest
from fastapi.testclient import TestClient

from users_api.app.core.config import Settings
from users_api.app.core.store import InMemoryUserStore
from users_api.app.main import create_app


@pytest.fixture
def settings():
    return Settings(project_name="users-api", api_version="2.3.4")


@pytest.fixture
def store():
    return InMemoryUserStore()


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
