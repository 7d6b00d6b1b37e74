"""
Pytest configuration and shared fixtures for mirrorfind tests.
"""

import os

import pytest
from fastapi.testclient import TestClient

# Keep tests independent of the developer's environment
os.environ["MIRRORFIND_MEILISEARCH_URL"] = "http://localhost:7700"
os.environ["MIRRORFIND_PER_PAGE"] = "10"
os.environ["MIRRORFIND_PAGE_COUNT_ROUNDING"] = "ceil"

from mirrorfind.config import Settings  # noqa: E402
from mirrorfind.main import create_app  # noqa: E402
from tests.fakes import FakeBackend  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    return Settings(per_page=10)


@pytest.fixture
def fake_backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def app(settings, fake_backend):
    return create_app(settings, backend=fake_backend)


@pytest.fixture
def client(app) -> TestClient:
    """Test client for an app wired to the fake backend."""
    with TestClient(app, base_url="http://localhost") as test_client:
        yield test_client
