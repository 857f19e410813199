"""Test configuration and fixtures."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from src.main import app, limiter


@pytest.fixture
def client() -> Generator[TestClient]:
    """Create a test client with a fresh rate limit window.

    The client is used as a context manager so the application lifespan
    (logging setup) runs for each test.
    """
    limiter.reset()
    with TestClient(app) as test_client:
        yield test_client
