"""
Test configuration and fixtures for the Huelab color engine tests.
"""
import pytest
from fastapi.testclient import TestClient

from huelab.main import app
from huelab.services.cache import EngineCaches
from huelab.services.engine import ColorEngine


@pytest.fixture
def test_client():
    """Create test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def engine():
    """Fresh engine with its own caches for each test."""
    return ColorEngine(caches=EngineCaches())


@pytest.fixture
def uncached_engine():
    """Engine with caching disabled."""
    return ColorEngine(caches=EngineCaches(enabled=False))
