"""
Tests for health check endpoint.
"""
from huelab import __version__


def test_healthz_endpoint(test_client):
    """Test health check endpoint returns correct response."""
    response = test_client.get("/healthz")

    assert response.status_code == 200
    data = response.json()

    assert data["ok"] is True
    assert data["version"] == __version__
    assert data["service"] == "huelab-color-engine"


def test_root_endpoint(test_client):
    """Test root endpoint."""
    response = test_client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Huelab Color Engine API"
    assert data["docs"] == "/docs"
