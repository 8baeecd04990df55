"""
Integration tests for the health check endpoint.

Verifies GET /health returns 200 with status "healthy" on the
application module's app, with its lifespan running.
Version: 1.0.0
"""
import pytest

from fastapi.testclient import TestClient


@pytest.fixture
def client():
    """Create a test client around the module-level app."""
    from inventory_search.main import app
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


@pytest.mark.integration
class TestHealthRoutes:
    """Integration tests for the /health endpoint."""

    def test_health_returns_200(self, client):
        """GET /health should return HTTP 200."""
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_returns_status_healthy(self, client):
        """GET /health should include status 'healthy' in JSON body."""
        response = client.get("/health")
        assert response.json()["status"] == "healthy"

    def test_health_response_is_json(self, client):
        """GET /health should return a valid JSON response."""
        response = client.get("/health")
        assert response.headers["content-type"] == "application/json"
        assert isinstance(response.json(), dict)

    def test_unknown_route_is_404(self, client):
        response = client.get("/does-not-exist")
        assert response.status_code == 404
