"""Tests for health check, root endpoint and error rendering."""

from fastapi.testclient import TestClient

from speedread import __version__


def test_health_check(client):
    """Test that health check returns status and database info."""
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "database": "connected",
        "version": __version__,
    }


def test_root_endpoint(client):
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["service"] == "SpeedRead"
    assert data["version"] == __version__
    assert data["docs"] is None


def test_unknown_route_renders_error(client):
    response = client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_unhandled_exception_returns_error_id(app):
    @app.get("/boom")
    def boom():
        raise RuntimeError("kaboom")

    response = TestClient(app, raise_server_exceptions=False).get("/boom")
    assert response.status_code == 500
    data = response.json()
    assert data["error"] == "Internal Server Error"
    assert len(data["error_id"]) == 8
