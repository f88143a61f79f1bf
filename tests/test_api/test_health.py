"""
Health endpoint tests
"""
from unittest.mock import MagicMock


def test_health_reports_connected_database(app, client):
    app.state.database = MagicMock()
    app.state.database.ping.return_value = True

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["database"] == "connected"


def test_health_degrades_without_database(app, client):
    app.state.database = MagicMock()
    app.state.database.ping.return_value = False

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "degraded"
