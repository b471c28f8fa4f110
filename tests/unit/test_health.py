"""Unit tests for health and metrics endpoints."""

import pytest
from fastapi.testclient import TestClient

from roadbook.factory import create_app


@pytest.mark.unit
def test_health_live(test_settings):
    """Test health live endpoint."""
    client = TestClient(create_app(test_settings))
    response = client.get("/health/live")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.unit
def test_health_ready_with_database(test_settings):
    with TestClient(create_app(test_settings)) as client:
        response = client.get("/health/ready")

    assert response.status_code == 200
    assert response.json() == {"status": "ready"}


@pytest.mark.unit
def test_health_ready_no_db(test_settings):
    """Without the lifespan no engine exists, so the app is not ready."""
    client = TestClient(create_app(test_settings))
    response = client.get("/health/ready")
    assert response.status_code == 503
    data = response.json()
    assert data["detail"]["status"] == "unready"
    assert data["detail"]["errors"] == ["database_connection_failed"]


@pytest.mark.unit
def test_metrics_endpoint(test_settings):
    """Test metrics endpoint."""
    client = TestClient(create_app(test_settings))
    response = client.get("/metrics")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")

    content = response.text
    assert "roadbook_trips_started_total" in content
    assert "roadbook_km_inconsistency_total" in content
    assert "roadbook_use_case_errors_total" in content


@pytest.mark.unit
def test_metrics_disabled(test_settings):
    settings = test_settings.model_copy(update={"metrics_enabled": False})
    client = TestClient(create_app(settings))
    assert client.get("/metrics").status_code == 404
