"""API error mapping, with repositories replaced by in-memory fakes."""

import pytest
from fastapi.testclient import TestClient

from roadbook.dependencies import (
    get_clock,
    get_session_prefs,
    get_settings_repo,
    get_trip_repo,
)
from roadbook.factory import create_app
from tests.factories import make_completed_outward, make_trip


@pytest.fixture
def client(test_settings, trip_repo, session_prefs, settings_repo, clock) -> TestClient:
    app = create_app(test_settings)
    app.dependency_overrides[get_trip_repo] = lambda: trip_repo
    app.dependency_overrides[get_session_prefs] = lambda: session_prefs
    app.dependency_overrides[get_settings_repo] = lambda: settings_repo
    app.dependency_overrides[get_clock] = lambda: clock
    return TestClient(app)


@pytest.mark.unit
def test_not_found(client):
    response = client.post("/api/v1/trips/42/finish-outward", json={"end_km": 150, "end_place": "Lyon"})

    assert response.status_code == 404
    assert response.json()["detail"] == {"kind": "not_found", "message": "Trip not found (id: 42)"}


@pytest.mark.unit
def test_validation_failure(client):
    response = client.post("/api/v1/trips/outward", json={"start_km": -5, "start_place": "Paris"})

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["kind"] == "validation_failed"
    assert "minimum 0 km" in detail["message"]


@pytest.mark.unit
def test_km_inconsistency_carries_both_readings(client, trip_repo):
    trip_repo.seed(make_trip(id=1, start_km=100))

    response = client.post(
        "/api/v1/trips/1/finish-outward", json={"end_km": 90, "end_place": "Lyon"}
    )

    assert response.status_code == 409
    detail = response.json()["detail"]
    assert detail["kind"] == "km_inconsistency"
    assert (detail["start_km"], detail["end_km"]) == (100, 90)


@pytest.mark.unit
def test_invalid_state(client, trip_repo):
    trip_repo.seed(make_trip(id=1))
    response = client.post("/api/v1/trips/1/decide", json={"prepare_return": True})
    assert response.status_code == 422
    assert response.json()["detail"]["kind"] == "invalid_state"


@pytest.mark.unit
def test_storage_failure_is_500(client, trip_repo):
    outward = make_completed_outward(trip_id=1, paired_trip_id=1)
    trip_repo.seed(outward)
    trip_repo.fail_on_delete.add(1)

    response = client.delete("/api/v1/groups/1")

    assert response.status_code == 500
    assert response.json()["detail"]["kind"] == "unexpected"


@pytest.mark.unit
def test_delete_unknown_group(client):
    assert client.delete("/api/v1/groups/3").status_code == 404


@pytest.mark.unit
def test_settings_rejected_field(client):
    response = client.patch("/api/v1/settings", json={"default_guide": "0"})
    assert response.status_code == 422
    assert response.json()["detail"]["message"] == "Guide must be between 1 and 9"
