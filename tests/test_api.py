"""Tests for user-facing endpoints."""

import base64
from datetime import timedelta

from fastapi.testclient import TestClient

from futurefit.api.app import create_app
from futurefit.services.scans import ScanService
from tests.conftest import FIXED_NOW, make_profile, make_result

_PROFILE = {
    "height": 170,
    "weight": 70,
    "age": 30,
    "sex": "male",
    "goal": "maintain",
}


def _photo(data: bytes = b"photo-bytes") -> str:
    return base64.b64encode(data).decode()


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_put_then_get_profile(container) -> None:
    client = TestClient(create_app(container))

    put_response = client.put("/users/user-1/profile", json=_PROFILE)
    get_response = client.get("/users/user-1/profile")

    assert put_response.status_code == 200
    assert get_response.status_code == 200
    data = get_response.json()
    assert data["user_id"] == "user-1"
    assert data["sex"] == "male"
    assert data["activity_level"] == "moderate"


def test_get_missing_profile_returns_404(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/users/nobody/profile")

    assert response.status_code == 404


def test_put_profile_rejects_out_of_range_height(container) -> None:
    client = TestClient(create_app(container))

    response = client.put("/users/user-1/profile", json={**_PROFILE, "height": 99})

    assert response.status_code == 422
    assert response.json()["field"] == "height"
    assert container.profile_service.get("user-1") is None


def test_put_profile_rejects_unknown_goal(container) -> None:
    client = TestClient(create_app(container))

    response = client.put("/users/user-1/profile", json={**_PROFILE, "goal": "bulk"})

    assert response.status_code == 422
    assert response.json()["field"] == "goal"


def test_create_scan_stores_estimate(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/users/user-1/scans",
        json={
            "front_photo": "data:image/jpeg;base64," + _photo(),
            "side_photo": _photo(b"side"),
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert data["user_id"] == "user-1"
    assert data["body_fat_percentage"] == 45.0
    assert data["is_fallback"] is False
    assert data["confidence"] == 0.85
    assert data["measurements"]["sex"] == "male"

    history = client.get("/users/user-1/scans").json()["scans"]
    assert [scan["id"] for scan in history] == [data["id"]]


def test_create_scan_with_empty_photo_falls_back(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/users/user-1/scans",
        json={"front_photo": "", "side_photo": _photo()},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["is_fallback"] is True
    assert data["confidence"] == 0.0
    assert data["measurements"] is None


def test_create_scan_rejects_invalid_base64(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/users/user-1/scans",
        json={"front_photo": "not base64!", "side_photo": _photo()},
    )

    assert response.status_code == 422
    assert response.json()["field"] == "front_photo"


def test_plans_require_profile(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/users/user-1/plans")

    assert response.status_code == 404


def test_plans_for_stored_profile(container) -> None:
    client = TestClient(create_app(container))
    client.put("/users/user-1/profile", json=_PROFILE)

    response = client.get("/users/user-1/plans")

    assert response.status_code == 200
    data = response.json()
    assert data["workout"]["title"] == "Maintenance Program"
    assert data["nutrition"]["daily_calories"] == 2507
    assert data["nutrition"]["macros"] == {
        "protein_g": 112,
        "carbs_g": 251,
        "fat_g": 84,
    }


def test_progress_summary(container) -> None:
    client = TestClient(create_app(container))
    container.profile_service.put("user-1", make_profile(goal="lose_fat"))
    scan_service: ScanService = container.scan_service
    scan_service.record("user-1", make_result(20.0, FIXED_NOW - timedelta(days=7)))
    scan_service.record("user-1", make_result(18.5, FIXED_NOW))

    response = client.get("/users/user-1/progress")

    assert response.status_code == 200
    data = response.json()
    assert data["total_scans"] == 2
    assert data["latest"]["body_fat_percentage"] == 18.5
    assert data["body_fat_change"] == -1.5
    assert data["goal_progress"] == 50.0


def test_list_scans_rejects_out_of_range_limit(container) -> None:
    client = TestClient(create_app(container))
    container.scan_service.record("user-1", make_result(20.0, FIXED_NOW))

    assert client.get("/users/user-1/scans?limit=-1").status_code == 422
    assert client.get("/users/user-1/scans?limit=0").status_code == 422
    assert client.get("/users/user-1/scans?limit=501").status_code == 422

    response = client.get("/users/user-1/scans?limit=1")
    assert response.status_code == 200
    assert len(response.json()["scans"]) == 1
