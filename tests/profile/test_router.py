"""Tests for profile domain router."""

import uuid

from fastapi.testclient import TestClient
from sqlmodel import Session

from skillcircle.user.models import User


def setup_body(**overrides) -> dict:
    body = {
        "name": "Test User",
        "bio": "Backend developer, aspiring guitarist",
        "location": {"address": "Amsterdam, Netherlands"},
        "availability": {
            "daysOfWeek": ["TUESDAY", "THURSDAY"],
            "timeSlots": ["EVENING"],
            "sessionDuration": "ONE_HOUR",
            "timezone": "Europe/Amsterdam",
        },
        "privacy": {"showSkillsWanted": False},
        "skillsOffered": [
            {
                "title": "Python",
                "description": "APIs, testing and packaging",
                "category": "TECHNOLOGY",
                "experienceLevel": "EXPERT",
            }
        ],
    }
    body.update(overrides)
    return body


# --- POST /profile/setup ---


def test_setup(client: TestClient, session: Session, test_user: User):
    response = client.post("/profile/setup", json=setup_body())

    assert response.status_code == 200
    data = response.json()
    assert data["user"]["id"] == str(test_user.id)
    assert data["user"]["show_skills_wanted"] is False
    assert data["user"]["location"]["address"] == "Amsterdam, Netherlands"
    assert data["user"]["location"]["coordinates"] is None
    assert data["availability"]["days_of_week"] == ["TUESDAY", "THURSDAY"]
    assert data["skills_offered"][0]["title"] == "Python"
    assert data["skills_wanted"] == []
    assert "external_id" not in data["user"]

    session.refresh(test_user)
    assert test_user.bio == "Backend developer, aspiring guitarist"


def test_setup_requires_a_skill(client: TestClient):
    response = client.post("/profile/setup", json=setup_body(skillsOffered=[]))

    assert response.status_code == 400
    body = response.json()
    assert body["type"] == "validation_error"
    assert "Add at least one skill" in body["details"][0]["message"]


def test_setup_requires_a_day(client: TestClient):
    body = setup_body()
    body["availability"]["daysOfWeek"] = []

    response = client.post("/profile/setup", json=body)

    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "availability.daysOfWeek"


def test_setup_rejects_bad_coordinates(client: TestClient):
    body = setup_body(
        location={"address": "Nowhere", "position": {"lat": 91, "lng": 0}}
    )

    response = client.post("/profile/setup", json=body)

    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "location.position.lat"


def test_setup_unauthenticated(unauthenticated_client: TestClient):
    response = unauthenticated_client.post("/profile/setup", json=setup_body())

    assert response.status_code == 401


# --- GET /profile/me ---


def test_my_profile_before_setup(client: TestClient, test_user: User):
    response = client.get("/profile/me")

    assert response.status_code == 200
    data = response.json()
    assert data["user"]["email"] == test_user.email
    assert data["availability"] is None
    assert data["skills_offered"] == []


def test_my_profile_after_setup(client: TestClient):
    client.post("/profile/setup", json=setup_body())

    response = client.get("/profile/me")

    assert response.json()["availability"]["session_duration"] == "ONE_HOUR"


# --- GET /profile/{user_id} ---


def test_public_profile(client: TestClient, teacher: User, guitar_skill):
    response = client.get(f"/profile/{teacher.id}")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Tina Teacher"
    assert "email" not in data
    assert [s["title"] for s in data["skills_offered"]] == ["Guitar Lessons"]


def test_public_profile_private_user(
    client: TestClient, session: Session, teacher: User
):
    teacher.is_private = True
    session.add(teacher)
    session.commit()

    response = client.get(f"/profile/{teacher.id}")

    assert response.status_code == 404
    assert response.json()["type"] == "user_not_found"


def test_public_profile_unknown_user(client: TestClient):
    response = client.get(f"/profile/{uuid.uuid4()}")

    assert response.status_code == 404
