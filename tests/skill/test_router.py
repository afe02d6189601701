"""Tests for skill domain router."""

import uuid

from fastapi.testclient import TestClient
from sqlmodel import Session

from skillcircle.skill.models import ExperienceLevel, SkillCategory, SkillWanted
from skillcircle.user.models import User

# --- GET /skills/search ---


def test_search_returns_other_users_skills(
    client: TestClient, test_user: User, guitar_skill, skill_factory
):
    skill_factory(test_user, title="My own skill")

    response = client.get("/skills/search")

    assert response.status_code == 200
    data = response.json()
    assert [s["id"] for s in data["skills"]] == [str(guitar_skill.id)]
    owner = data["skills"][0]["user"]
    assert owner["name"] == "Tina Teacher"
    assert "email" not in owner
    assert "external_id" not in owner
    assert data["pagination"] == {
        "current_page": 1,
        "total_pages": 1,
        "total_count": 1,
        "has_next_page": False,
        "has_prev_page": False,
        "limit": 12,
    }


def test_search_filters_by_category_and_level(
    client: TestClient, teacher: User, guitar_skill, skill_factory
):
    skill_factory(
        teacher,
        category=SkillCategory.MUSIC,
        experience_level=ExperienceLevel.BEGINNER,
    )

    response = client.get(
        "/skills/search",
        params={"category": "MUSIC", "experienceLevel": "EXPERT"},
    )

    assert response.status_code == 200
    assert [s["id"] for s in response.json()["skills"]] == [str(guitar_skill.id)]


def test_search_all_sentinel(client: TestClient, guitar_skill):
    response = client.get(
        "/skills/search", params={"category": "ALL", "experienceLevel": "ALL"}
    )

    assert response.status_code == 200
    assert response.json()["pagination"]["total_count"] == 1


def test_search_invalid_category(client: TestClient):
    response = client.get("/skills/search", params={"category": "ASTROLOGY"})

    assert response.status_code == 400
    body = response.json()
    assert body["type"] == "validation_error"
    assert body["details"][0]["field"] == "category"


def test_search_invalid_paging_falls_back(client: TestClient, guitar_skill):
    response = client.get("/skills/search", params={"page": "-1", "limit": "abc"})

    assert response.status_code == 200
    pagination = response.json()["pagination"]
    assert pagination["current_page"] == 1
    assert pagination["limit"] == 12


def test_search_limit_is_capped(client: TestClient, guitar_skill):
    response = client.get("/skills/search", params={"limit": "5000"})

    assert response.status_code == 200
    assert response.json()["pagination"]["limit"] == 100


def test_search_page_far_past_the_end(client: TestClient, guitar_skill):
    response = client.get("/skills/search", params={"page": "99999999999999999999"})

    assert response.status_code == 200
    body = response.json()
    assert body["skills"] == []
    assert body["pagination"]["total_count"] == 1
    assert body["pagination"]["has_prev_page"] is True
    assert body["pagination"]["has_next_page"] is False


def test_search_hides_private_owner(
    client: TestClient, session: Session, teacher: User, guitar_skill
):
    teacher.is_private = True
    session.add(teacher)
    session.commit()

    response = client.get("/skills/search")

    assert response.json()["skills"] == []


def test_search_unauthenticated(unauthenticated_client: TestClient):
    response = unauthenticated_client.get("/skills/search")

    assert response.status_code == 401


# --- GET /skills/mine ---


def test_list_my_skills(
    client: TestClient, test_user: User, skill_factory, wanted_skill: SkillWanted
):
    offered = skill_factory(test_user, is_public=False)

    response = client.get("/skills/mine")

    assert response.status_code == 200
    data = response.json()
    assert [s["id"] for s in data["skills_offered"]] == [str(offered.id)]
    assert data["skills_offered"][0]["is_public"] is False
    assert [s["id"] for s in data["skills_wanted"]] == [str(wanted_skill.id)]


# --- PATCH /skills/offered/{skill_id} ---


def test_owner_deactivates_skill(
    client: TestClient, session: Session, test_user: User, skill_factory
):
    skill = skill_factory(test_user)

    response = client.patch(f"/skills/offered/{skill.id}", json={"isActive": False})

    assert response.status_code == 200
    assert response.json()["is_active"] is False
    session.refresh(skill)
    assert skill.is_active is False


def test_deactivated_skill_leaves_search(
    client: TestClient, teacher: User, test_user: User, guitar_skill, login_as
):
    login_as(teacher)
    client.patch(f"/skills/offered/{guitar_skill.id}", json={"is_active": False})

    login_as(test_user)
    response = client.get("/skills/search")

    assert response.json()["skills"] == []


def test_owner_edits_skill(client: TestClient, test_user: User, skill_factory):
    skill = skill_factory(test_user, years_of_experience=3)

    response = client.patch(
        f"/skills/offered/{skill.id}",
        json={
            "title": "Advanced Python",
            "experienceLevel": "ADVANCED",
            "yearsOfExperience": None,
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Advanced Python"
    assert data["experience_level"] == "ADVANCED"
    assert data["years_of_experience"] is None


def test_null_title_leaves_title_unchanged(
    client: TestClient, test_user: User, skill_factory
):
    skill = skill_factory(test_user, title="Original")

    response = client.patch(f"/skills/offered/{skill.id}", json={"title": None})

    assert response.status_code == 200
    assert response.json()["title"] == "Original"


def test_edit_someone_elses_skill(client: TestClient, guitar_skill):
    response = client.patch(
        f"/skills/offered/{guitar_skill.id}", json={"is_active": False}
    )

    assert response.status_code == 403
    assert response.json()["type"] == "skill_forbidden"


def test_edit_missing_skill(client: TestClient):
    response = client.patch(f"/skills/offered/{uuid.uuid4()}", json={"title": "New"})

    assert response.status_code == 404


def test_edit_validates_fields(client: TestClient, test_user: User, skill_factory):
    skill = skill_factory(test_user)

    response = client.patch(
        f"/skills/offered/{skill.id}", json={"yearsOfExperience": 80}
    )

    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "yearsOfExperience"
