"""Tests for user domain router."""

import uuid

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from skillcircle.user.models import User


@pytest.fixture(name="admin_client")
def admin_client_fixture(client: TestClient, admin_user: User, login_as):
    login_as(admin_user)
    return client


# --- PATCH /users/me (Self-update, limited fields) ---


def test_update_me_name(client: TestClient, test_user: User, session: Session):
    """Test PATCH /users/me updates name."""
    response = client.patch("/users/me", json={"name": "Updated"})

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Updated"
    assert data["id"] == str(test_user.id)

    session.refresh(test_user)
    assert test_user.name == "Updated"


def test_update_me_privacy_flags_camel_case(
    client: TestClient, test_user: User, session: Session
):
    response = client.patch(
        "/users/me", json={"isPrivate": True, "showLocation": False}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["is_private"] is True
    assert data["show_location"] is False

    session.refresh(test_user)
    assert test_user.is_private is True


def test_update_me_partial(client: TestClient, test_user: User):
    """Test PATCH /users/me with empty body doesn't change anything."""
    original_name = test_user.name
    response = client.patch("/users/me", json={})

    assert response.status_code == 200
    assert response.json()["name"] == original_name


def test_update_me_null_name_is_ignored(client: TestClient, test_user: User):
    test_user_name = test_user.name
    response = client.patch("/users/me", json={"name": None, "bio": "Hello"})

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == test_user_name
    assert data["bio"] == "Hello"


def test_update_me_empty_name_rejected(client: TestClient):
    response = client.patch("/users/me", json={"name": "   "})

    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "name"


def test_update_me_ignores_restricted_fields(
    client: TestClient, test_user: User, session: Session
):
    """Test PATCH /users/me ignores email, is_active, is_admin for security."""
    original_email = test_user.email

    response = client.patch(
        "/users/me",
        json={
            "email": "hacker@example.com",
            "is_active": False,
            "is_admin": True,
            "is_verified": True,
            "name": "Legit",
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Legit"
    assert data["email"] == original_email
    assert data["is_active"] is True
    assert data["is_verified"] is False

    session.refresh(test_user)
    assert test_user.email == original_email
    assert test_user.is_active is True
    assert test_user.is_admin is False


def test_update_me_unauthenticated(unauthenticated_client: TestClient):
    """Test PATCH /users/me without auth returns 401."""
    response = unauthenticated_client.patch("/users/me", json={"name": "Hacker"})

    assert response.status_code == 401


# --- GET /users/ (Admin only) ---


def test_list_users(admin_client: TestClient, admin_user: User, test_user: User):
    """Test GET /users/ returns list of users for admin."""
    response = admin_client.get("/users/")

    assert response.status_code == 200
    data = response.json()
    ids = {u["id"] for u in data}
    assert {str(admin_user.id), str(test_user.id)} <= ids
    assert all("is_admin" in u for u in data)


def test_list_users_non_admin(client: TestClient):
    """Test GET /users/ returns 403 for non-admin users."""
    response = client.get("/users/")

    assert response.status_code == 403
    assert response.json()["type"] == "admin_required"


def test_list_users_unauthenticated(unauthenticated_client: TestClient):
    """Test GET /users/ without auth returns 401."""
    response = unauthenticated_client.get("/users/")

    assert response.status_code == 401


# --- PATCH /users/{user_id} (Admin only) ---


def test_deactivate_user_by_admin(
    admin_client: TestClient, session: Session, teacher: User
):
    """Test PATCH /users/{user_id} lets an admin deactivate and verify a user."""
    response = admin_client.patch(
        f"/users/{teacher.id}",
        json={"isActive": False, "isVerified": True},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["is_active"] is False
    assert data["is_verified"] is True

    session.refresh(teacher)
    assert teacher.is_active is False


def test_update_user_ignores_profile_fields(
    admin_client: TestClient, session: Session, teacher: User
):
    response = admin_client.patch(
        f"/users/{teacher.id}",
        json={"email": "changed@example.com", "is_active": None},
    )

    assert response.status_code == 200
    session.refresh(teacher)
    assert teacher.email == "teacher@example.com"
    assert teacher.is_active is True


def test_update_user_non_admin(client: TestClient, test_user: User):
    """Test PATCH /users/{user_id} returns 403 for non-admin users."""
    response = client.patch(f"/users/{test_user.id}", json={"is_verified": True})

    assert response.status_code == 403
    assert response.json()["type"] == "admin_required"


def test_update_user_not_found(admin_client: TestClient):
    """Test PATCH /users/{user_id} with non-existent ID returns 404."""
    non_existent_uuid = "00000000-0000-0000-0000-000000000000"
    response = admin_client.patch(
        f"/users/{non_existent_uuid}", json={"is_active": False}
    )

    assert response.status_code == 404
    assert response.json()["message"] == "User not found"


def test_update_user_unauthenticated(unauthenticated_client: TestClient):
    """Test PATCH /users/{user_id} without auth returns 401."""
    some_uuid = str(uuid.uuid4())
    response = unauthenticated_client.patch(
        f"/users/{some_uuid}", json={"is_active": False}
    )

    assert response.status_code == 401


def test_update_user_invalid_id(admin_client: TestClient):
    response = admin_client.patch("/users/not-a-uuid", json={"is_active": False})

    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "user_id"
