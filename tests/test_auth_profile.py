"""Authentication, identity sync and profile upsert."""
from datetime import datetime

import pytest

from tuf_portal.models import User, UserRole
from tuf_portal.schemas.user import IdentityClaims
from tuf_portal.services.auth import claims_from_token
from tuf_portal.services.mutations import sync_identity
from tuf_portal.exceptions import UnauthorizedException

STUDENT = {"Authorization": "Bearer mock-student-token"}


def test_missing_token_is_401_with_login_url(client):
    response = client.get("/api/auth/user")
    assert response.status_code == 401
    body = response.json()
    assert body["message"]
    assert body["login_url"] == "/api/login"
    assert "correlation_id" in body


def test_invalid_token_is_401(client):
    response = client.get("/api/auth/user", headers={"Authorization": "Bearer not-a-real-token"})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid or expired token"


def test_mock_token_creates_user_once(client, db_session):
    first = client.get("/api/auth/user", headers=STUDENT)
    second = client.get("/api/auth/user", headers=STUDENT)
    assert first.status_code == 200
    assert first.json()["id"] == "student-1"
    assert first.json()["role"] == "student"
    assert second.json()["id"] == "student-1"
    assert db_session.query(User).count() == 1


def test_mock_roles(client):
    assert client.get("/api/auth/user", headers={"Authorization": "Bearer mock-senior-token"}).json()["role"] == "senior"
    assert client.get("/api/auth/user", headers={"Authorization": "Bearer mock-admin-token"}).json()["role"] == "admin"


def test_claims_from_token_maps_names():
    claims = claims_from_token({"uid": "abc", "email": "a@b.c", "name": "Asha Kumar", "picture": "https://p"})
    assert claims.id == "abc"
    assert claims.first_name == "Asha"
    assert claims.last_name == "Kumar"
    assert claims.profile_image_url == "https://p"


def test_claims_without_subject_rejected():
    with pytest.raises(UnauthorizedException):
        claims_from_token({"email": "a@b.c"})


def test_profile_update_merges_fields(client):
    first = client.put("/api/profile", json={"department": "CSE", "year": 3, "skills": [" DSA ", ""]}, headers=STUDENT)
    assert first.status_code == 200
    assert first.json()["skills"] == ["DSA"]

    second = client.put("/api/profile", json={"intro": "Hi!"}, headers=STUDENT)
    data = second.json()
    assert data["department"] == "CSE"
    assert data["year"] == 3
    assert data["intro"] == "Hi!"


def test_profile_updated_at_strictly_increases(client, db_session):
    stamps = []
    for n in range(3):
        response = client.put("/api/profile", json={"intro": f"v{n}"}, headers=STUDENT)
        stamps.append(datetime.fromisoformat(response.json()["updatedAt"]))
    assert stamps[0] < stamps[1] < stamps[2]
    assert db_session.query(User).filter(User.id == "student-1").count() == 1


def test_profile_cannot_change_id_or_role(client):
    response = client.put("/api/profile", json={"id": "hijack", "role": "admin", "intro": "x"}, headers=STUDENT)
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == "student-1"
    assert data["role"] == "student"


def test_profile_email_clash_is_400(client, make_user):
    make_user(UserRole.student, email="taken@example.com")
    response = client.put("/api/profile", json={"email": "Taken@Example.com"}, headers=STUDENT)
    assert response.status_code == 400


def test_profile_year_out_of_range_is_400(client):
    assert client.put("/api/profile", json={"year": 5}, headers=STUDENT).status_code == 400


def test_profile_creates_row_for_new_identity(client, unknown_user, db_session):
    response = client.put("/api/profile", json={"firstName": "New", "department": "IT"})
    assert response.status_code == 200
    assert response.json()["id"] == unknown_user.id
    assert db_session.query(User).filter(User.id == unknown_user.id).count() == 1


def test_profile_email_clash_ignores_stored_case(client, make_user):
    make_user(UserRole.student, email="Foo@Example.com")
    response = client.put("/api/profile", json={"email": "foo@example.com"}, headers=STUDENT)
    assert response.status_code == 400


def test_login_refreshes_provider_fields(db_session):
    sync_identity(db_session, IdentityClaims(id="g-1", first_name="Asha", profile_image_url="https://p/old.png"))
    user = sync_identity(
        db_session, IdentityClaims(id="g-1", first_name="Asha R", email="Asha@Example.com", profile_image_url="https://p/new.png")
    )
    assert user.first_name == "Asha R"
    assert user.profile_image_url == "https://p/new.png"
    assert user.email == "asha@example.com"
    assert db_session.query(User).filter(User.id == "g-1").count() == 1


def test_login_keeps_profile_fields_the_provider_omits(client, db_session):
    client.put("/api/profile", json={"department": "CSE", "firstName": "Asha"}, headers=STUDENT)
    user = sync_identity(db_session, IdentityClaims(id="student-1", last_name="Kumar"))
    assert user.first_name == "Asha"
    assert user.last_name == "Kumar"
    assert user.department == "CSE"


def test_login_skips_email_owned_by_another_user(db_session, make_user):
    make_user(UserRole.student, email="Shared@Example.com")
    sync_identity(db_session, IdentityClaims(id="g-2", first_name="Ravi"))
    user = sync_identity(db_session, IdentityClaims(id="g-2", first_name="Ravi", email="shared@example.com"))
    assert user.email is None
    assert user.first_name == "Ravi"
