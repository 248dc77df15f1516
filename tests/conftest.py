import os

# Must be set before the app (and its settings) are imported
os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from datetime import timedelta
from uuid import uuid4
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tuf_portal.main import app
from tuf_portal.db import Base, get_db
from tuf_portal.models import Note, User, UserRole
from tuf_portal.services.auth import get_current_user
from tuf_portal.utils.datetime import naive_utc_now

# Use SQLite in-memory for test DB
TEST_DATABASE_URL = "sqlite+pysqlite:///:memory:"
# For in-memory SQLite we must use a StaticPool so TestClient requests and
# fixture sessions share the same database.
engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Dependency override
def override_get_db():
    try:
        db = TestingSessionLocal()
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_test_db():
    # recreate schema for each test to ensure isolation
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    app.dependency_overrides.pop(get_current_user, None)
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db_session():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


def _make_user(db, role=UserRole.student, **fields):
    user = User(
        id=fields.pop("id", str(uuid4())),
        email=fields.pop("email", f"user+{uuid4().hex[:8]}@example.com"),
        first_name=fields.pop("first_name", "Test"),
        last_name=fields.pop("last_name", role.value.title()),
        role=role,
        **fields,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def _make_note(db, uploader, **fields):
    data = {
        "dept": "CSE",
        "semester": 3,
        "course_code": "CS301",
        "title": "DSA Guide",
        "file_url": "https://files.example.edu/dsa.pdf",
        "pages": 10,
        "downloads": 0,
    }
    data.update(fields)
    note = Note(uploaded_by=uploader.id, **data)
    db.add(note)
    db.commit()
    db.refresh(note)
    return note


class MockUser:
    """Authenticated identity as the routes see it; detached from any session."""

    def __init__(self, role=UserRole.student, id=None, email=None):
        self.id = id or str(uuid4())
        self.email = email or f"{role.value}@example.com"
        self.role = role


def _login_as(user):
    mock = user if isinstance(user, MockUser) else MockUser(user.role, id=user.id, email=user.email)
    app.dependency_overrides[get_current_user] = lambda: mock
    return user


@pytest.fixture
def make_user(db_session):
    return lambda role=UserRole.student, **fields: _make_user(db_session, role, **fields)


@pytest.fixture
def make_note(db_session):
    return lambda uploader, **fields: _make_note(db_session, uploader, **fields)


@pytest.fixture
def login_as():
    return _login_as


@pytest.fixture
def student_user(db_session):
    return _make_user(db_session, UserRole.student, department="CSE")


@pytest.fixture
def admin_user(db_session):
    return _make_user(db_session, UserRole.admin)


@pytest.fixture
def as_student(student_user):
    return _login_as(student_user)


@pytest.fixture
def as_admin(admin_user):
    return _login_as(admin_user)


@pytest.fixture
def yesterday():
    return naive_utc_now() - timedelta(days=1)


@pytest.fixture
def tomorrow():
    return naive_utc_now() + timedelta(days=1)


@pytest.fixture
def unknown_user():
    """Signed in, but no user row exists for the identity."""
    return _login_as(MockUser(UserRole.student))


@pytest.fixture
def test_engine():
    return engine


@pytest.fixture
def note_payload():
    def build(**overrides):
        payload = {
            "dept": "CSE",
            "semester": 3,
            "courseCode": "CS301",
            "title": "DSA Guide",
            "description": "Trees, graphs and DP",
            "fileUrl": "https://files.example.edu/dsa.pdf",
            "pages": 42,
        }
        payload.update(overrides)
        return payload
    return build
