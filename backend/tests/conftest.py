"""
Pytest fixtures for the DevConnector API tests.
Uses in-memory SQLite and provides two users with auth headers.
"""
import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Use in-memory SQLite for tests - set before config/session load
# Must override any .env DATABASE_URL
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["GITHUB_TOKEN"] = ""

from backend.app.db.base import Base
from backend.main import app
from backend.app.core.dependencies import get_db
from backend.app.core.security import get_password_hash, gravatar_url, issue_token
from backend.app.models.profile import Profile
from backend.app.models.user import User

# In-memory SQLite for tests - StaticPool ensures all sessions share same DB
engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Patch the session module so anything using SessionLocal directly hits the test engine
import backend.app.db.session as session_module
session_module.engine = engine
session_module.SessionLocal = TestingSessionLocal


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


def _make_user(session, name: str, email: str) -> User:
    user = User(
        name=name,
        email=email,
        hashed_password=get_password_hash("testpass123"),
        avatar_url=gravatar_url(email),
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture(scope="function")
def db_session():
    """Create tables and a fresh DB session per test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def test_user(db_session):
    """Create a test user in the DB."""
    return _make_user(db_session, "Test User", "test@example.com")


@pytest.fixture
def other_user(db_session):
    """A second user, for ownership checks."""
    return _make_user(db_session, "Other User", "other@example.com")


@pytest.fixture
def test_user_with_profile(db_session, test_user):
    """Test user with a minimal profile."""
    profile = Profile(
        user_id=test_user.id,
        status="Developer",
        skills=["python"],
        website="",
        experience=[],
        education=[],
        social={},
    )
    db_session.add(profile)
    db_session.commit()
    return test_user


@pytest.fixture
def auth_headers(test_user):
    """Bearer token for test user."""
    return {"Authorization": f"Bearer {issue_token(test_user.id)}"}


@pytest.fixture
def other_headers(other_user):
    """Bearer token for the second user."""
    return {"Authorization": f"Bearer {issue_token(other_user.id)}"}


@pytest.fixture
def client(db_session):
    """TestClient backed by the per-test database."""
    return TestClient(app)
