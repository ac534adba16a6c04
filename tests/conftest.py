"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from mesto import models  # noqa: F401
from mesto.database import Base, get_db
from mesto.main import app

DEFAULT_PASSWORD = "testpass123"  # noqa: S105


class AuthHeaders(dict):
    """Dict subclass that also stores user_id and email."""

    def __init__(self, *args, user_id: str | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


SQLALCHEMY_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test.db")

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def concurrent_db():
    """A second session, standing in for another worker writing at the same time."""
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def sign_up_and_in(client, email: str, password: str = DEFAULT_PASSWORD, **profile) -> AuthHeaders:
    """Register a user, sign in and return auth headers for them."""
    response = client.post("/signup", json={"email": email, "password": password, **profile})
    assert response.status_code == 201

    response = client.post("/signin", json={"email": email, "password": password})
    assert response.status_code == 200
    data = response.json()

    return AuthHeaders(
        {"Authorization": f"Bearer {data['token']}"}, user_id=data["userId"], email=email
    )


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return sign_up_and_in(client, "test@example.com", name="Test User")


@pytest.fixture
def other_auth_headers(client):
    """Create a second user and return their auth headers."""
    return sign_up_and_in(client, "other@example.com", name="Other User")


@pytest.fixture
def card(client, auth_headers):
    """Create a card owned by the auth_headers user."""
    response = client.post(
        "/cards",
        headers=auth_headers,
        json={"name": "Baikal", "link": "https://example.com/images/baikal.jpg"},
    )
    assert response.status_code == 201
    return response.json()
