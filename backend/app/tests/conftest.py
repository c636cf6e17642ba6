"""
Pytest fixtures: in-memory database, API client and signed-in users.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from app import models  # noqa: F401  registers the mappers
from app.db.base import Base
from app.db.session import get_db
from app.main import app

DEFAULT_PASSWORD = "Secret123"


@pytest.fixture
def db_engine():
    """In-memory SQLite engine shared by every connection of a test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine) -> Session:
    """Create database session for tests"""
    SessionLocal = sessionmaker(bind=db_engine, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def client(db_engine):
    """TestClient whose requests use the in-memory database."""
    TestingSessionLocal = sessionmaker(bind=db_engine, autocommit=False, autoflush=False)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(client):
    """Sign up and log in a user, returning bearer auth headers."""
    def _make_user(username: str = "alice", password: str = DEFAULT_PASSWORD) -> dict:
        response = client.post(
            "/api/auth/signup",
            json={
                "username": username,
                "name": username.title(),
                "email": f"{username}@example.com",
                "password": password,
            },
        )
        assert response.status_code == 201, response.text
        response = client.post("/api/auth/login", json={"username": username, "password": password})
        assert response.status_code == 200, response.text
        # Requests must authenticate explicitly through the returned headers
        client.cookies.clear()
        return {"Authorization": f"Bearer {response.json()['accessToken']}"}

    return _make_user


@pytest.fixture
def auth_headers(make_user):
    return make_user("alice")


@pytest.fixture
def other_headers(make_user):
    return make_user("bob")
