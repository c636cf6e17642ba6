"""
Tests for authentication endpoints.
"""
from app.core.config import settings


def signup(client, username="testuser", password="Password1", email=None):
    return client.post(
        "/api/auth/signup",
        json={
            "username": username,
            "name": "Test User",
            "email": email or f"{username}@example.com",
            "password": password,
        }
    )


def test_signup(client):
    """Test user signup."""
    response = signup(client)
    assert response.status_code == 201
    body = response.json()
    assert body["username"] == "testuser"
    assert body["isActive"] is True
    assert "password" not in body and "hashedPassword" not in body


def test_signup_duplicate_username(client):
    """Test that usernames are unique."""
    signup(client)
    response = signup(client, email="other@example.com")
    assert response.status_code == 400
    assert response.json()["code"] == "BAD_REQUEST"


def test_signup_weak_password(client):
    """Test password strength rules."""
    response = signup(client, password="alllowercase1")
    assert response.status_code == 400
    assert response.json() == {
        "error": "Invalid request data",
        "code": "BAD_REQUEST",
        "details": ["body.password"],
    }


def test_signup_invalid_username(client):
    response = signup(client, username="no spaces!")
    assert response.status_code == 400


def test_login(client):
    """Test user login."""
    signup(client, username="testuser2")

    response = client.post(
        "/api/auth/login",
        json={
            "username": "testuser2",
            "password": "Password1"
        }
    )
    assert response.status_code == 200
    assert "accessToken" in response.json()
    assert response.json()["tokenType"] == "bearer"
    assert settings.SESSION_COOKIE_NAME in response.headers.get("set-cookie", "")


def test_login_invalid_credentials(client):
    """Test login with invalid credentials."""
    response = client.post(
        "/api/auth/login",
        json={
            "username": "nonexistent",
            "password": "wrongpassword"
        }
    )
    assert response.status_code == 401
    assert response.json()["code"] == "UNAUTHORIZED"


def test_me(client, auth_headers):
    """Test reading the current user."""
    response = client.get("/api/users/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["username"] == "alice"
    assert response.json()["email"] == "alice@example.com"


def test_session_cookie_authenticates(client, make_user):
    """The session cookie is accepted in place of a bearer header."""
    headers = make_user("carol")
    token = headers["Authorization"].split(" ", 1)[1]
    response = client.get("/api/users/me", headers={"Cookie": f"{settings.SESSION_COOKIE_NAME}={token}"})
    assert response.status_code == 200
    assert response.json()["username"] == "carol"


def test_missing_session(client):
    response = client.get("/api/users/me")
    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized", "code": "UNAUTHORIZED"}


def test_invalid_token(client):
    response = client.get("/api/budgets", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401
    assert response.json()["code"] == "UNAUTHORIZED"


def test_logout_clears_cookie(client):
    response = client.post("/api/auth/logout")
    assert response.status_code == 200
    assert response.json() == {"message": "Logged out successfully"}
