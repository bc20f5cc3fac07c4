"""Shared request helpers for E2E tests."""

from uuid import uuid4

from blog.config import Settings
from blog.domain.model import User
from blog.domain.service import JWTService
from blog.domain.value import Email, UserId, UserRole


def register(client, email: str, name: str = "Test User", password: str = "password123"):
    """Register through the API and return (user_id, auth headers)."""
    response = client.post(
        "/auth/register",
        json={"email": email, "password": password, "name": name},
    )
    assert response.status_code == 201, response.text
    data = response.json()["data"]
    return data["user"]["user_id"], bearer(data["access_token"])


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def admin_headers(user_id: str | None = None) -> dict[str, str]:
    """Headers carrying an admin token signed with the app's settings.

    Admin routes trust the role in the verified token, so the account does
    not need to exist unless the route loads it.
    """
    admin = User(
        id=UserId(uuid4()) if user_id is None else UserId(user_id),
        email=Email("admin@example.com"),
        name="Admin",
        password_hash="unused",
        role=UserRole.ADMIN,
    )
    return bearer(JWTService(Settings().auth).create_token(admin))
