"""End-to-end tests for registration, login and the current user."""

from tests.e2e.helpers import bearer, register
from tests.harness import create_client_fixture

client = create_client_fixture()


class TestHealth:
    def test_health_uses_envelope(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["status"] == "healthy"


class TestAuthFlow:
    """Register, log in, then read the profile with the token."""

    def test_register_login_me(self, client):
        # Arrange
        user_id, _ = register(client, "ada@example.com", name="Ada")

        # Act
        login = client.post(
            "/auth/login",
            json={"email": "ada@example.com", "password": "password123"},
        )
        token = login.json()["data"]["access_token"]
        me = client.get("/auth/me", headers=bearer(token))

        # Assert
        assert login.status_code == 200
        assert login.json()["message"] == "Login successful"
        assert me.status_code == 200
        assert me.json()["data"]["user_id"] == user_id
        assert me.json()["data"]["name"] == "Ada"

    def test_duplicate_registration_conflicts(self, client):
        register(client, "ada@example.com")

        response = client.post(
            "/auth/register",
            json={"email": "ada@example.com", "password": "password123", "name": "X"},
        )

        assert response.status_code == 409
        assert response.json()["success"] is False

    def test_wrong_password_is_unauthorized(self, client):
        register(client, "ada@example.com")

        response = client.post(
            "/auth/login", json={"email": "ada@example.com", "password": "nope-nope"}
        )

        assert response.status_code == 401
        assert response.json() == {
            "success": False,
            "message": "Invalid email or password",
        }

    def test_me_without_token(self, client):
        response = client.get("/auth/me")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_me_with_garbage_token(self, client):
        response = client.get("/auth/me", headers=bearer("not-a-jwt"))

        assert response.status_code == 401
        assert response.json()["success"] is False

    def test_invalid_register_body_is_422_with_details(self, client):
        response = client.post(
            "/auth/register",
            json={"email": "not-an-email", "password": "short", "name": ""},
        )

        assert response.status_code == 422
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Validation failed"
        assert len(body["data"]) >= 2


class TestProfiles:
    def test_update_me_then_public_profile(self, client):
        # Arrange
        user_id, headers = register(client, "ada@example.com", name="Ada")

        # Act
        update = client.put("/users/me", json={"bio": "Options"}, headers=headers)
        public = client.get(f"/users/{user_id}")

        # Assert
        assert update.status_code == 200
        assert update.json()["data"]["bio"] == "Options"
        assert public.status_code == 200
        assert public.json()["data"]["bio"] == "Options"
        assert "email" not in public.json()["data"]

    def test_unknown_user_is_404(self, client):
        response = client.get("/users/00000000-0000-0000-0000-000000000000")

        assert response.status_code == 404
        assert response.json()["success"] is False


class TestPasswordLength:
    """bcrypt hashes at most 72 bytes, so longer passwords are rejected up front."""

    def _register(self, client, password):
        return client.post(
            "/auth/register",
            json={"email": "ada@example.com", "password": password, "name": "Ada"},
        )

    def test_72_byte_password_accepted(self, client):
        response = self._register(client, "p" * 72)

        assert response.status_code == 201

    def test_longer_password_is_422_not_500(self, client):
        response = self._register(client, "p" * 100)

        assert response.status_code == 422
        assert response.json()["success"] is False

    def test_limit_counts_bytes_not_characters(self, client):
        """40 two-byte characters are 80 bytes."""
        response = self._register(client, "é" * 40)

        assert response.status_code == 422


class TestChangePassword:
    def test_change_then_login_with_new_password(self, client):
        # Arrange
        _, headers = register(client, "ada@example.com")

        # Act
        response = client.put(
            "/auth/change-password",
            json={"currentPassword": "password123", "newPassword": "battery-staple"},
            headers=headers,
        )
        old_login = client.post(
            "/auth/login", json={"email": "ada@example.com", "password": "password123"}
        )
        new_login = client.post(
            "/auth/login",
            json={"email": "ada@example.com", "password": "battery-staple"},
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["message"] == "Password updated successfully"
        assert old_login.status_code == 401
        assert new_login.status_code == 200

    def test_snake_case_body_accepted(self, client):
        _, headers = register(client, "ada@example.com")

        response = client.put(
            "/auth/change-password",
            json={"current_password": "password123", "new_password": "battery-staple"},
            headers=headers,
        )

        assert response.status_code == 200

    def test_wrong_current_password_is_401(self, client):
        _, headers = register(client, "ada@example.com")

        response = client.put(
            "/auth/change-password",
            json={"currentPassword": "not-it-at-all", "newPassword": "battery-staple"},
            headers=headers,
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Current password is incorrect"

    def test_requires_authentication(self, client):
        response = client.put(
            "/auth/change-password",
            json={"currentPassword": "password123", "newPassword": "battery-staple"},
        )

        assert response.status_code == 401

    def test_overlong_new_password_is_422(self, client):
        _, headers = register(client, "ada@example.com")

        response = client.put(
            "/auth/change-password",
            json={"currentPassword": "password123", "newPassword": "p" * 73},
            headers=headers,
        )

        assert response.status_code == 422
