"""Unit tests for register, login and current-user use cases."""

from uuid import UUID, uuid4

import pytest

from blog.application.usecase.auth import (
    ChangePasswordRequest,
    ChangePasswordUseCase,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from blog.domain.error import AuthenticationError, NotFoundError
from blog.domain.service import JWTService, UserService
from blog.domain.value import UserId, UserRole
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _register_request(**overrides) -> RegisterRequest:
    data = {
        "email": "ada@example.com",
        "password": "correct horse",
        "name": "Ada",
    }
    data.update(overrides)
    return RegisterRequest(**data)


class TestRegisterUseCase:
    @pytest.mark.asyncio
    async def test_register_returns_token_for_new_user(self, unit_env):
        # Arrange
        register_use_case = await unit_env.get(RegisterUseCase)
        jwt_service = await unit_env.get(JWTService)

        # Act
        result = await register_use_case.execute(_register_request())

        # Assert
        assert result.token_type == "bearer"
        assert result.user.email == "ada@example.com"
        assert result.user.role == UserRole.USER
        payload = jwt_service.verify_token(result.access_token)
        assert payload.user_id == result.user.user_id
        assert payload.role == "user"

    def test_short_password_rejected_by_request_model(self):
        with pytest.raises(ValueError):
            _register_request(password="short")

    @pytest.mark.parametrize("password", ["x" * 73, "€" * 25])
    def test_password_over_72_bytes_rejected_by_request_model(self, password):
        """'€' is three bytes in UTF-8, so 25 of them are 75 bytes."""
        with pytest.raises(ValueError, match="72 bytes"):
            _register_request(password=password)


class TestChangePasswordUseCase:
    @pytest.mark.asyncio
    async def test_change_password_then_login(self, unit_env):
        # Arrange
        register_use_case = await unit_env.get(RegisterUseCase)
        change_password_use_case = await unit_env.get(ChangePasswordUseCase)
        login_use_case = await unit_env.get(LoginUseCase)
        registered = await register_use_case.execute(_register_request())

        # Act
        result = await change_password_use_case.execute(
            ChangePasswordRequest(
                user_id=registered.user.user_id,
                current_password="correct horse",
                new_password="battery staple",
            )
        )

        # Assert
        assert result.message == "Password updated successfully"
        login = await login_use_case.execute(
            LoginRequest(email="ada@example.com", password="battery staple")
        )
        assert login.user.user_id == registered.user.user_id


class TestLoginUseCase:
    @pytest.mark.asyncio
    async def test_login_with_registered_credentials(self, unit_env):
        # Arrange
        register_use_case = await unit_env.get(RegisterUseCase)
        login_use_case = await unit_env.get(LoginUseCase)
        registered = await register_use_case.execute(_register_request())

        # Act
        result = await login_use_case.execute(
            LoginRequest(email="ADA@example.com", password="correct horse")
        )

        # Assert
        assert result.user.user_id == registered.user.user_id
        assert result.user.last_login_at is not None

    @pytest.mark.asyncio
    async def test_wrong_password_rejected(self, unit_env):
        register_use_case = await unit_env.get(RegisterUseCase)
        login_use_case = await unit_env.get(LoginUseCase)
        await register_use_case.execute(_register_request())

        with pytest.raises(AuthenticationError):
            await login_use_case.execute(
                LoginRequest(email="ada@example.com", password="battery staple")
            )


class TestGetCurrentUserUseCase:
    @pytest.mark.asyncio
    async def test_returns_profile(self, unit_env):
        # Arrange
        register_use_case = await unit_env.get(RegisterUseCase)
        get_current_user = await unit_env.get(GetCurrentUserUseCase)
        registered = await register_use_case.execute(_register_request(bio="Quant"))

        # Act
        result = await get_current_user.execute(
            GetCurrentUserRequest(user_id=registered.user.user_id)
        )

        # Assert
        assert result.user.name == "Ada"
        assert result.user.bio == "Quant"

    @pytest.mark.asyncio
    async def test_deactivated_user_rejected(self, unit_env):
        # Arrange
        register_use_case = await unit_env.get(RegisterUseCase)
        get_current_user = await unit_env.get(GetCurrentUserUseCase)
        user_service = await unit_env.get(UserService)
        registered = await register_use_case.execute(_register_request())
        await user_service.set_active(UserId(UUID(registered.user.user_id)), False)

        # Act & Assert
        with pytest.raises(AuthenticationError):
            await get_current_user.execute(
                GetCurrentUserRequest(user_id=registered.user.user_id)
            )

    @pytest.mark.asyncio
    async def test_unknown_user_raises_not_found(self, unit_env):
        get_current_user = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(NotFoundError):
            await get_current_user.execute(GetCurrentUserRequest(user_id=str(uuid4())))
