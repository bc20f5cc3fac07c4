"""Integration tests for login failures with a real database.

A failed login ends its request scope with an error, which rolls the
request transaction back. The attempt counter is written on a separate
session so the lockout still builds up.
"""

import pytest
import pytest_asyncio

from blog.application.usecase.auth import (
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from blog.config import AuthSettings
from blog.domain.error import AuthenticationError
from blog.domain.repository import QuestionRepository, UserRepository
from blog.domain.service import QuestionService
from blog.domain.value import Email
from tests.di import build_test_container
from tests.integration.database import reset_database

EMAIL = "ada@example.com"
PASSWORD = "correct horse"


@pytest_asyncio.fixture
async def app_container():
    container = build_test_container(unmock={"persistence"})
    try:
        await reset_database(container)
        async with container() as request_container:
            register_use_case = await request_container.get(RegisterUseCase)
            await register_use_case.execute(
                RegisterRequest(email=EMAIL, password=PASSWORD, name="Ada")
            )
        yield container
    finally:
        await container.close()


async def _failed_login(container) -> None:
    with pytest.raises(AuthenticationError):
        async with container() as request_container:
            login_use_case = await request_container.get(LoginUseCase)
            await login_use_case.execute(
                LoginRequest(email=EMAIL, password="wrong password")
            )


async def _stored_user(container):
    async with container() as request_container:
        user_repo = await request_container.get(UserRepository)
        return await user_repo.find_by_email(Email(EMAIL))


class TestLoginFailuresSurviveRollback:
    @pytest.mark.asyncio
    async def test_failed_attempt_is_persisted(self, app_container):
        # Act
        await _failed_login(app_container)

        # Assert
        user = await _stored_user(app_container)
        assert user.login_attempts == 1
        assert user.locked_until is None

    @pytest.mark.asyncio
    async def test_repeated_failures_lock_account(self, app_container):
        # Arrange
        async with app_container() as request_container:
            auth_settings = await request_container.get(AuthSettings)

        # Act
        for _ in range(auth_settings.max_login_attempts):
            await _failed_login(app_container)

        # Assert
        user = await _stored_user(app_container)
        assert user.login_attempts == auth_settings.max_login_attempts
        assert user.locked_until is not None
        with pytest.raises(AuthenticationError, match="locked"):
            async with app_container() as request_container:
                login_use_case = await request_container.get(LoginUseCase)
                await login_use_case.execute(
                    LoginRequest(email=EMAIL, password=PASSWORD)
                )


class TestRequestRollback:
    @pytest.mark.asyncio
    async def test_error_discards_the_request_writes(self, app_container):
        # Arrange
        user = await _stored_user(app_container)

        # Act
        with pytest.raises(RuntimeError):
            async with app_container() as request_container:
                question_service = await request_container.get(QuestionService)
                question = await question_service.create_question(
                    author_id=user.id,
                    title="Will this question survive?",
                    content="The request fails right after creating it.",
                    tags=[],
                )
                raise RuntimeError("request failed")

        # Assert
        async with app_container() as request_container:
            question_repo = await request_container.get(QuestionRepository)
            assert await question_repo.find_by_id(question.id) is None
