"""Unit tests for the login attempt repositories."""

from datetime import timedelta
from uuid import uuid4

import pytest

from blog.domain.model import User
from blog.domain.model.common import utcnow
from blog.domain.value import Email, UserId
from blog.persistence.repository import PostgresLoginAttemptRepository
from blog.persistence.repository.inmemory import (
    InMemoryLoginAttemptRepository,
    InMemoryStore,
)
from tests.di.session import RecordingSession


def _user() -> User:
    return User(
        id=UserId(uuid4()),
        email=Email("ada@example.com"),
        name="Ada",
        password_hash="$2b$04$not-a-real-hash",
    )


class TestPostgresLoginAttemptRepository:
    @pytest.mark.asyncio
    async def test_failure_is_committed_on_its_own_session(self):
        """The request session is never touched, so its rollback can't undo this."""
        # Arrange
        own_session = RecordingSession()
        repo = PostgresLoginAttemptRepository(lambda: own_session)

        # Act
        await repo.record_failure(
            UserId(uuid4()), max_attempts=5, lock_until=utcnow() + timedelta(minutes=15)
        )

        # Assert
        assert own_session.events == ["execute", "commit", "close"]


class TestInMemoryLoginAttemptRepository:
    @pytest.mark.asyncio
    async def test_locks_once_limit_reached(self):
        # Arrange
        store = InMemoryStore()
        user = _user()
        store.users[user.id] = user
        repo = InMemoryLoginAttemptRepository(store)
        lock_until = utcnow() + timedelta(minutes=15)

        # Act
        first = await repo.record_failure(user.id, max_attempts=2, lock_until=lock_until)
        unlocked = store.users[user.id].locked_until
        second = await repo.record_failure(
            user.id, max_attempts=2, lock_until=lock_until
        )

        # Assert
        assert (first, second) == (1, 2)
        assert unlocked is None
        assert store.users[user.id].locked_until == lock_until

    @pytest.mark.asyncio
    async def test_unknown_user_returns_none(self):
        repo = InMemoryLoginAttemptRepository()

        result = await repo.record_failure(
            UserId(uuid4()), max_attempts=5, lock_until=utcnow()
        )

        assert result is None
