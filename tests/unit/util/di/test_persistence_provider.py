"""Unit tests for the request-scoped session lifecycle."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.error import NotFoundError
from tests.di import build_test_container
from tests.di.session import RecordingSession, RecordingSessionProvider


def _container(session: RecordingSession):
    return build_test_container(
        unmock={"persistence"}, overrides=[RecordingSessionProvider(session)]
    )


class TestRequestSession:
    """The request scope commits on success and rolls back on error."""

    @pytest.mark.asyncio
    async def test_clean_scope_commits(self):
        # Arrange
        session = RecordingSession()
        container = _container(session)

        # Act
        async with container() as request_container:
            provided = await request_container.get(AsyncSession)

        # Assert
        assert provided is session
        assert session.events == ["commit", "close"]
        await container.close()

    @pytest.mark.asyncio
    async def test_failed_scope_rolls_back(self):
        """A write followed by an error must not be committed."""
        # Arrange
        session = RecordingSession()
        container = _container(session)

        # Act
        with pytest.raises(NotFoundError):
            async with container() as request_container:
                provided = await request_container.get(AsyncSession)
                await provided.flush()
                raise NotFoundError("Answer", "missing")

        # Assert
        assert session.events == ["flush", "rollback", "close"]
        await container.close()
