"""Test harness for unit, integration and E2E tests.

Settings are loaded from environment variables (configure via .env or export).
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from blog.interface.api.app import create_app
from blog.persistence.repository.inmemory import InMemoryStore
from blog.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields a request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_question(unit_env):
            service = await unit_env.get(QuestionService)
            question = await service.create_question(...)
            assert question.answer_count == 0
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture(unmock: set[Component] | None = None):
    """Factory for a TestClient fixture driving the full FastAPI app.

    The app gets its own test container; every HTTP request opens its own
    request scope on it, like in production.
    """

    @pytest.fixture
    def _client():
        app = create_app(container=build_test_container(unmock=unmock or set()))
        with TestClient(app) as client:
            yield client

    return _client


def tally_votes(store: InMemoryStore, target_type, target_id, vote_type) -> int:
    """Count the stored vote rows of one type on a target."""
    return sum(
        1
        for vote in store.votes.values()
        if vote.target_type == target_type
        and vote.target_id == target_id
        and vote.vote_type == vote_type
    )
