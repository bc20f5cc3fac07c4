"""End-to-end tests for the request transaction around handled errors."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from blog.interface.api.app import create_app
from tests.di import build_test_container
from tests.di.session import RecordingSession, RecordingSessionProvider


@pytest.fixture
def session():
    return RecordingSession()


@pytest.fixture
def client(session):
    container = build_test_container(
        unmock={"persistence"}, overrides=[RecordingSessionProvider(session)]
    )
    with TestClient(create_app(container=container)) as client:
        yield client


class TestRequestTransaction:
    def test_domain_error_rolls_back_earlier_writes(self, client, session):
        """Viewing a missing question bumps view_count, then 404s."""
        # Act
        response = client.get(f"/qa/questions/{uuid4()}")

        # Assert
        assert response.status_code == 404
        assert response.json()["success"] is False
        assert "flush" in session.events
        assert "rollback" in session.events
        assert "commit" not in session.events

    def test_request_without_persistence_leaves_session_untouched(
        self, client, session
    ):
        response = client.get("/health")

        assert response.status_code == 200
        assert session.events == []
