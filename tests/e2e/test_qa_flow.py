"""End-to-end tests for questions, answers and voting."""

from tests.e2e.helpers import register
from tests.harness import create_client_fixture

client = create_client_fixture()

QUESTION = {
    "title": "How to backtest without lookahead bias?",
    "content": "My fills use the close of the signal bar.",
    "tags": ["Backtesting"],
}


def _ask(client, headers) -> str:
    response = client.post("/qa/questions", json=QUESTION, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]["question_id"]


class TestQuestions:
    def test_create_requires_authentication(self, client):
        response = client.post("/qa/questions", json=QUESTION)

        assert response.status_code == 401

    def test_create_and_get(self, client):
        # Arrange
        _, headers = register(client, "asker@example.com")

        # Act
        created = client.post("/qa/questions", json=QUESTION, headers=headers)
        question_id = created.json()["data"]["question_id"]
        fetched = client.get(f"/qa/questions/{question_id}")

        # Assert
        assert created.json()["message"] == "Question created"
        body = fetched.json()
        assert body["success"] is True
        assert body["data"]["tags"] == ["backtesting"]
        assert body["data"]["view_count"] == 1
        assert body["data"]["user_vote"] is None

    def test_list_is_paginated(self, client):
        # Arrange
        _, headers = register(client, "asker@example.com")
        for _ in range(3):
            _ask(client, headers)

        # Act
        response = client.get("/qa/questions", params={"page": 2, "limit": 2})

        # Assert
        body = response.json()
        assert len(body["data"]) == 1
        assert body["pagination"] == {
            "current_page": 2,
            "total_pages": 2,
            "total_items": 3,
            "items_per_page": 2,
        }

    def test_invalid_sort_is_422(self, client):
        response = client.get("/qa/questions", params={"sort": "hot"})

        assert response.status_code == 422

    def test_unknown_question_is_404(self, client):
        response = client.get("/qa/questions/9b2f5f0e-3c1a-4c47-9d0e-1f2a3b4c5d6e")

        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_malformed_question_id_is_422(self, client):
        response = client.get("/qa/questions/not-a-uuid")

        assert response.status_code == 422

    def test_only_owner_can_update_or_delete(self, client):
        # Arrange
        _, owner = register(client, "owner@example.com")
        _, other = register(client, "other@example.com")
        question_id = _ask(client, owner)

        # Act
        update = client.put(
            f"/qa/questions/{question_id}",
            json={"title": "A hijacked question title"},
            headers=other,
        )
        delete = client.delete(f"/qa/questions/{question_id}", headers=other)
        own_delete = client.delete(f"/qa/questions/{question_id}", headers=owner)

        # Assert
        assert update.status_code == 403
        assert delete.status_code == 403
        assert own_delete.status_code == 200
        assert own_delete.json()["message"] == "Question deleted"
        assert client.get(f"/qa/questions/{question_id}").status_code == 404


class TestVoting:
    """Vote toggle through the API."""

    def test_vote_toggle_and_status(self, client):
        # Arrange
        _, asker = register(client, "asker@example.com")
        _, voter = register(client, "voter@example.com")
        question_id = _ask(client, asker)
        url = f"/qa/questions/{question_id}/vote"

        # Act
        cast = client.post(url, json={"voteType": "upvote"}, headers=voter)
        status_after_cast = client.get(
            f"/qa/questions/{question_id}/vote-status", headers=voter
        )
        changed = client.post(url, json={"voteType": "downvote"}, headers=voter)
        removed = client.post(url, json={"vote_type": "downvote"}, headers=voter)

        # Assert
        assert cast.status_code == 200
        assert cast.json()["message"] == "vote cast"
        assert cast.json()["data"]["upvote_count"] == 1
        assert status_after_cast.json()["data"] == {
            "has_voted": True,
            "vote_type": "upvote",
        }
        assert changed.json()["message"] == "vote changed"
        assert changed.json()["data"]["net_votes"] == -1
        assert removed.json()["message"] == "vote removed"
        assert removed.json()["data"]["upvote_count"] == 0
        assert removed.json()["data"]["downvote_count"] == 0

    def test_question_shows_callers_vote(self, client):
        # Arrange
        _, asker = register(client, "asker@example.com")
        _, voter = register(client, "voter@example.com")
        question_id = _ask(client, asker)
        client.post(
            f"/qa/questions/{question_id}/vote",
            json={"voteType": "upvote"},
            headers=voter,
        )

        # Act
        as_voter = client.get(f"/qa/questions/{question_id}", headers=voter)
        as_asker = client.get(f"/qa/questions/{question_id}", headers=asker)

        # Assert
        assert as_voter.json()["data"]["user_vote"] == "upvote"
        assert as_asker.json()["data"]["user_vote"] is None

    def test_vote_requires_authentication(self, client):
        _, asker = register(client, "asker@example.com")
        question_id = _ask(client, asker)

        response = client.post(
            f"/qa/questions/{question_id}/vote", json={"voteType": "upvote"}
        )

        assert response.status_code == 401

    def test_invalid_vote_type_is_422(self, client):
        _, asker = register(client, "asker@example.com")
        question_id = _ask(client, asker)

        response = client.post(
            f"/qa/questions/{question_id}/vote",
            json={"voteType": "sideways"},
            headers=asker,
        )

        assert response.status_code == 422


class TestAnswers:
    def test_answer_lifecycle(self, client):
        # Arrange
        _, asker = register(client, "asker@example.com")
        _, answerer = register(client, "answerer@example.com")
        question_id = _ask(client, asker)

        # Act
        created = client.post(
            f"/qa/questions/{question_id}/answers",
            json={"content": "Shift the signal by one bar."},
            headers=answerer,
        )
        answer_id = created.json()["data"]["answer_id"]
        vote = client.post(
            f"/qa/answers/{answer_id}/vote",
            json={"voteType": "upvote"},
            headers=asker,
        )
        status = client.get(f"/qa/answers/{answer_id}/vote-status", headers=asker)
        edit = client.put(
            f"/qa/answers/{answer_id}",
            json={"content": "Shift the signal by one full bar."},
            headers=answerer,
        )
        listed = client.get(f"/qa/questions/{question_id}/answers")
        question = client.get(f"/qa/questions/{question_id}")

        # Assert
        assert created.status_code == 201
        assert vote.json()["data"]["upvote_count"] == 1
        assert status.json()["data"]["vote_type"] == "upvote"
        assert edit.status_code == 200
        assert [a["content"] for a in listed.json()["data"]] == [
            "Shift the signal by one full bar."
        ]
        assert question.json()["data"]["answer_count"] == 1

    def test_delete_answer_updates_count(self, client):
        # Arrange
        _, asker = register(client, "asker@example.com")
        _, answerer = register(client, "answerer@example.com")
        question_id = _ask(client, asker)
        answer_id = client.post(
            f"/qa/questions/{question_id}/answers",
            json={"content": "An answer to be withdrawn."},
            headers=answerer,
        ).json()["data"]["answer_id"]

        # Act
        forbidden = client.delete(f"/qa/answers/{answer_id}", headers=asker)
        deleted = client.delete(f"/qa/answers/{answer_id}", headers=answerer)

        # Assert
        assert forbidden.status_code == 403
        assert deleted.status_code == 200
        question = client.get(f"/qa/questions/{question_id}").json()["data"]
        assert question["answer_count"] == 0

    def test_answer_vote_scenario_across_two_users(self, client):
        """A upvotes, A upvotes again, A downvotes, then B upvotes."""
        # Arrange
        _, asker = register(client, "asker@example.com")
        _, actor_a = register(client, "a@example.com")
        _, actor_b = register(client, "b@example.com")
        question_id = _ask(client, asker)
        answer_id = client.post(
            f"/qa/questions/{question_id}/answers",
            json={"content": "An answer everyone has a view on."},
            headers=asker,
        ).json()["data"]["answer_id"]
        url = f"/qa/answers/{answer_id}/vote"

        def counters(response):
            data = response.json()["data"]
            return data["upvote_count"], data["downvote_count"]

        # Act
        first = client.post(url, json={"voteType": "upvote"}, headers=actor_a)
        second = client.post(url, json={"voteType": "upvote"}, headers=actor_a)
        third = client.post(url, json={"voteType": "downvote"}, headers=actor_a)
        fourth = client.post(url, json={"voteType": "upvote"}, headers=actor_b)

        # Assert
        assert first.json()["success"] is True
        assert first.json()["message"] == "vote cast"
        assert counters(first) == (1, 0)
        assert second.json()["message"] == "vote removed"
        assert counters(second) == (0, 0)
        assert counters(third) == (0, 1)
        assert counters(fourth) == (1, 1)
