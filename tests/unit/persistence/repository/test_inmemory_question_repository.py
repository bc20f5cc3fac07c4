"""Unit tests for the in-memory question repository counters."""

from uuid import uuid4

import pytest

from blog.domain.model import Question
from blog.domain.value import QuestionId, UserId
from blog.persistence.repository.inmemory import InMemoryQuestionRepository


class TestCounters:
    @pytest.mark.asyncio
    async def test_vote_counters_floor_at_zero(self):
        # Arrange
        repo = InMemoryQuestionRepository()
        question = await repo.save(
            Question(
                id=QuestionId(uuid4()),
                title="Counters never go negative",
                content="Even when asked to.",
                author_id=UserId(uuid4()),
                upvote_count=1,
            )
        )

        # Act
        updated = await repo.adjust_vote_counts(question.id, -2, -1)

        # Assert
        assert updated.upvote_count == 0
        assert updated.downvote_count == 0
        assert updated.net_votes == updated.upvote_count - updated.downvote_count

    @pytest.mark.asyncio
    async def test_save_does_not_overwrite_counters(self):
        """Counters only move through the adjust methods."""
        # Arrange
        repo = InMemoryQuestionRepository()
        question = await repo.save(
            Question(
                id=QuestionId(uuid4()),
                title="Edited while being voted on",
                content="Original body text.",
                author_id=UserId(uuid4()),
            )
        )
        await repo.adjust_vote_counts(question.id, 1, 0)
        await repo.adjust_answer_count(question.id, 1)

        # Act
        saved = await repo.save(question.model_copy(update={"content": "New body text."}))

        # Assert
        assert saved.content == "New body text."
        assert saved.upvote_count == 1
        assert saved.answer_count == 1

    @pytest.mark.asyncio
    async def test_adjust_missing_question_returns_none(self):
        repo = InMemoryQuestionRepository()

        assert await repo.adjust_vote_counts(uuid4(), 1, 0) is None
