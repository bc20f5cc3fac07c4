"""Unit tests for AnswerService."""

from uuid import uuid4

import pytest

from blog.domain.error import NotAuthorizedError, NotFoundError
from blog.domain.service import AnswerService, QuestionService, VoteService
from blog.domain.value import QuestionId, TargetType, UserId, VoteType
from blog.persistence.repository.inmemory import InMemoryStore
from tests.harness import create_env_fixture, tally_votes

unit_env = create_env_fixture()


async def _ask(env):
    question_service = await env.get(QuestionService)
    return await question_service.create_question(
        author_id=UserId(uuid4()),
        title="Which volatility estimator for intraday?",
        content="Parkinson, Garman-Klass or Yang-Zhang?",
        tags=[],
    )


class TestCreateAnswer:
    """Tests for create_answer."""

    @pytest.mark.asyncio
    async def test_create_answer_increments_answer_count(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question_service = await unit_env.get(QuestionService)
        question = await _ask(unit_env)

        # Act
        answer = await answer_service.create_answer(
            question.id, UserId(uuid4()), "Yang-Zhang handles overnight gaps."
        )

        # Assert
        stored = await question_service.get_question(question.id)
        assert stored.answer_count == 1
        assert answer.question_id == question.id
        assert answer.upvote_count == 0
        assert answer.downvote_count == 0

    @pytest.mark.asyncio
    async def test_create_answer_for_missing_question_raises(self, unit_env):
        answer_service = await unit_env.get(AnswerService)

        with pytest.raises(NotFoundError):
            await answer_service.create_answer(
                QuestionId(uuid4()), UserId(uuid4()), "An answer to nothing at all."
            )


class TestListAnswers:
    """Tests for list_answers ordering."""

    @pytest.mark.asyncio
    async def test_answers_ordered_by_net_votes(self, unit_env):
        """Highest net votes first, then oldest first."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        vote_service = await unit_env.get(VoteService)
        question = await _ask(unit_env)
        first = await answer_service.create_answer(
            question.id, UserId(uuid4()), "The first answer posted here."
        )
        second = await answer_service.create_answer(
            question.id, UserId(uuid4()), "The second answer posted here."
        )
        third = await answer_service.create_answer(
            question.id, UserId(uuid4()), "The third answer posted here."
        )
        await vote_service.cast_vote(
            TargetType.ANSWER, third.id, VoteType.UPVOTE, UserId(uuid4())
        )
        await vote_service.cast_vote(
            TargetType.ANSWER, first.id, VoteType.DOWNVOTE, UserId(uuid4())
        )

        # Act
        answers = await answer_service.list_answers(question.id)

        # Assert
        assert [a.id for a in answers] == [third.id, second.id, first.id]


class TestUpdateAnswer:
    """Tests for update_answer."""

    @pytest.mark.asyncio
    async def test_owner_can_update(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question = await _ask(unit_env)
        author_id = UserId(uuid4())
        answer = await answer_service.create_answer(
            question.id, author_id, "Original answer content."
        )

        # Act
        updated = await answer_service.update_answer(
            answer.id, author_id, "Edited answer content here."
        )

        # Assert
        assert updated.content == "Edited answer content here."
        assert updated.updated_at >= answer.updated_at

    @pytest.mark.asyncio
    async def test_non_owner_cannot_update(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question = await _ask(unit_env)
        answer = await answer_service.create_answer(
            question.id, UserId(uuid4()), "Original answer content."
        )

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await answer_service.update_answer(
                answer.id, UserId(uuid4()), "Hijacked answer content."
            )

        stored = await answer_service.get_answer(answer.id)
        assert stored.content == "Original answer content."


class TestDeleteAnswer:
    """Tests for delete_answer."""

    @pytest.mark.asyncio
    async def test_delete_decrements_answer_count_and_drops_votes(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question_service = await unit_env.get(QuestionService)
        vote_service = await unit_env.get(VoteService)
        store = await unit_env.get(InMemoryStore)
        question = await _ask(unit_env)
        author_id = UserId(uuid4())
        answer = await answer_service.create_answer(
            question.id, author_id, "An answer that will be deleted."
        )
        await answer_service.create_answer(
            question.id, UserId(uuid4()), "An answer that will stay put."
        )
        await vote_service.cast_vote(
            TargetType.ANSWER, answer.id, VoteType.UPVOTE, UserId(uuid4())
        )

        # Act
        await answer_service.delete_answer(answer.id, author_id)

        # Assert
        stored = await question_service.get_question(question.id)
        assert stored.answer_count == 1
        assert tally_votes(store, TargetType.ANSWER, answer.id, VoteType.UPVOTE) == 0
        with pytest.raises(NotFoundError):
            await answer_service.get_answer(answer.id)

    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question_service = await unit_env.get(QuestionService)
        question = await _ask(unit_env)
        answer = await answer_service.create_answer(
            question.id, UserId(uuid4()), "Somebody else's answer."
        )

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await answer_service.delete_answer(answer.id, UserId(uuid4()))

        stored = await question_service.get_question(question.id)
        assert stored.answer_count == 1
