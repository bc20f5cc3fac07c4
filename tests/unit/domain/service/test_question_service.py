"""Unit tests for QuestionService."""

from uuid import uuid4

import pytest

from blog.domain.error import NotAuthorizedError, NotFoundError
from blog.domain.repository import AnswerRepository, QuestionSortOrder, VoteRepository
from blog.domain.service import AnswerService, QuestionService, VoteService
from blog.domain.service.question_service import normalize_tags
from blog.domain.value import PageRequest, QuestionId, TargetType, UserId, VoteType
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestNormalizeTags:
    def test_trims_lowercases_and_dedupes(self):
        assert normalize_tags([" Options ", "options", "", "Greeks"]) == [
            "options",
            "greeks",
        ]


class TestCreateQuestion:
    """Tests for create_question."""

    @pytest.mark.asyncio
    async def test_create_question_starts_with_zero_counters(self, unit_env):
        # Arrange
        question_service = await unit_env.get(QuestionService)
        author_id = UserId(uuid4())

        # Act
        question = await question_service.create_question(
            author_id=author_id,
            title="  Is momentum dead in equities?  ",
            content="Looking at the last decade of returns.",
            tags=["Momentum", "equities"],
        )

        # Assert
        assert question.title == "Is momentum dead in equities?"
        assert question.tags == ["momentum", "equities"]
        assert question.author_id == author_id
        assert question.upvote_count == 0
        assert question.downvote_count == 0
        assert question.answer_count == 0
        assert question.view_count == 0
        assert question.created_at.tzinfo is not None


class TestGetQuestion:
    @pytest.mark.asyncio
    async def test_count_view_increments_view_count(self, unit_env):
        # Arrange
        question_service = await unit_env.get(QuestionService)
        question = await question_service.create_question(
            UserId(uuid4()), "What is a good Sharpe ratio?", "For a daily strategy.", []
        )

        # Act
        await question_service.get_question(question.id, count_view=True)
        viewed = await question_service.get_question(question.id, count_view=True)

        # Assert
        assert viewed.view_count == 2

    @pytest.mark.asyncio
    async def test_missing_question_raises(self, unit_env):
        question_service = await unit_env.get(QuestionService)

        with pytest.raises(NotFoundError):
            await question_service.get_question(QuestionId(uuid4()))


class TestListQuestions:
    """Tests for list_questions."""

    @pytest.mark.asyncio
    async def test_unanswered_filter_and_total(self, unit_env):
        # Arrange
        question_service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)
        answered = await question_service.create_question(
            UserId(uuid4()), "Answered question title", "Some question body.", []
        )
        unanswered = await question_service.create_question(
            UserId(uuid4()), "Unanswered question title", "Some question body.", []
        )
        await answer_service.create_answer(
            answered.id, UserId(uuid4()), "An answer to the first one."
        )

        # Act
        questions, total = await question_service.list_questions(
            PageRequest(page=1, limit=10), sort=QuestionSortOrder.UNANSWERED
        )

        # Assert
        assert total == 1
        assert [q.id for q in questions] == [unanswered.id]

    @pytest.mark.asyncio
    async def test_votes_sort_puts_best_first(self, unit_env):
        # Arrange
        question_service = await unit_env.get(QuestionService)
        vote_service = await unit_env.get(VoteService)
        low = await question_service.create_question(
            UserId(uuid4()), "Low scoring question", "Some question body.", []
        )
        high = await question_service.create_question(
            UserId(uuid4()), "High scoring question", "Some question body.", []
        )
        await vote_service.cast_vote(
            TargetType.QUESTION, high.id, VoteType.UPVOTE, UserId(uuid4())
        )
        await vote_service.cast_vote(
            TargetType.QUESTION, low.id, VoteType.DOWNVOTE, UserId(uuid4())
        )

        # Act
        questions, _ = await question_service.list_questions(
            PageRequest(), sort=QuestionSortOrder.VOTES
        )

        # Assert
        assert [q.id for q in questions] == [high.id, low.id]

    @pytest.mark.asyncio
    async def test_tag_and_search_filters(self, unit_env):
        # Arrange
        question_service = await unit_env.get(QuestionService)
        tagged = await question_service.create_question(
            UserId(uuid4()), "Pricing American options", "Binomial tree or LSM?", ["options"]
        )
        await question_service.create_question(
            UserId(uuid4()), "Fitting a GARCH model", "Which library is best?", ["vol"]
        )

        # Act
        by_tag, tag_total = await question_service.list_questions(
            PageRequest(), tag=" OPTIONS "
        )
        by_search, search_total = await question_service.list_questions(
            PageRequest(), search="binomial"
        )

        # Assert
        assert tag_total == 1
        assert by_tag[0].id == tagged.id
        assert search_total == 1
        assert by_search[0].id == tagged.id


class TestUpdateQuestion:
    @pytest.mark.asyncio
    async def test_non_owner_cannot_update(self, unit_env):
        # Arrange
        question_service = await unit_env.get(QuestionService)
        question = await question_service.create_question(
            UserId(uuid4()), "Original question title", "Original question body.", []
        )

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await question_service.update_question(
                question.id, UserId(uuid4()), title="Someone else's new title"
            )

    @pytest.mark.asyncio
    async def test_owner_update_keeps_counters(self, unit_env):
        # Arrange
        question_service = await unit_env.get(QuestionService)
        vote_service = await unit_env.get(VoteService)
        author_id = UserId(uuid4())
        question = await question_service.create_question(
            author_id, "Original question title", "Original question body.", []
        )
        await vote_service.cast_vote(
            TargetType.QUESTION, question.id, VoteType.UPVOTE, UserId(uuid4())
        )

        # Act
        updated = await question_service.update_question(
            question.id, author_id, title="Edited question title", tags=["Rates"]
        )

        # Assert
        assert updated.title == "Edited question title"
        assert updated.tags == ["rates"]
        assert updated.upvote_count == 1


class TestDeleteQuestion:
    """Tests for delete_question cascade."""

    @pytest.mark.asyncio
    async def test_delete_removes_answers_and_all_votes(self, unit_env):
        # Arrange
        question_service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)
        vote_service = await unit_env.get(VoteService)
        answer_repo = await unit_env.get(AnswerRepository)
        vote_repo = await unit_env.get(VoteRepository)
        author_id = UserId(uuid4())
        voter = UserId(uuid4())
        question = await question_service.create_question(
            author_id, "Question to be deleted", "It will not survive.", []
        )
        answer = await answer_service.create_answer(
            question.id, UserId(uuid4()), "An answer that goes with it."
        )
        await vote_service.cast_vote(
            TargetType.QUESTION, question.id, VoteType.UPVOTE, voter
        )
        await vote_service.cast_vote(TargetType.ANSWER, answer.id, VoteType.UPVOTE, voter)

        # Act
        await question_service.delete_question(question.id, author_id)

        # Assert
        with pytest.raises(NotFoundError):
            await question_service.get_question(question.id)
        assert await answer_repo.find_by_id(answer.id) is None
        assert (
            await vote_repo.find_by_user_and_target(
                voter, TargetType.QUESTION, question.id
            )
            is None
        )
        assert (
            await vote_repo.find_by_user_and_target(voter, TargetType.ANSWER, answer.id)
            is None
        )

    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete(self, unit_env):
        # Arrange
        question_service = await unit_env.get(QuestionService)
        question = await question_service.create_question(
            UserId(uuid4()), "Question that stays put", "Nobody else may delete.", []
        )

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await question_service.delete_question(question.id, UserId(uuid4()))

        assert await question_service.get_question(question.id)
