"""Unit tests for question use cases."""

from uuid import uuid4

import pytest

from blog.application.usecase.answer import (
    CreateAnswerRequest,
    CreateAnswerUseCase,
    ListAnswersRequest,
    ListAnswersUseCase,
)
from blog.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsUseCase,
)
from blog.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from blog.domain.error import NotFoundError
from blog.domain.value import TargetType, VoteType
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _create(env, author_id: str, title: str) -> str:
    create_question = await env.get(CreateQuestionUseCase)
    result = await create_question.execute(
        CreateQuestionRequest(
            title=title, content="Body of the question.", author_id=author_id
        )
    )
    return result.question.question_id


class TestGetQuestionUseCase:
    @pytest.mark.asyncio
    async def test_counts_view_and_shows_callers_vote(self, unit_env):
        # Arrange
        get_question = await unit_env.get(GetQuestionUseCase)
        cast_vote = await unit_env.get(CastVoteUseCase)
        question_id = await _create(unit_env, str(uuid4()), "A question to look at")
        viewer = str(uuid4())
        await cast_vote.execute(
            CastVoteRequest(
                target_type=TargetType.QUESTION,
                target_id=question_id,
                vote_type=VoteType.DOWNVOTE,
                user_id=viewer,
            )
        )

        # Act
        anonymous = await get_question.execute(
            GetQuestionRequest(question_id=question_id)
        )
        voter = await get_question.execute(
            GetQuestionRequest(question_id=question_id, user_id=viewer)
        )

        # Assert
        assert anonymous.question.user_vote is None
        assert anonymous.question.view_count == 1
        assert voter.question.user_vote == VoteType.DOWNVOTE
        assert voter.question.view_count == 2
        assert voter.question.net_votes == -1


class TestListQuestionsUseCase:
    @pytest.mark.asyncio
    async def test_pagination_metadata(self, unit_env):
        # Arrange
        list_questions = await unit_env.get(ListQuestionsUseCase)
        author = str(uuid4())
        for i in range(5):
            await _create(unit_env, author, f"Question number {i}")

        # Act
        result = await list_questions.execute(ListQuestionsRequest(page=3, limit=2))

        # Assert
        assert len(result.questions) == 1
        assert result.pagination.current_page == 3
        assert result.pagination.total_pages == 3
        assert result.pagination.total_items == 5
        assert result.pagination.items_per_page == 2

    @pytest.mark.asyncio
    async def test_author_filter(self, unit_env):
        # Arrange
        list_questions = await unit_env.get(ListQuestionsUseCase)
        author = str(uuid4())
        mine = await _create(unit_env, author, "My own question here")
        await _create(unit_env, str(uuid4()), "Someone else's question")

        # Act
        result = await list_questions.execute(ListQuestionsRequest(author_id=author))

        # Assert
        assert [q.question_id for q in result.questions] == [mine]


class TestAnswerUseCases:
    @pytest.mark.asyncio
    async def test_answers_listed_with_callers_vote(self, unit_env):
        # Arrange
        create_answer = await unit_env.get(CreateAnswerUseCase)
        list_answers = await unit_env.get(ListAnswersUseCase)
        cast_vote = await unit_env.get(CastVoteUseCase)
        question_id = await _create(unit_env, str(uuid4()), "Question with answers")
        created = await create_answer.execute(
            CreateAnswerRequest(
                question_id=question_id,
                content="An answer worth voting for.",
                author_id=str(uuid4()),
            )
        )
        voter = str(uuid4())
        await cast_vote.execute(
            CastVoteRequest(
                target_type=TargetType.ANSWER,
                target_id=created.answer.answer_id,
                vote_type=VoteType.UPVOTE,
                user_id=voter,
            )
        )

        # Act
        result = await list_answers.execute(
            ListAnswersRequest(question_id=question_id, user_id=voter)
        )

        # Assert
        assert len(result.answers) == 1
        assert result.answers[0].user_vote == VoteType.UPVOTE
        assert result.answers[0].upvote_count == 1


class TestDeleteQuestionUseCase:
    @pytest.mark.asyncio
    async def test_delete_then_get_is_not_found(self, unit_env):
        # Arrange
        delete_question = await unit_env.get(DeleteQuestionUseCase)
        get_question = await unit_env.get(GetQuestionUseCase)
        author = str(uuid4())
        question_id = await _create(unit_env, author, "Short-lived question")

        # Act
        result = await delete_question.execute(
            DeleteQuestionRequest(question_id=question_id, user_id=author)
        )

        # Assert
        assert result.success is True
        with pytest.raises(NotFoundError):
            await get_question.execute(GetQuestionRequest(question_id=question_id))
