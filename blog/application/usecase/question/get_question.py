"""Get question use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.view import QuestionView
from blog.domain.service import QuestionService, VoteService
from blog.domain.value import QuestionId, TargetType, UserId


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str
    user_id: Optional[str] = None  # Current user ID (if authenticated)


class GetQuestionResponse(BaseModel):
    """Get question response."""

    question: QuestionView


class GetQuestionUseCase:
    """Use case for viewing a question.

    Counts the view and, for an authenticated caller, includes their vote.
    """

    def __init__(
        self, question_service: QuestionService, vote_service: VoteService
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            vote_service: Vote domain service (caller's vote status)
        """
        self.question_service = question_service
        self.vote_service = vote_service

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Execute get question flow.

        Raises:
            NotFoundError: If question not found
        """
        question_id = QuestionId(UUID(request.question_id))
        question = await self.question_service.get_question(
            question_id, count_view=True
        )

        user_vote = None
        if request.user_id:
            user_vote = await self.vote_service.get_vote_status(
                TargetType.QUESTION, question_id, UserId(UUID(request.user_id))
            )

        return GetQuestionResponse(
            question=QuestionView.from_question(question, user_vote=user_vote)
        )
