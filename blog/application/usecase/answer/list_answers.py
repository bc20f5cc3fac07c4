"""List answers use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.view import AnswerView
from blog.domain.service import AnswerService, VoteService
from blog.domain.value import QuestionId, TargetType, UserId


class ListAnswersRequest(BaseModel):
    question_id: str
    user_id: Optional[str] = None  # Current user ID (if authenticated)


class ListAnswersResponse(BaseModel):
    answers: list[AnswerView]


class ListAnswersUseCase:
    """Use case for listing a question's answers, best first."""

    def __init__(self, answer_service: AnswerService, vote_service: VoteService) -> None:
        """Initialize list answers use case.

        Args:
            answer_service: Answer domain service
            vote_service: Vote domain service (caller's votes)
        """
        self.answer_service = answer_service
        self.vote_service = vote_service

    async def execute(self, request: ListAnswersRequest) -> ListAnswersResponse:
        """Execute list answers flow.

        Raises:
            NotFoundError: If the question does not exist
        """
        answers = await self.answer_service.list_answers(
            QuestionId(UUID(request.question_id))
        )

        user_votes = {}
        if request.user_id and answers:
            user_votes = await self.vote_service.get_vote_statuses(
                TargetType.ANSWER,
                [a.id for a in answers],
                UserId(UUID(request.user_id)),
            )

        return ListAnswersResponse(
            answers=[
                AnswerView.from_answer(a, user_vote=user_votes.get(a.id))
                for a in answers
            ]
        )
