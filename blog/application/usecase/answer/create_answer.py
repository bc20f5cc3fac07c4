"""Create answer use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from blog.application.usecase.view import AnswerView
from blog.domain.service import AnswerService
from blog.domain.value import QuestionId, UserId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: str
    content: str = Field(min_length=10)
    author_id: str  # User ID from authenticated user


class CreateAnswerResponse(BaseModel):
    answer: AnswerView


class CreateAnswerUseCase:
    """Use case for answering a question."""

    def __init__(self, answer_service: AnswerService) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
        """
        self.answer_service = answer_service

    async def execute(self, request: CreateAnswerRequest) -> CreateAnswerResponse:
        """Execute create answer flow.

        Raises:
            NotFoundError: If the question does not exist
        """
        answer = await self.answer_service.create_answer(
            question_id=QuestionId(UUID(request.question_id)),
            author_id=UserId(UUID(request.author_id)),
            content=request.content,
        )
        return CreateAnswerResponse(answer=AnswerView.from_answer(answer))
