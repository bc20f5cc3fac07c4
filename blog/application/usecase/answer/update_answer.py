"""Update answer use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from blog.application.usecase.view import AnswerView
from blog.domain.service import AnswerService
from blog.domain.value import AnswerId, UserId


class UpdateAnswerRequest(BaseModel):
    answer_id: str
    user_id: str
    content: str = Field(min_length=10)


class UpdateAnswerResponse(BaseModel):
    answer: AnswerView


class UpdateAnswerUseCase:
    """Use case for editing one's own answer."""

    def __init__(self, answer_service: AnswerService) -> None:
        self.answer_service = answer_service

    async def execute(self, request: UpdateAnswerRequest) -> UpdateAnswerResponse:
        """Execute update answer flow.

        Raises:
            NotFoundError: If answer not found
            NotAuthorizedError: If the caller is not the author
        """
        answer = await self.answer_service.update_answer(
            AnswerId(UUID(request.answer_id)),
            UserId(UUID(request.user_id)),
            request.content,
        )
        return UpdateAnswerResponse(answer=AnswerView.from_answer(answer))
