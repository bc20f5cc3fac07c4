"""Delete answer use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import AnswerService
from blog.domain.value import AnswerId, UserId


class DeleteAnswerRequest(BaseModel):
    answer_id: str
    user_id: str


class DeleteAnswerResponse(BaseModel):
    success: bool
    message: str


class DeleteAnswerUseCase:
    """Use case for deleting one's own answer."""

    def __init__(self, answer_service: AnswerService) -> None:
        self.answer_service = answer_service

    async def execute(self, request: DeleteAnswerRequest) -> DeleteAnswerResponse:
        """Execute delete answer flow.

        Raises:
            NotFoundError: If answer not found
            NotAuthorizedError: If the caller is not the author
        """
        await self.answer_service.delete_answer(
            AnswerId(UUID(request.answer_id)), UserId(UUID(request.user_id))
        )
        return DeleteAnswerResponse(success=True, message="Answer deleted")
