"""Delete question use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import QuestionService
from blog.domain.value import QuestionId, UserId


class DeleteQuestionRequest(BaseModel):
    question_id: str
    user_id: str


class DeleteQuestionResponse(BaseModel):
    success: bool
    message: str


class DeleteQuestionUseCase:
    """Use case for deleting one's own question with its answers."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: DeleteQuestionRequest) -> DeleteQuestionResponse:
        """Execute delete question flow.

        Raises:
            NotFoundError: If question not found
            NotAuthorizedError: If the caller is not the author
        """
        await self.question_service.delete_question(
            QuestionId(UUID(request.question_id)), UserId(UUID(request.user_id))
        )
        return DeleteQuestionResponse(success=True, message="Question deleted")
