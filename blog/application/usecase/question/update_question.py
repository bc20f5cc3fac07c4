"""Update question use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from blog.application.usecase.view import QuestionView
from blog.domain.service import QuestionService
from blog.domain.value import QuestionId, UserId


class UpdateQuestionRequest(BaseModel):
    """Update question request. Omitted fields are left unchanged."""

    question_id: str
    user_id: str
    title: Optional[str] = Field(default=None, min_length=10, max_length=300)
    content: Optional[str] = Field(default=None, min_length=10)
    tags: Optional[list[str]] = Field(default=None, max_length=5)


class UpdateQuestionResponse(BaseModel):
    question: QuestionView


class UpdateQuestionUseCase:
    """Use case for editing one's own question."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: UpdateQuestionRequest) -> UpdateQuestionResponse:
        """Execute update question flow.

        Raises:
            NotFoundError: If question not found
            NotAuthorizedError: If the caller is not the author
        """
        question = await self.question_service.update_question(
            QuestionId(UUID(request.question_id)),
            UserId(UUID(request.user_id)),
            title=request.title,
            content=request.content,
            tags=request.tags,
        )
        return UpdateQuestionResponse(question=QuestionView.from_question(question))
