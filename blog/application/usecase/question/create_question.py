"""Create question use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from blog.application.usecase.view import QuestionView
from blog.domain.service import QuestionService
from blog.domain.value import UserId


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    title: str = Field(min_length=10, max_length=300)
    content: str = Field(min_length=10)
    tags: list[str] = Field(default_factory=list, max_length=5)
    author_id: str  # User ID from authenticated user


class CreateQuestionResponse(BaseModel):
    """Create question response."""

    question: QuestionView


class CreateQuestionUseCase:
    """Use case for asking a question."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: CreateQuestionRequest) -> CreateQuestionResponse:
        question = await self.question_service.create_question(
            author_id=UserId(UUID(request.author_id)),
            title=request.title,
            content=request.content,
            tags=request.tags,
        )
        return CreateQuestionResponse(question=QuestionView.from_question(question))
