"""Create comment use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from blog.application.usecase.view import CommentView
from blog.domain.service import CommentService
from blog.domain.value import CommentId, PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str
    content: str = Field(min_length=1, max_length=5000)
    parent_id: Optional[str] = None  # Comment being replied to
    author_id: str  # From the verified token


class CreateCommentResponse(BaseModel):
    comment: CommentView


class CreateCommentUseCase:
    """Use case for commenting on a post or replying to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Raises:
            NotFoundError: If the post or parent comment does not exist
            BusinessRuleViolationError: If comments are closed on the post
        """
        comment = await self.comment_service.create_comment(
            post_id=PostId(UUID(request.post_id)),
            author_id=UserId(UUID(request.author_id)),
            content=request.content,
            parent_id=CommentId(UUID(request.parent_id))
            if request.parent_id
            else None,
        )
        return CreateCommentResponse(comment=CommentView.from_comment(comment))
