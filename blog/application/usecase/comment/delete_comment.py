"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    comment_id: str
    user_id: str  # From the verified token


class DeleteCommentResponse(BaseModel):
    success: bool
    message: str


class DeleteCommentUseCase:
    """Use case for deleting a comment and its replies (author only)."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        await self.comment_service.delete_comment(
            CommentId(UUID(request.comment_id)), UserId(UUID(request.user_id))
        )
        return DeleteCommentResponse(success=True, message="Comment deleted")
