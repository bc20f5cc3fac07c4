"""List comments use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.view import CommentView
from blog.domain.service import CommentService
from blog.domain.value import PostId


class ListCommentsRequest(BaseModel):
    post_id: str


class ListCommentsResponse(BaseModel):
    comments: list[CommentView]


class ListCommentsUseCase:
    """Use case for reading a post's comment thread, oldest first."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        comments = await self.comment_service.list_comments(
            PostId(UUID(request.post_id))
        )
        return ListCommentsResponse(
            comments=[CommentView.from_comment(c) for c in comments]
        )
