"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import PostService
from blog.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    post_id: str
    user_id: str  # From the verified token


class DeletePostResponse(BaseModel):
    success: bool
    message: str


class DeletePostUseCase:
    """Use case for deleting a post (author only).

    The post is soft-deleted and disappears from every listing.
    """

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        await self.post_service.delete_post(
            PostId(UUID(request.post_id)), UserId(UUID(request.user_id))
        )
        return DeletePostResponse(success=True, message="Post deleted")
