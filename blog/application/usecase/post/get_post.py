"""Get post use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.view import PostView
from blog.domain.service import PostService
from blog.domain.value import Slug, UserId


class GetPostRequest(BaseModel):
    slug: Slug
    viewer_id: Optional[str] = None  # Current user ID (if authenticated)


class GetPostResponse(BaseModel):
    post: PostView


class GetPostUseCase:
    """Use case for reading a post by its slug.

    Counts a view for public posts. Authors can also read their own
    drafts through this path.
    """

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        post = await self.post_service.get_post_by_slug(
            request.slug,
            viewer_id=UserId(UUID(request.viewer_id)) if request.viewer_id else None,
        )
        return GetPostResponse(post=PostView.from_post(post))
