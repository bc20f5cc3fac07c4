"""List my posts use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from blog.application.usecase.view import PostView
from blog.domain.service import PostService
from blog.domain.value import PageRequest, Pagination, PostStatus, UserId


class ListMyPostsRequest(BaseModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    status: Optional[PostStatus] = None
    author_id: str  # From the verified token


class ListMyPostsResponse(BaseModel):
    posts: list[PostView]
    pagination: Pagination


class ListMyPostsUseCase:
    """Use case for listing the caller's own posts in any status."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: ListMyPostsRequest) -> ListMyPostsResponse:
        page = PageRequest(page=request.page, limit=request.limit)
        posts, total = await self.post_service.list_by_author(
            UserId(UUID(request.author_id)), page, status=request.status
        )
        return ListMyPostsResponse(
            posts=[PostView.from_post(post) for post in posts],
            pagination=Pagination.from_total(page, total),
        )
