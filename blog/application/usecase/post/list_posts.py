"""List published posts use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from blog.application.usecase.view import PostView
from blog.domain.service import PostService
from blog.domain.value import PageRequest, Pagination, Slug


class ListPostsRequest(BaseModel):
    """List posts request."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    category: Optional[Slug] = None
    tag: Optional[Slug] = None
    search: Optional[str] = None


class ListPostsResponse(BaseModel):
    posts: list[PostView]
    pagination: Pagination


class ListPostsUseCase:
    """Use case for the public post listing, newest first."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        with logfire.span(
            "list_posts.execute", page=request.page, limit=request.limit
        ):
            page = PageRequest(page=request.page, limit=request.limit)
            posts, total = await self.post_service.list_published(
                page,
                category=request.category,
                tag=request.tag,
                search=request.search,
            )
            return ListPostsResponse(
                posts=[PostView.from_post(post) for post in posts],
                pagination=Pagination.from_total(page, total),
            )
