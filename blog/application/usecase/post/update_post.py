"""Update post use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from blog.application.usecase.view import PostView
from blog.domain.service import PostService
from blog.domain.value import CategoryId, PostId, PostStatus, Slug, UserId


class UpdatePostRequest(BaseModel):
    """Update post request. Omitted fields are left unchanged."""

    post_id: str
    user_id: str  # From the verified token
    title: Optional[str] = Field(default=None, min_length=1, max_length=300)
    content: Optional[str] = Field(default=None, min_length=1)
    excerpt: Optional[str] = Field(default=None, max_length=500)
    category_id: Optional[str] = None
    tags: Optional[list[Slug]] = Field(default=None, max_length=10)
    status: Optional[PostStatus] = None
    featured_image: Optional[str] = None
    allow_comments: Optional[bool] = None


class UpdatePostResponse(BaseModel):
    post: PostView


class UpdatePostUseCase:
    """Use case for editing a post (author only)."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Raises:
            NotFoundError: If the post or category does not exist
            NotAuthorizedError: If the user is not the author
        """
        post = await self.post_service.update_post(
            PostId(UUID(request.post_id)),
            actor_id=UserId(UUID(request.user_id)),
            title=request.title,
            content=request.content,
            excerpt=request.excerpt,
            category_id=CategoryId(UUID(request.category_id))
            if request.category_id
            else None,
            tag_slugs=request.tags,
            status=request.status,
            featured_image=request.featured_image,
            allow_comments=request.allow_comments,
        )
        return UpdatePostResponse(post=PostView.from_post(post))
