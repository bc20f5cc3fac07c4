"""Create post use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from blog.application.usecase.view import PostView
from blog.domain.service import PostService
from blog.domain.value import CategoryId, PostStatus, Slug, UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1)
    excerpt: Optional[str] = Field(default=None, max_length=500)
    category_id: Optional[str] = None
    tags: list[Slug] = Field(default_factory=list, max_length=10)
    status: PostStatus = PostStatus.DRAFT
    featured_image: Optional[str] = None
    allow_comments: bool = True
    author_id: str  # From the verified token


class CreatePostResponse(BaseModel):
    post: PostView


class CreatePostUseCase:
    """Use case for writing a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Raises:
            NotFoundError: If the category does not exist
            ValidationError: If a tag is unknown
        """
        post = await self.post_service.create_post(
            author_id=UserId(UUID(request.author_id)),
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
        return CreatePostResponse(post=PostView.from_post(post))
