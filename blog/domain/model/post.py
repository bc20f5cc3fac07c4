"""Post aggregate root.

Posts are long-form articles. Only published and active posts are
visible in public listings.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel, utcnow
from blog.domain.value import CategoryId, PostId, PostStatus, Slug, UserId


class Post(DomainModel):
    """Post aggregate root.

    ``tag_slugs`` lists the slugs of the tags attached to the post;
    the junction rows are managed by the repository.
    ``active`` is the soft-delete flag.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    slug: Slug
    excerpt: Optional[str] = Field(default=None, max_length=500)
    content: str = Field(min_length=1)
    featured_image: Optional[str] = None
    status: PostStatus = PostStatus.DRAFT
    published_at: Optional[datetime] = None
    reading_time: int = Field(default=1, ge=1)
    view_count: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
    allow_comments: bool = True
    active: bool = True
    author_id: UserId
    category_id: Optional[CategoryId] = None
    tag_slugs: list[Slug] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def is_public(self) -> bool:
        return self.active and self.status == PostStatus.PUBLISHED
