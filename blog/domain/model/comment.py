"""Comment entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel, utcnow
from blog.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment on a post, optionally replying to another comment.

    Threading is tracked through ``parent_id`` and ``depth``
    (0 for top-level, parent depth + 1 for replies).
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=5000)
    parent_id: Optional[CommentId] = None
    depth: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
