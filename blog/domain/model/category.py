"""Category entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel, utcnow
from blog.domain.value import CategoryId, Slug


class Category(DomainModel):
    """Top-level grouping for posts. Each post belongs to at most one."""

    id: CategoryId
    name: str = Field(min_length=1, max_length=100)
    slug: Slug
    description: Optional[str] = Field(default=None, max_length=500)
    color: Optional[str] = Field(default=None, max_length=20)
    created_at: datetime = Field(default_factory=utcnow)
