"""Tag entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel, utcnow
from blog.domain.value import Slug, TagId


class Tag(DomainModel):
    """Free-form label attached to posts (many-to-many)."""

    id: TagId
    name: str = Field(min_length=1, max_length=50)
    slug: Slug
    description: Optional[str] = Field(default=None, max_length=200)
    created_at: datetime = Field(default_factory=utcnow)
