"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from blog.domain.model.tag import Tag
from blog.domain.value import Slug, TagId


class TagRepository(ABC):
    """Repository for Tag entity."""

    @abstractmethod
    async def find_all(self) -> List[Tag]:
        """List all tags ordered by name."""
        pass

    @abstractmethod
    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find a tag by ID."""
        pass

    @abstractmethod
    async def find_by_slugs(self, slugs: Sequence[Slug]) -> List[Tag]:
        """Find the tags whose slug is in ``slugs`` (unknown slugs are skipped)."""
        pass

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Save a tag (create or update)."""
        pass
