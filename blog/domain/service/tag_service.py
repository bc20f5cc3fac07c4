"""Tag domain service."""

from typing import List, Optional

import logfire

from blog.domain.error import NotFoundError
from blog.domain.model.tag import Tag
from blog.domain.repository import TagRepository
from blog.domain.value import TagId

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def list_tags(self) -> List[Tag]:
        with logfire.span("tag_service.list_tags"):
            tags = await self.tag_repository.find_all()
            logfire.info("Tags listed", count=len(tags))
            return tags

    async def get_tag(self, tag_id: TagId) -> Tag:
        """Get a tag by ID.

        Raises:
            NotFoundError: If tag not found
        """
        tag = await self.tag_repository.find_by_id(tag_id)
        if not tag:
            logfire.warn("Tag not found", tag_id=str(tag_id))
            raise NotFoundError("Tag", str(tag_id))
        return tag

    async def update_tag(
        self,
        tag_id: TagId,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Tag:
        """Rename or re-describe a tag. The slug is kept so links stay valid.

        Raises:
            NotFoundError: If tag not found
        """
        with logfire.span("tag_service.update_tag", tag_id=str(tag_id)):
            tag = await self.get_tag(tag_id)
            changes: dict = {}
            if name is not None:
                changes["name"] = name.strip()
            if description is not None:
                changes["description"] = description
            updated = Tag.model_validate({**tag.model_dump(), **changes})
            saved = await self.tag_repository.save(updated)
            logfire.info("Tag updated", tag_id=str(tag_id))
            return saved
