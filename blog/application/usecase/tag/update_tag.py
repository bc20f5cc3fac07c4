"""Update tag use case (admin)."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from blog.application.usecase.view import TagView
from blog.domain.service import TagService
from blog.domain.value import TagId


class UpdateTagRequest(BaseModel):
    """Update tag request. Omitted fields are left unchanged."""

    tag_id: str
    name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    description: Optional[str] = Field(default=None, max_length=200)


class UpdateTagResponse(BaseModel):
    tag: TagView


class UpdateTagUseCase:
    """Use case for renaming or re-describing a tag."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: UpdateTagRequest) -> UpdateTagResponse:
        """Execute update tag flow.

        Raises:
            NotFoundError: If tag not found
        """
        tag = await self.tag_service.update_tag(
            TagId(UUID(request.tag_id)),
            name=request.name,
            description=request.description,
        )
        return UpdateTagResponse(tag=TagView.from_tag(tag))
