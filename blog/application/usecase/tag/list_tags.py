"""List tags use case."""

from pydantic import BaseModel

from blog.application.usecase.view import TagView
from blog.domain.service import TagService


class ListTagsResponse(BaseModel):
    tags: list[TagView]


class ListTagsUseCase:
    """Use case for listing all tags."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self) -> ListTagsResponse:
        tags = await self.tag_service.list_tags()
        return ListTagsResponse(tags=[TagView.from_tag(tag) for tag in tags])
