"""Get tag use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.view import TagView
from blog.domain.service import TagService
from blog.domain.value import TagId


class GetTagRequest(BaseModel):
    tag_id: str


class GetTagResponse(BaseModel):
    tag: TagView


class GetTagUseCase:
    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: GetTagRequest) -> GetTagResponse:
        tag = await self.tag_service.get_tag(TagId(UUID(request.tag_id)))
        return GetTagResponse(tag=TagView.from_tag(tag))
