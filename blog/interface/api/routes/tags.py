"""Tag routes."""

from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from blog.application.usecase.tag import (
    GetTagRequest,
    GetTagUseCase,
    ListTagsUseCase,
    UpdateTagRequest,
    UpdateTagUseCase,
)
from blog.application.usecase.view import TagView
from blog.domain.service import JWTService
from blog.interface.api.auth import BearerCredentials, require_admin
from blog.interface.api.response import ApiResponse, ok

router = APIRouter(prefix="/tags", tags=["tags"], route_class=DishkaRoute)


class UpdateTagAPIRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    description: Optional[str] = Field(default=None, max_length=200)


@router.get("", response_model=ApiResponse[list[TagView]])
async def list_tags(
    list_tags_use_case: FromDishka[ListTagsUseCase],
) -> ApiResponse[list[TagView]]:
    """List all tags.

    Returns:
        Tags ordered by name
    """
    result = await list_tags_use_case.execute()
    return ok(result.tags)


@router.get("/{tag_id}", response_model=ApiResponse[TagView])
async def get_tag(
    tag_id: UUID,
    get_tag_use_case: FromDishka[GetTagUseCase],
) -> ApiResponse[TagView]:
    result = await get_tag_use_case.execute(GetTagRequest(tag_id=str(tag_id)))
    return ok(result.tag)


@router.put("/{tag_id}", response_model=ApiResponse[TagView])
async def update_tag(
    tag_id: UUID,
    http_request: Request,
    request: UpdateTagAPIRequest,
    credentials: BearerCredentials,
    update_tag_use_case: FromDishka[UpdateTagUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[TagView]:
    """Rename or re-describe a tag (admin only). The slug never changes."""
    require_admin(http_request, credentials, jwt_service)
    result = await update_tag_use_case.execute(
        UpdateTagRequest(
            tag_id=str(tag_id), name=request.name, description=request.description
        )
    )
    return ok(result.tag, message="Tag updated")
