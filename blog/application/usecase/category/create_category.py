"""Create category use case (admin)."""

from typing import Optional

from pydantic import BaseModel, Field

from blog.application.usecase.view import CategoryView
from blog.domain.service import CategoryService


class CreateCategoryRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    color: Optional[str] = Field(default=None, max_length=20)


class CreateCategoryResponse(BaseModel):
    category: CategoryView


class CreateCategoryUseCase:
    """Use case for adding a category. The slug is derived from the name."""

    def __init__(self, category_service: CategoryService) -> None:
        self.category_service = category_service

    async def execute(
        self, request: CreateCategoryRequest
    ) -> CreateCategoryResponse:
        category = await self.category_service.create_category(
            name=request.name,
            description=request.description,
            color=request.color,
        )
        return CreateCategoryResponse(category=CategoryView.from_category(category))
