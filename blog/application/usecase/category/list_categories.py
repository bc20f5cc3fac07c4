"""List categories use case."""

from pydantic import BaseModel

from blog.application.usecase.view import CategoryView
from blog.domain.service import CategoryService


class ListCategoriesResponse(BaseModel):
    categories: list[CategoryView]


class ListCategoriesUseCase:
    """Use case for listing all categories by name."""

    def __init__(self, category_service: CategoryService) -> None:
        self.category_service = category_service

    async def execute(self) -> ListCategoriesResponse:
        categories = await self.category_service.list_categories()
        return ListCategoriesResponse(
            categories=[CategoryView.from_category(c) for c in categories]
        )
