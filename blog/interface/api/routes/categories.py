"""Category routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status

from blog.application.usecase.category import (
    CreateCategoryRequest,
    CreateCategoryUseCase,
    ListCategoriesUseCase,
)
from blog.application.usecase.view import CategoryView
from blog.domain.service import JWTService
from blog.interface.api.auth import BearerCredentials, require_admin
from blog.interface.api.response import ApiResponse, ok

router = APIRouter(prefix="/categories", tags=["categories"], route_class=DishkaRoute)


@router.get("", response_model=ApiResponse[list[CategoryView]])
async def list_categories(
    list_categories_use_case: FromDishka[ListCategoriesUseCase],
) -> ApiResponse[list[CategoryView]]:
    result = await list_categories_use_case.execute()
    return ok(result.categories)


@router.post(
    "", response_model=ApiResponse[CategoryView], status_code=status.HTTP_201_CREATED
)
async def create_category(
    http_request: Request,
    request: CreateCategoryRequest,
    credentials: BearerCredentials,
    create_category_use_case: FromDishka[CreateCategoryUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[CategoryView]:
    """Create a category (admin only)."""
    require_admin(http_request, credentials, jwt_service)
    result = await create_category_use_case.execute(request)
    return ok(result.category, message="Category created")
