"""Category use cases."""

from .create_category import (
    CreateCategoryRequest,
    CreateCategoryResponse,
    CreateCategoryUseCase,
)
from .list_categories import ListCategoriesResponse, ListCategoriesUseCase

__all__ = [
    "CreateCategoryRequest",
    "CreateCategoryResponse",
    "CreateCategoryUseCase",
    "ListCategoriesResponse",
    "ListCategoriesUseCase",
]
