"""Uniform JSON envelope for every API response."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from blog.domain.value import Pagination

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """``{success, message?, data?, pagination?}``.

    Errors use the same shape with ``success=False`` and no pagination.
    """

    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None
    pagination: Optional[Pagination] = None


def ok(
    data: Optional[T] = None,
    message: Optional[str] = None,
    pagination: Optional[Pagination] = None,
) -> ApiResponse[T]:
    """Wrap a successful result."""
    return ApiResponse(success=True, message=message, data=data, pagination=pagination)
