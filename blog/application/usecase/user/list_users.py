"""List users use case (admin)."""

from typing import Literal, Optional, Union

import logfire
from pydantic import BaseModel, Field

from blog.application.usecase.view import AdminUserView
from blog.domain.service import UserService
from blog.domain.value import PageRequest, Pagination, UserRole


class ListUsersRequest(BaseModel):
    """List users request."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=7, ge=1, le=100)
    search: Optional[str] = None
    active: bool = True
    role: Union[UserRole, Literal["all"]] = "all"


class ListUsersResponse(BaseModel):
    users: list[AdminUserView]
    pagination: Pagination


class ListUsersUseCase:
    """Use case for the admin user listing."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize list users use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        with logfire.span(
            "list_users.execute",
            page=request.page,
            limit=request.limit,
            active=request.active,
        ):
            page = PageRequest(page=request.page, limit=request.limit)
            role = None if request.role == "all" else UserRole(request.role)
            items, total = await self.user_service.list_users(
                page, active=request.active, search=request.search, role=role
            )
            return ListUsersResponse(
                users=[AdminUserView.from_item(item) for item in items],
                pagination=Pagination.from_total(page, total),
            )
