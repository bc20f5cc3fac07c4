"""Admin routes: user management and dashboard statistics."""

from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request

from blog.application.usecase.dashboard import (
    GetDashboardStatsResponse,
    GetDashboardStatsUseCase,
)
from blog.application.usecase.user import (
    ListUsersRequest,
    ListUsersUseCase,
    SetUserActiveRequest,
    SetUserActiveUseCase,
)
from blog.application.usecase.view import AdminUserView, UserView
from blog.config import PaginationSettings
from blog.domain.service import JWTService
from blog.interface.api.auth import BearerCredentials, require_admin
from blog.interface.api.response import ApiResponse, ok

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


@router.get("/users", response_model=ApiResponse[list[AdminUserView]])
async def list_users(
    http_request: Request,
    credentials: BearerCredentials,
    list_users_use_case: FromDishka[ListUsersUseCase],
    jwt_service: FromDishka[JWTService],
    pagination_settings: FromDishka[PaginationSettings],
    page: int = Query(default=1, ge=1),
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    search: Optional[str] = None,
    active: bool = True,
    role: str = Query(default="all", pattern="^(all|user|admin)$"),
) -> ApiResponse[list[AdminUserView]]:
    """List users with their post counts.

    Args:
        page: 1-based page number
        limit: Page size (defaults to the admin page size)
        search: Name or email substring
        active: Active accounts (true) or deactivated ones (false)
        role: ``all``, ``user`` or ``admin``
    """
    require_admin(http_request, credentials, jwt_service)
    result = await list_users_use_case.execute(
        ListUsersRequest(
            page=page,
            limit=limit or pagination_settings.admin_users_limit,
            search=search,
            active=active,
            role=role,
        )
    )
    return ok(result.users, pagination=result.pagination)


@router.post("/users/{user_id}/deactivate", response_model=ApiResponse[UserView])
async def deactivate_user(
    user_id: UUID,
    http_request: Request,
    credentials: BearerCredentials,
    set_user_active_use_case: FromDishka[SetUserActiveUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[UserView]:
    """Soft-delete an account. The user can no longer log in."""
    identity = require_admin(http_request, credentials, jwt_service)
    result = await set_user_active_use_case.execute(
        SetUserActiveRequest(
            user_id=str(user_id), active=False, admin_id=identity.user_id
        )
    )
    return ok(result.user, message="User deactivated")


@router.post("/users/{user_id}/restore", response_model=ApiResponse[UserView])
async def restore_user(
    user_id: UUID,
    http_request: Request,
    credentials: BearerCredentials,
    set_user_active_use_case: FromDishka[SetUserActiveUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[UserView]:
    """Reactivate a deactivated account."""
    identity = require_admin(http_request, credentials, jwt_service)
    result = await set_user_active_use_case.execute(
        SetUserActiveRequest(user_id=str(user_id), active=True, admin_id=identity.user_id)
    )
    return ok(result.user, message="User restored")


@router.get("/dashboard/stats", response_model=ApiResponse[GetDashboardStatsResponse])
async def dashboard_stats(
    http_request: Request,
    credentials: BearerCredentials,
    get_dashboard_stats_use_case: FromDishka[GetDashboardStatsUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[GetDashboardStatsResponse]:
    """Aggregate counts for the admin dashboard."""
    require_admin(http_request, credentials, jwt_service)
    result = await get_dashboard_stats_use_case.execute()
    return ok(result)
