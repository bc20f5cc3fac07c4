"""User use cases."""

from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
)
from .list_users import ListUsersRequest, ListUsersResponse, ListUsersUseCase
from .set_user_active import (
    SetUserActiveRequest,
    SetUserActiveResponse,
    SetUserActiveUseCase,
)
from .update_user_profile import (
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    UpdateUserProfileUseCase,
)

__all__ = [
    "GetUserProfileRequest",
    "GetUserProfileResponse",
    "GetUserProfileUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "SetUserActiveRequest",
    "SetUserActiveResponse",
    "SetUserActiveUseCase",
    "UpdateUserProfileRequest",
    "UpdateUserProfileResponse",
    "UpdateUserProfileUseCase",
]
