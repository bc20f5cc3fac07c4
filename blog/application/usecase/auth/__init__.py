"""Authentication use cases."""

from .change_password import (
    ChangePasswordRequest,
    ChangePasswordResponse,
    ChangePasswordUseCase,
)
from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from .login import LoginRequest, LoginResponse, LoginUseCase
from .register import RegisterRequest, RegisterResponse, RegisterUseCase

__all__ = [
    "ChangePasswordRequest",
    "ChangePasswordResponse",
    "ChangePasswordUseCase",
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "RegisterRequest",
    "RegisterResponse",
    "RegisterUseCase",
]
