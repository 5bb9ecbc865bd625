"""
Authentication Use Cases

All authentication-related business logic.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .authenticate_use_case import AuthenticateUseCase
from .login_status_use_case import LoginStatusUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .dtos import (
    RegisterCommand,
    UserProfile,
    AuthResponse,
    AuthenticatedUser,
    RequestPasswordResetResponse,
    ConfirmPasswordResetResponse,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "AuthenticateUseCase",
    "LoginStatusUseCase",
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "UserProfile",
    "AuthResponse",
    "AuthenticatedUser",
    "RequestPasswordResetResponse",
    "ConfirmPasswordResetResponse",
]
