"""
User Use Cases

Profile and credential management of the authenticated user.
"""

from .get_profile_use_case import GetProfileUseCase
from .update_profile_use_case import UpdateProfileUseCase
from .change_password_use_case import ChangePasswordUseCase
from .dtos import UpdateProfileCommand, ChangePasswordCommand, MessageResponse

__all__ = [
    "GetProfileUseCase",
    "UpdateProfileUseCase",
    "ChangePasswordUseCase",
    "UpdateProfileCommand",
    "ChangePasswordCommand",
    "MessageResponse",
]
