"""
User Use Case DTOs

Profile update commands and responses.
"""

from typing import Optional

from pydantic import BaseModel


class UpdateProfileCommand(BaseModel):
    """
    Partial profile update.

    A field that is None or blank keeps the stored value.
    """

    name: Optional[str] = None
    photo: Optional[str] = None
    phone: Optional[str] = None
    bio: Optional[str] = None


class ChangePasswordCommand(BaseModel):
    old_password: Optional[str] = None
    password: Optional[str] = None


class MessageResponse(BaseModel):
    message: str
