"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import User


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """Register command - validated registration intent"""

    name: str
    email: str
    password: str


# ============================================================================
# Response DTOs
# ============================================================================


class UserProfile(BaseModel):
    """Public profile of a user"""

    id: str
    name: str
    email: str
    photo: str
    phone: str
    bio: str

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            photo=user.photo,
            phone=user.phone,
            bio=user.bio,
        )


class AuthResponse(UserProfile):
    """Response for register and login use cases"""

    token: str


class AuthenticatedUser(BaseModel):
    """Identity resolved from a session token"""

    id: UUID
    name: str
    email: str


class RequestPasswordResetResponse(BaseModel):
    """Response for request password reset use case"""

    success: bool
    message: str


class ConfirmPasswordResetResponse(BaseModel):
    """Response for confirm password reset use case"""

    message: str
