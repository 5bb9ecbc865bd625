"""
PasswordResetToken Entity

Single-use password reset tokens.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class PasswordResetToken(SQLModel, table=True):
    """
    PasswordResetToken entity - hashed, time-boxed reset tokens.

    Business Rules:
    - Expires 30 minutes after creation
    - Only the SHA-256 hash of the cleartext token is stored
    - At most one record per user (unique user_id)
    - Deleted once redeemed
    """

    __tablename__ = "password_reset_tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", unique=True)
    token_hash: str = Field(max_length=64)  # SHA-256 hex output

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_password_reset_token_hash", "token_hash"),
        Index("idx_password_reset_expires_at", "expires_at"),
    )
