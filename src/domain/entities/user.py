"""
User Entity

Account that owns products and authenticates with email + password.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow

DEFAULT_PHOTO = "https://i.ibb.co/4pDNDk1/avatar.png"
DEFAULT_PHONE = "000"
DEFAULT_BIO = "New user"
BIO_MAX_LENGTH = 250


class User(SQLModel, table=True):
    """
    User entity - identity record of the credential store.

    Business Rules:
    - Email is unique across all users and stored lower-cased
    - Password stored as bcrypt hash (cost factor 10), never plaintext
    - Bio is limited to 250 characters
    - Users are never hard-deleted
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Profile
    photo: str = Field(default=DEFAULT_PHOTO, max_length=2048)
    phone: str = Field(default=DEFAULT_PHONE, max_length=64)
    bio: str = Field(default=DEFAULT_BIO, max_length=BIO_MAX_LENGTH)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
