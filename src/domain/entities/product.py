"""
Product Entity

Inventory item owned by a single user.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Product(SQLModel, table=True):
    """
    Product entity - inventory record.

    Business Rules:
    - Every product belongs to exactly one user (user_id)
    - Only the owner may read, update or delete it
    - image holds the stored file metadata, or an empty dict
    """

    __tablename__ = "products"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id")

    name: str = Field(max_length=255)
    sku: Optional[str] = Field(default=None, max_length=255)
    category: str = Field(max_length=255)
    quantity: str = Field(max_length=64)
    price: str = Field(max_length=64)
    description: str

    image: dict = Field(default_factory=dict, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_product_user_id", "user_id"),)
