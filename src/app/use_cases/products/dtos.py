"""
Product Use Case DTOs
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.domain.entities import Product


class ImageUpload(BaseModel):
    """Raw image file received with a product request"""

    filename: str
    content_type: str
    data: bytes


class CreateProductCommand(BaseModel):
    name: Optional[str] = None
    sku: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[str] = None
    price: Optional[str] = None
    description: Optional[str] = None


class UpdateProductCommand(BaseModel):
    """Partial product update; None or blank keeps the stored value"""

    name: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[str] = None
    price: Optional[str] = None
    description: Optional[str] = None


class ProductResponse(BaseModel):
    id: str
    user_id: str
    name: str
    sku: Optional[str]
    category: str
    quantity: str
    price: str
    description: str
    image: dict
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        return cls(
            id=str(product.id),
            user_id=str(product.user_id),
            name=product.name,
            sku=product.sku,
            category=product.category,
            quantity=product.quantity,
            price=product.price,
            description=product.description,
            image=dict(product.image or {}),
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class DeleteProductResponse(BaseModel):
    message: str
