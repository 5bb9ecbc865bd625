from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Product


class IProductRepository(ABC):
    """Product repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, product_id: UUID) -> Optional[Product]:
        """Get product by ID"""
        pass

    @abstractmethod
    async def list_by_user_id(self, user_id: UUID) -> List[Product]:
        """Get all products of a user, newest first"""
        pass

    @abstractmethod
    async def create(self, product: Product) -> Product:
        """Create a new product"""
        pass

    @abstractmethod
    async def update(self, product: Product) -> Product:
        """Update existing product"""
        pass

    @abstractmethod
    async def delete(self, product: Product) -> None:
        """Delete a product"""
        pass
