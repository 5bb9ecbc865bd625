from typing import List, Optional
from uuid import UUID

from sqlmodel import select

from src.adapter.repositories.base import SqlModelRepository
from src.app.repositories.product_repository import IProductRepository
from src.domain.entities import Product


class ProductRepository(SqlModelRepository[Product], IProductRepository):
    """Product repository implementation using SQLModel"""

    async def get_by_id(self, product_id: UUID) -> Optional[Product]:
        return await self.session.get(Product, product_id)

    async def list_by_user_id(self, user_id: UUID) -> List[Product]:
        """Get all products of a user, newest first"""
        stmt = (
            select(Product)
            .where(Product.user_id == user_id)
            .order_by(Product.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, product: Product) -> Product:
        return await self._save(product)

    async def update(self, product: Product) -> Product:
        return await self._save(product)

    async def delete(self, product: Product) -> None:
        await self._remove(product)
