from typing import List
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Result, Return
from .dtos import ProductResponse


class ListProductsUseCase:
    """Lists the products owned by the authenticated user, newest first."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[List[ProductResponse]]:
        async with self.uow:
            products = await self.uow.products.list_by_user_id(user_id)
            return Return.ok([ProductResponse.from_product(p) for p in products])
