import logging
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Result, Return
from .dtos import DeleteProductResponse
from .ownership import load_owned_product

logger = logging.getLogger(__name__)


class DeleteProductUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, product_id: UUID) -> Result[DeleteProductResponse]:
        async with self.uow:
            owned = await load_owned_product(self.uow, product_id, user_id)
            if owned.is_err():
                return Return.err(owned.error)

            await self.uow.products.delete(owned.value)
            await self.uow.commit()

        logger.info(f"Product {product_id} deleted by user {user_id}")
        return Return.ok(DeleteProductResponse(message="Product deleted"))
