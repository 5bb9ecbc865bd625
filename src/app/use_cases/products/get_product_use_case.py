from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Result, Return
from .dtos import ProductResponse
from .ownership import load_owned_product


class GetProductUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, product_id: UUID) -> Result[ProductResponse]:
        async with self.uow:
            owned = await load_owned_product(self.uow, product_id, user_id)
            if owned.is_err():
                return Return.err(owned.error)

            return Return.ok(ProductResponse.from_product(owned.value))
