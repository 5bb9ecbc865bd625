"""
Update Product Use Case
"""

from datetime import datetime
from typing import Callable, Optional
from uuid import UUID

from src.app.services.image_storage import IImageStorage
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users.update_profile_use_case import merge_field
from src.domain.base import utcnow
from src.libs.result import Result, Return
from .dtos import ImageUpload, ProductResponse, UpdateProductCommand
from .images import store_image
from .ownership import load_owned_product


class UpdateProductUseCase:
    """
    Business Rules:
    - Not found is reported before forbidden
    - Fields that are None or blank keep their stored value
    - A new image replaces the stored one; without one the image is kept
    - Always returns the updated product
    """

    def __init__(
        self,
        uow: UnitOfWork,
        image_storage: IImageStorage,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.uow = uow
        self.image_storage = image_storage
        self.clock = clock

    async def execute(
        self,
        user_id: UUID,
        product_id: UUID,
        command: UpdateProductCommand,
        image: Optional[ImageUpload] = None,
    ) -> Result[ProductResponse]:
        async with self.uow:
            owned = await load_owned_product(self.uow, product_id, user_id)
            if owned.is_err():
                return Return.err(owned.error)
            product = owned.value

            image_result = await store_image(self.image_storage, image)
            if image_result.is_err():
                return Return.err(image_result.error)
            stored_image = image_result.value

            product.name = merge_field(product.name, command.name)
            product.category = merge_field(product.category, command.category)
            product.quantity = merge_field(product.quantity, command.quantity)
            product.price = merge_field(product.price, command.price)
            product.description = merge_field(product.description, command.description)
            if stored_image is not None:
                product.image = stored_image.model_dump()
            product.updated_at = self.clock()

            product = await self.uow.products.update(product)
            await self.uow.commit()

            return Return.ok(ProductResponse.from_product(product))
