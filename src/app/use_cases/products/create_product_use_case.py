"""
Create Product Use Case
"""

import logging
from typing import Optional
from uuid import UUID

from src.app.services.image_storage import IImageStorage
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Product
from src.libs.result import Error, Result, Return
from .dtos import CreateProductCommand, ImageUpload, ProductResponse
from .images import store_image

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "category", "quantity", "price", "description")


class CreateProductUseCase:
    """
    Business Rules:
    - name, category, quantity, price and description are required; sku is optional
    - Optional image must be png, jpg or jpeg
    - The image is stored before the product is created; if the product
      insert fails afterwards the stored file is left behind
    - The product is owned by the authenticated user
    """

    def __init__(self, uow: UnitOfWork, image_storage: IImageStorage):
        self.uow = uow
        self.image_storage = image_storage

    async def execute(
        self,
        user_id: UUID,
        command: CreateProductCommand,
        image: Optional[ImageUpload] = None,
    ) -> Result[ProductResponse]:
        values = command.model_dump()
        if any(not (values[field] or "").strip() for field in REQUIRED_FIELDS):
            return Return.err(
                Error("VALIDATION_ERROR", "Please fill in all the fields")
            )

        image_result = await store_image(self.image_storage, image)
        if image_result.is_err():
            return Return.err(image_result.error)
        stored_image = image_result.value

        async with self.uow:
            product = Product(
                user_id=user_id,
                name=command.name,
                sku=command.sku,
                category=command.category,
                quantity=command.quantity,
                price=command.price,
                description=command.description,
                image=stored_image.model_dump() if stored_image else {},
            )
            product = await self.uow.products.create(product)
            await self.uow.commit()

            logger.info(f"Product {product.id} created by user {user_id}")

            return Return.ok(ProductResponse.from_product(product))
