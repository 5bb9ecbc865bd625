"""
Resource ownership check for products.

Existence is checked before ownership, so a missing product is always
reported as not found and never as forbidden.
"""

from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Product
from src.libs.result import Error, Result, Return


async def load_owned_product(uow: UnitOfWork, product_id: UUID, user_id: UUID) -> Result[Product]:
    """
    Load a product on behalf of a user.

    Must be called inside an open unit of work.

    Returns:
        Result with the Product, or Error(PRODUCT_NOT_FOUND | FORBIDDEN)
    """
    product = await uow.products.get_by_id(product_id)
    if product is None:
        return Return.err(Error("PRODUCT_NOT_FOUND", "Product not found"))

    if product.user_id != user_id:
        return Return.err(Error("FORBIDDEN", "User not authorized"))

    return Return.ok(product)
