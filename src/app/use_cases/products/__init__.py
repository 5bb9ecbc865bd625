"""
Product Use Cases

Inventory CRUD scoped to the authenticated owner.
"""

from .list_products_use_case import ListProductsUseCase
from .create_product_use_case import CreateProductUseCase
from .get_product_use_case import GetProductUseCase
from .update_product_use_case import UpdateProductUseCase
from .delete_product_use_case import DeleteProductUseCase
from .ownership import load_owned_product
from .dtos import (
    ImageUpload,
    CreateProductCommand,
    UpdateProductCommand,
    ProductResponse,
    DeleteProductResponse,
)

__all__ = [
    "ListProductsUseCase",
    "CreateProductUseCase",
    "GetProductUseCase",
    "UpdateProductUseCase",
    "DeleteProductUseCase",
    "load_owned_product",
    "ImageUpload",
    "CreateProductCommand",
    "UpdateProductCommand",
    "ProductResponse",
    "DeleteProductResponse",
]
