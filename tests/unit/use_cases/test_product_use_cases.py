"""
Unit tests for the product use cases

Covers required fields, image handling and the owner-only access rule.
"""
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.services.image_storage import ImageUploadError, StoredImage
from src.app.use_cases.products import (
    CreateProductCommand,
    CreateProductUseCase,
    DeleteProductUseCase,
    GetProductUseCase,
    ImageUpload,
    ListProductsUseCase,
    UpdateProductCommand,
    UpdateProductUseCase,
    load_owned_product,
)
from src.domain.entities import Product

OWNER_ID = uuid4()


@pytest.fixture
def image_storage():
    storage = MagicMock()
    storage.save = AsyncMock(
        return_value=StoredImage(
            filename="box.png",
            filepath="/uploads/2024-box.png",
            filetype="image/png",
            filesize="1.00 KB",
        )
    )
    return storage


@pytest.fixture
def product(mock_uow):
    product = Product(
        id=uuid4(),
        user_id=OWNER_ID,
        name="Box",
        sku="SKU-1",
        category="Packaging",
        quantity="10",
        price="2.50",
        description="Cardboard box",
    )
    mock_uow.products.get_by_id.return_value = product
    return product


def full_command(**overrides):
    values = dict(
        name="Box", category="Packaging", quantity="10", price="2.50", description="Cardboard box"
    )
    values.update(overrides)
    return CreateProductCommand(**values)


@pytest.mark.asyncio
async def test_load_owned_product_not_found_before_forbidden(mock_uow):
    result = await load_owned_product(mock_uow, uuid4(), OWNER_ID)

    assert result.is_err()
    assert result.error.code == "PRODUCT_NOT_FOUND"


@pytest.mark.asyncio
async def test_load_owned_product_other_user_forbidden(mock_uow, product):
    result = await load_owned_product(mock_uow, product.id, uuid4())

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"


@pytest.mark.asyncio
async def test_create_product_without_image(mock_uow, image_storage):
    result = await CreateProductUseCase(mock_uow, image_storage).execute(OWNER_ID, full_command())

    assert result.is_ok()
    assert result.value.user_id == str(OWNER_ID)
    assert result.value.image == {}
    image_storage.save.assert_not_called()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_product_with_image(mock_uow, image_storage):
    image = ImageUpload(filename="box.png", content_type="image/png", data=b"\x89PNG" * 250)

    result = await CreateProductUseCase(mock_uow, image_storage).execute(OWNER_ID, full_command(), image)

    assert result.is_ok()
    assert result.value.image["filepath"] == "/uploads/2024-box.png"
    image_storage.save.assert_called_once_with("box.png", "image/png", image.data)


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["name", "category", "quantity", "price", "description"])
async def test_create_product_requires_fields(mock_uow, image_storage, missing):
    result = await CreateProductUseCase(mock_uow, image_storage).execute(
        OWNER_ID, full_command(**{missing: ""})
    )

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.products.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_product_rejects_unsupported_image(mock_uow, image_storage):
    image = ImageUpload(filename="doc.pdf", content_type="application/pdf", data=b"%PDF")

    result = await CreateProductUseCase(mock_uow, image_storage).execute(OWNER_ID, full_command(), image)

    assert result.is_err()
    assert result.error.code == "INVALID_IMAGE_TYPE"
    image_storage.save.assert_not_called()


@pytest.mark.asyncio
async def test_create_product_image_storage_failure(mock_uow, image_storage):
    image_storage.save.side_effect = ImageUploadError("disk full")
    image = ImageUpload(filename="box.png", content_type="image/png", data=b"png")

    result = await CreateProductUseCase(mock_uow, image_storage).execute(OWNER_ID, full_command(), image)

    assert result.is_err()
    assert result.error.code == "IMAGE_UPLOAD_FAILED"
    mock_uow.products.create.assert_not_called()


@pytest.mark.asyncio
async def test_list_products_scoped_to_user(mock_uow, product):
    mock_uow.products.list_by_user_id.return_value = [product]

    result = await ListProductsUseCase(mock_uow).execute(OWNER_ID)

    assert result.is_ok()
    assert [p.id for p in result.value] == [str(product.id)]
    mock_uow.products.list_by_user_id.assert_called_once_with(OWNER_ID)


@pytest.mark.asyncio
async def test_get_product_of_other_user(mock_uow, product):
    result = await GetProductUseCase(mock_uow).execute(uuid4(), product.id)

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"


@pytest.mark.asyncio
async def test_update_product_keeps_blank_fields(mock_uow, image_storage, product):
    result = await UpdateProductUseCase(mock_uow, image_storage).execute(
        OWNER_ID, product.id, UpdateProductCommand(name="Crate", price="", quantity=None)
    )

    assert result.is_ok()
    assert result.value.name == "Crate"
    assert result.value.price == "2.50"
    assert result.value.quantity == "10"
    assert result.value.sku == "SKU-1"


@pytest.mark.asyncio
async def test_update_product_replaces_image(mock_uow, image_storage, product):
    product.image = {"filename": "old.png"}
    image = ImageUpload(filename="box.png", content_type="image/jpeg", data=b"jpg")

    result = await UpdateProductUseCase(mock_uow, image_storage).execute(
        OWNER_ID, product.id, UpdateProductCommand(), image
    )

    assert result.is_ok()
    assert result.value.image["filename"] == "box.png"


@pytest.mark.asyncio
async def test_update_product_of_other_user_is_not_modified(mock_uow, image_storage, product):
    result = await UpdateProductUseCase(mock_uow, image_storage).execute(
        uuid4(), product.id, UpdateProductCommand(name="Stolen")
    )

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    assert product.name == "Box"
    mock_uow.products.update.assert_not_called()


@pytest.mark.asyncio
async def test_delete_product(mock_uow, product):
    result = await DeleteProductUseCase(mock_uow).execute(OWNER_ID, product.id)

    assert result.is_ok()
    assert result.value.message == "Product deleted"
    mock_uow.products.delete.assert_called_once_with(product)


@pytest.mark.asyncio
async def test_delete_missing_product(mock_uow):
    result = await DeleteProductUseCase(mock_uow).execute(OWNER_ID, uuid4())

    assert result.is_err()
    assert result.error.code == "PRODUCT_NOT_FOUND"
    mock_uow.products.delete.assert_not_called()
