from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from src.api.error import ClientError, ServerError
from src.app.services.image_storage import IImageStorage
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AuthenticatedUser
from src.app.use_cases.products import (
    CreateProductCommand,
    CreateProductUseCase,
    DeleteProductResponse,
    DeleteProductUseCase,
    GetProductUseCase,
    ImageUpload,
    ListProductsUseCase,
    ProductResponse,
    UpdateProductCommand,
    UpdateProductUseCase,
)
from src.depends import get_current_user, get_image_storage, get_unit_of_work
from src.libs.result import Error

router = APIRouter(prefix="/products", tags=["Products"])


async def _read_image(image: Optional[UploadFile]) -> Optional[ImageUpload]:
    # Browsers send an empty part when no file was picked
    if image is None or not image.filename:
        return None
    return ImageUpload(
        filename=image.filename,
        content_type=image.content_type or "",
        data=await image.read(),
    )


def _raise_product_error(error: Error):
    if error.code in ("VALIDATION_ERROR", "INVALID_IMAGE_TYPE"):
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    elif error.code == "FORBIDDEN":
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    elif error.code == "PRODUCT_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


@router.get("", status_code=status.HTTP_200_OK, response_model=List[ProductResponse])
async def list_products(
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List the current user's products, newest first"""
    use_case = ListProductsUseCase(uow)
    result = await use_case.execute(current_user.id)

    if result.is_err():
        _raise_product_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProductResponse)
async def create_product(
    name: Optional[str] = Form(None),
    sku: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    quantity: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    image_storage: IImageStorage = Depends(get_image_storage),
):
    """
    Create Product

    Multipart form; the optional `image` part must be png, jpg or jpeg.

    Raises:
        - 400 Bad Request: Missing required field or unsupported image type
        - 401 Unauthorized: Missing, invalid or expired session
        - 500 Internal Server Error: Image could not be stored
    """
    command = CreateProductCommand(
        name=name,
        sku=sku,
        category=category,
        quantity=quantity,
        price=price,
        description=description,
    )

    use_case = CreateProductUseCase(uow, image_storage)
    result = await use_case.execute(current_user.id, command, await _read_image(image))

    if result.is_err():
        _raise_product_error(result.error)

    return result.value


@router.get("/{product_id}", status_code=status.HTTP_200_OK, response_model=ProductResponse)
async def get_product(
    product_id: UUID,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Product

    Raises:
        - 401 Unauthorized: Missing, invalid or expired session
        - 403 Forbidden: Product belongs to another user
        - 404 Not Found: Product does not exist
    """
    use_case = GetProductUseCase(uow)
    result = await use_case.execute(current_user.id, product_id)

    if result.is_err():
        _raise_product_error(result.error)

    return result.value


@router.delete(
    "/{product_id}", status_code=status.HTTP_200_OK, response_model=DeleteProductResponse
)
async def delete_product(
    product_id: UUID,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Product

    Raises:
        - 401 Unauthorized: Missing, invalid or expired session
        - 403 Forbidden: Product belongs to another user
        - 404 Not Found: Product does not exist
    """
    use_case = DeleteProductUseCase(uow)
    result = await use_case.execute(current_user.id, product_id)

    if result.is_err():
        _raise_product_error(result.error)

    return result.value


@router.patch("/{product_id}", status_code=status.HTTP_200_OK, response_model=ProductResponse)
async def update_product(
    product_id: UUID,
    name: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    quantity: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    image_storage: IImageStorage = Depends(get_image_storage),
):
    """
    Update Product

    Empty fields keep their stored value; a new image replaces the old one.

    Raises:
        - 400 Bad Request: Unsupported image type
        - 401 Unauthorized: Missing, invalid or expired session
        - 403 Forbidden: Product belongs to another user
        - 404 Not Found: Product does not exist
    """
    command = UpdateProductCommand(
        name=name,
        category=category,
        quantity=quantity,
        price=price,
        description=description,
    )

    use_case = UpdateProductUseCase(uow, image_storage)
    result = await use_case.execute(
        current_user.id, product_id, command, await _read_image(image)
    )

    if result.is_err():
        _raise_product_error(result.error)

    return result.value
