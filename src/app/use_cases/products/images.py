import logging
from typing import Optional

from src.app.services.image_storage import (
    ALLOWED_IMAGE_TYPES,
    IImageStorage,
    ImageUploadError,
    StoredImage,
)
from src.libs.result import Error, Result, Return
from .dtos import ImageUpload

logger = logging.getLogger(__name__)


async def store_image(storage: IImageStorage, image: Optional[ImageUpload]) -> Result[Optional[StoredImage]]:
    """Validate and store an optional product image; Ok(None) when no image was sent."""
    if image is None:
        return Return.ok(None)

    if image.content_type.lower() not in ALLOWED_IMAGE_TYPES:
        return Return.err(
            Error("INVALID_IMAGE_TYPE", "Only png, jpg and jpeg images are allowed")
        )

    try:
        stored = await storage.save(image.filename, image.content_type, image.data)
    except ImageUploadError as exc:
        logger.error(f"Image upload failed: {exc}")
        return Return.err(
            Error("IMAGE_UPLOAD_FAILED", "Image could not be uploaded")
        )

    return Return.ok(stored)
