from abc import ABC, abstractmethod

from pydantic import BaseModel


ALLOWED_IMAGE_TYPES = ("image/png", "image/jpg", "image/jpeg")


class ImageUploadError(Exception):
    """Raised when an image could not be stored"""


class StoredImage(BaseModel):
    """Metadata of an uploaded product image"""

    filename: str
    filepath: str
    filetype: str
    filesize: str


class IImageStorage(ABC):
    """Blob storage for product images - application layer"""

    @abstractmethod
    async def save(self, filename: str, content_type: str, data: bytes) -> StoredImage:
        """
        Store an image and return its public metadata.

        Raises:
            ImageUploadError: the image could not be stored
        """
        pass
