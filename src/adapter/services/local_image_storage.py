import asyncio
import logging
import re
from pathlib import Path

from src.app.services.image_storage import IImageStorage, ImageUploadError, StoredImage
from src.domain.base import utcnow

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def format_file_size(size: int) -> str:
    return f"{size / 1000:.2f} KB"


class LocalImageStorage(IImageStorage):
    """Stores images on the local disk; files are served under `public_prefix`."""

    def __init__(self, upload_dir: str, public_prefix: str = "/uploads"):
        self.upload_dir = Path(upload_dir)
        self.public_prefix = public_prefix.rstrip("/")

    async def save(self, filename: str, content_type: str, data: bytes) -> StoredImage:
        timestamp = utcnow().isoformat().replace(":", "-")
        stored_name = f"{timestamp}-{_UNSAFE_CHARS.sub('_', Path(filename).name)}"
        target = self.upload_dir / stored_name

        try:
            await asyncio.to_thread(self._write, target, data)
        except OSError as exc:
            logger.error(f"Could not store image {stored_name}: {exc}")
            raise ImageUploadError(str(exc)) from exc

        return StoredImage(
            filename=filename,
            filepath=f"{self.public_prefix}/{stored_name}",
            filetype=content_type,
            filesize=format_file_size(len(data)),
        )

    def _write(self, target: Path, data: bytes) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
