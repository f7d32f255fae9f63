import logging
import random
import time
from pathlib import Path

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)

UPLOAD_FIELD = "image"
UPLOADS_URL_PREFIX = "/uploads"
DEFAULT_MAX_BYTES = 5 * 1024 * 1024


class UploadRejected(Exception):
    """The upload was refused before anything was written."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UploadManager:
    """Stores uploaded images as flat files in ``upload_dir``."""

    def __init__(self, upload_dir: Path, max_bytes: int = DEFAULT_MAX_BYTES):
        self.upload_dir = Path(upload_dir)
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        self.max_bytes = max_bytes

    @staticmethod
    def generate_filename(original_name: str | None) -> str:
        ext = secure_filename(Path(original_name or "").suffix.lstrip("."))
        stamp = int(time.time() * 1000)
        suffix = random.randint(0, 10**9)
        return f"{UPLOAD_FIELD}-{stamp}-{suffix}" + (f".{ext}" if ext else "")

    @staticmethod
    def public_url(filename: str) -> str:
        return f"{UPLOADS_URL_PREFIX}/{filename}"

    def save(self, file: FileStorage) -> str:
        """
        Validate and write one uploaded image; returns the stored filename.

        Raises UploadRejected for non-image MIME types (400) and for payloads
        larger than ``max_bytes`` (413). OSError from the write propagates.
        """
        mimetype = (file.mimetype or "").lower()
        if not mimetype.startswith("image/"):
            raise UploadRejected("Only image files are allowed")

        data = file.stream.read(self.max_bytes + 1)
        if len(data) > self.max_bytes:
            limit_mb = self.max_bytes / (1024 * 1024)
            raise UploadRejected(f"File exceeds the {limit_mb:g}MB limit", status_code=413)

        filename = self.generate_filename(file.filename)
        (self.upload_dir / filename).write_bytes(data)
        logger.info("Stored upload %s (%d bytes)", filename, len(data))
        return filename

    def resolve(self, filename: str) -> Path | None:
        """Path of ``filename`` inside the upload directory, or None if it would escape it."""
        root = self.upload_dir.resolve()
        target = (root / filename).resolve()
        if target.parent != root:
            return None
        return target

    def delete(self, filename: str) -> bool:
        target = self.resolve(filename)
        if target is None:
            logger.warning("Refusing to delete %r outside %s", filename, self.upload_dir)
            return False
        if not target.is_file():
            return False
        target.unlink()
        logger.info("Deleted upload %s", filename)
        return True
