"""
Local disk storage for verified-user photos.

Stored files are named `<epoch-millis>-<original-name>` inside the uploads
directory and exposed publicly under `/uploads/<stored-name>`.
"""
# Standard library imports
import logging
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Optional, Protocol

# Local application imports
from ...core.config import Settings, get_settings
from ...core.exceptions import StorageWriteError, UploadTooLargeError, ValidationError
from ...utils.datetime_utils import epoch_millis

logger = logging.getLogger(__name__)

PUBLIC_PREFIX = "/uploads"
CHUNK_SIZE = 1024 * 1024


class UploadedFile(Protocol):
    """Minimal interface of an incoming upload (satisfied by fastapi.UploadFile)"""
    filename: Optional[str]

    async def read(self, size: int = -1) -> bytes:
        ...


def safe_basename(filename: str) -> str:
    """Strip any client-side directory components from an upload name"""
    return PureWindowsPath(PurePosixPath(filename).name).name


class PhotoStorage:
    """Stores uploaded photos on local disk"""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        settings = settings or get_settings()
        self.uploads_dir = settings.uploads_dir
        self.max_bytes = settings.upload_max_mb * 1024 * 1024
        self.max_mb = settings.upload_max_mb

    async def save(self, upload: UploadedFile) -> str:
        """
        Stream an upload to disk.

        Args:
            upload: Incoming file

        Returns:
            Public reference path, e.g. "/uploads/1735036200000-alice.jpg"

        Raises:
            ValidationError: If the upload has no file name
            UploadTooLargeError: If the file exceeds the configured limit
            StorageWriteError: If the file cannot be written
        """
        original_name = safe_basename(upload.filename or "")
        if not original_name:
            raise ValidationError("Uploaded photo has no file name", user_message="Invalid user data")

        stored_name = f"{epoch_millis()}-{original_name}"
        final_path = self.uploads_dir / stored_name

        size = 0
        try:
            self.uploads_dir.mkdir(parents=True, exist_ok=True)
            with open(final_path, "wb") as f:
                while True:
                    chunk = await upload.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if size > self.max_bytes:
                        f.close()
                        final_path.unlink(missing_ok=True)
                        raise UploadTooLargeError(self.max_mb)
                    f.write(chunk)
        except OSError as e:
            final_path.unlink(missing_ok=True)
            raise StorageWriteError(f"Cannot store upload {stored_name}: {e}") from e

        logger.info(f"Stored photo {stored_name} ({size} bytes)")
        return f"{PUBLIC_PREFIX}/{stored_name}"

    def delete(self, reference: str) -> None:
        """Remove a previously stored photo given its public reference"""
        path = self.path_for(reference)
        if path is None:
            return
        try:
            path.unlink(missing_ok=True)
            logger.info(f"Removed photo {path.name}")
        except OSError as e:
            logger.warning(f"Could not remove photo {path}: {e}")

    def path_for(self, reference: str) -> Optional[Path]:
        """Map a public reference back to its file inside the uploads directory"""
        prefix = f"{PUBLIC_PREFIX}/"
        if not reference.startswith(prefix):
            return None
        name = safe_basename(reference[len(prefix):])
        if not name:
            return None
        return self.uploads_dir / name
