from .config import Settings, get_settings
from .exceptions import (
    NextraError,
    ValidationError,
    StorageError,
    StorageReadError,
    StorageWriteError,
    UploadTooLargeError,
)

__all__ = [
    "Settings",
    "get_settings",
    "NextraError",
    "ValidationError",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "UploadTooLargeError",
]
