"""
Custom exception hierarchy for the NEXTRA backend.

Raised by domain models, repositories, upload storage and use cases. All
errors inherit from NextraError and can carry a user-facing message; the
API controllers translate them into HTTP status codes at the request
boundary.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class NextraError(Exception):
    """Base exception for all NEXTRA errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or "An error occurred. Please try again."
        self.details = details or {}


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class ValidationError(NextraError):
    """Raised when a required field is missing or empty."""
    pass


# -----------------------------------------------------------------------------
# Storage
# -----------------------------------------------------------------------------


class StorageError(NextraError):
    """Base exception for file-backed storage errors."""
    pass


class StorageReadError(StorageError):
    """Raised when a collection file cannot be read or decoded."""
    pass


class StorageWriteError(StorageError):
    """Raised when a collection file or uploaded photo cannot be written."""
    pass


# -----------------------------------------------------------------------------
# Uploads
# -----------------------------------------------------------------------------


class UploadTooLargeError(NextraError):
    """Raised when an uploaded photo exceeds the configured size limit."""

    def __init__(self, limit_mb: int):
        super().__init__(
            f"Uploaded file exceeds {limit_mb} MB",
            user_message=f"File too large. Max {limit_mb} MB.",
            details={"limit_mb": limit_mb},
        )
        self.limit_mb = limit_mb
