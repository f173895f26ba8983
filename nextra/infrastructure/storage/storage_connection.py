# Standard library imports
import logging
from typing import Optional

# Local application imports
from ...core.config import Settings, get_settings
from .json_array_file import JsonArrayFile

logger = logging.getLogger(__name__)


def get_logs_file(settings: Optional[Settings] = None) -> JsonArrayFile:
    """
    Get the detection log collection file

    Returns:
        JsonArrayFile for log entries
    """
    settings = settings or get_settings()
    return JsonArrayFile(settings.logs_file)


def get_verified_users_file(settings: Optional[Settings] = None) -> JsonArrayFile:
    """
    Get the verified user collection file

    Returns:
        JsonArrayFile for verified users
    """
    settings = settings or get_settings()
    return JsonArrayFile(settings.verified_file)


def initialize_storage(settings: Optional[Settings] = None) -> None:
    """
    Create the data and uploads directories and empty collection files.

    Existing files are left untouched.
    """
    settings = settings or get_settings()
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.uploads_dir.mkdir(parents=True, exist_ok=True)
    get_logs_file(settings).ensure_exists()
    get_verified_users_file(settings).ensure_exists()
    logger.info(f"Storage ready (data: {settings.data_dir}, uploads: {settings.uploads_dir})")
