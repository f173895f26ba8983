from .json_array_file import JsonArrayFile
from .storage_connection import get_logs_file, get_verified_users_file, initialize_storage
from .json_log_repository import JsonLogRepository
from .json_verified_user_repository import JsonVerifiedUserRepository

__all__ = [
    "JsonArrayFile",
    "get_logs_file",
    "get_verified_users_file",
    "initialize_storage",
    "JsonLogRepository",
    "JsonVerifiedUserRepository",
]
