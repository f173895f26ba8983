from .storage_provider import StorageProvider
from .repository_provider import RepositoryProvider
from .upload_provider import UploadProvider
from .log_provider import LogProvider
from .verified_user_provider import VerifiedUserProvider


__all__ = [
    "StorageProvider",
    "RepositoryProvider",
    "UploadProvider",
    "LogProvider",
    "VerifiedUserProvider",
]
