from typing import TYPE_CHECKING
from ...core.config import Settings
from ...infrastructure.storage.storage_connection import get_logs_file, get_verified_users_file

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class StorageProvider:
    """Collection file provider - single source of truth for the JSON files"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register both collection files as singletons.
        Every repository shares the same file object, and with it the write lock.
        """
        settings = container.get(Settings)

        container.register_singleton("logs_file", get_logs_file(settings))
        container.register_singleton("verified_users_file", get_verified_users_file(settings))
