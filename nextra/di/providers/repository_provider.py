from typing import TYPE_CHECKING
from ...domain.repositories.log_repository import LogRepository
from ...domain.repositories.verified_user_repository import VerifiedUserRepository
from ...infrastructure.storage.json_log_repository import JsonLogRepository
from ...infrastructure.storage.json_verified_user_repository import JsonVerifiedUserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collection files from the storage provider and creates repository instances.
        """
        logs_file = container.get("logs_file")
        verified_users_file = container.get("verified_users_file")

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            LogRepository,
            JsonLogRepository(logs_file=logs_file)
        )

        container.register_singleton(
            VerifiedUserRepository,
            JsonVerifiedUserRepository(verified_users_file=verified_users_file)
        )
