from typing import TYPE_CHECKING
from ...domain.repositories.verified_user_repository import VerifiedUserRepository
from ...application.use_cases.verified_user.list_users import ListVerifiedUsersUseCase
from ...application.use_cases.verified_user.add_user import AddVerifiedUserUseCase
from ...application.use_cases.verified_user.remove_user import RemoveVerifiedUserUseCase
from ...application.use_cases.verified_user.check_user import CheckVerifiedUserUseCase
from ...infrastructure.uploads.photo_storage import PhotoStorage

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class VerifiedUserProvider:
    """Verified user use case provider - registers all verified-user use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all verified user use cases.
        Use cases are created on-demand via factories.
        """
        # Register ListVerifiedUsersUseCase
        container.register_factory(
            ListVerifiedUsersUseCase,
            lambda: ListVerifiedUsersUseCase(
                verified_user_repository=container.get(VerifiedUserRepository),
            )
        )

        # Register AddVerifiedUserUseCase
        container.register_factory(
            AddVerifiedUserUseCase,
            lambda: AddVerifiedUserUseCase(
                verified_user_repository=container.get(VerifiedUserRepository),
                photo_storage=container.get(PhotoStorage),
            )
        )

        # Register RemoveVerifiedUserUseCase
        container.register_factory(
            RemoveVerifiedUserUseCase,
            lambda: RemoveVerifiedUserUseCase(
                verified_user_repository=container.get(VerifiedUserRepository),
            )
        )

        # Register CheckVerifiedUserUseCase
        container.register_factory(
            CheckVerifiedUserUseCase,
            lambda: CheckVerifiedUserUseCase(
                verified_user_repository=container.get(VerifiedUserRepository),
            )
        )
