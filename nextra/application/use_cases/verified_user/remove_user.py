# Standard library imports
import logging

# Local application imports
from ....domain.repositories.verified_user_repository import VerifiedUserRepository
from ...dto.verified_user_dto import VerifiedUserRemovedResponse

logger = logging.getLogger(__name__)


class RemoveVerifiedUserUseCase:
    """Use case for removing verified users by name"""

    def __init__(
        self,
        verified_user_repository: VerifiedUserRepository,
    ) -> None:
        self.verified_user_repository = verified_user_repository

    async def execute(self, name: str) -> VerifiedUserRemovedResponse:
        """
        Remove every verified user whose name matches case-insensitively.

        A name with no match is not an error: the collection is rewritten
        unchanged and the same confirmation is returned.

        Args:
            name: Name to remove

        Returns:
            VerifiedUserRemovedResponse with a confirmation message
        """
        removed = await self.verified_user_repository.remove_user(name)
        if removed == 0:
            logger.debug(f"No verified user named {name!r}, nothing removed")

        return VerifiedUserRemovedResponse(message=f"{name} removed successfully.")
