# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.verified_user_repository import VerifiedUserRepository
from ...dto.verified_user_dto import VerifiedUserResponse


class ListVerifiedUsersUseCase:
    """Use case for listing every verified user"""

    def __init__(
        self,
        verified_user_repository: VerifiedUserRepository,
    ) -> None:
        self.verified_user_repository = verified_user_repository

    async def execute(self) -> List[VerifiedUserResponse]:
        """
        List all verified users in insertion order

        Returns:
            List of VerifiedUserResponse objects
        """
        users = await self.verified_user_repository.list_users()

        return [
            VerifiedUserResponse(name=user.name, role=user.role, photo=user.photo)
            for user in users
        ]
