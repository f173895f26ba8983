# Local application imports
from ....core.exceptions import ValidationError
from ....domain.repositories.verified_user_repository import VerifiedUserRepository
from ....utils.validation_utils import is_blank
from ...dto.verified_user_dto import CheckUserRequest, CheckUserResponse, VerifiedUserResponse


class CheckVerifiedUserUseCase:
    """Use case for checking whether a name belongs to a verified user"""

    def __init__(
        self,
        verified_user_repository: VerifiedUserRepository,
    ) -> None:
        self.verified_user_repository = verified_user_repository

    async def execute(self, request: CheckUserRequest) -> CheckUserResponse:
        """
        Look up the first verified user matching the name (case-insensitive)

        Args:
            request: Name to check

        Returns:
            CheckUserResponse with verified flag and the matched user, if any

        Raises:
            ValidationError: If name is missing
        """
        if is_blank(request.name):
            raise ValidationError("Name is required", user_message="Name required")

        user = await self.verified_user_repository.find_user(request.name)
        if user is None:
            return CheckUserResponse(verified=False, user=None)

        return CheckUserResponse(
            verified=True,
            user=VerifiedUserResponse(name=user.name, role=user.role, photo=user.photo),
        )
