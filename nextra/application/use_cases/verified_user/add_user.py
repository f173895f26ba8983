# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....core.exceptions import StorageError, ValidationError
from ....domain.repositories.verified_user_repository import VerifiedUserRepository
from ....domain.models.verified_user import VerifiedUser
from ....infrastructure.uploads.photo_storage import PhotoStorage, UploadedFile
from ....utils.validation_utils import is_blank
from ...dto.verified_user_dto import VerifiedUserResponse, VerifiedUserSavedResponse

logger = logging.getLogger(__name__)


class AddVerifiedUserUseCase:
    """Use case for registering a verified user with a photo"""

    def __init__(
        self,
        verified_user_repository: VerifiedUserRepository,
        photo_storage: PhotoStorage,
    ) -> None:
        self.verified_user_repository = verified_user_repository
        self.photo_storage = photo_storage

    async def execute(
        self,
        name: Optional[str],
        role: Optional[str],
        photo: Optional[UploadedFile],
    ) -> VerifiedUserSavedResponse:
        """
        Store the photo and append the verified user

        Args:
            name: User name (identity key)
            role: User role
            photo: Uploaded photo file

        Returns:
            VerifiedUserSavedResponse with the stored user

        Raises:
            ValidationError: If name, role or photo is missing (nothing is written)
            UploadTooLargeError: If the photo exceeds the upload limit
            StorageError: If the photo or the user collection cannot be written
        """
        if is_blank(name) or is_blank(role):
            raise ValidationError("Name and role are required", user_message="Invalid user data")
        if photo is None or is_blank(photo.filename):
            raise ValidationError("Photo is required", user_message="Invalid user data")

        reference = await self.photo_storage.save(photo)

        try:
            saved = await self.verified_user_repository.add_user(
                VerifiedUser(name=name, role=role, photo=reference)
            )
        except StorageError:
            logger.warning(f"User {name!r} was not saved, discarding photo {reference}")
            self.photo_storage.delete(reference)
            raise

        return VerifiedUserSavedResponse(
            message="User saved successfully!",
            user=VerifiedUserResponse(name=saved.name, role=saved.role, photo=saved.photo),
        )
