# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# Local application imports
from ...core.exceptions import StorageReadError, ValidationError
from ...domain.constants import VerifiedUserFields
from ...domain.models.verified_user import VerifiedUser, normalize_name
from ...domain.repositories.verified_user_repository import VerifiedUserRepository
from .json_array_file import JsonArrayFile, Record
from .storage_connection import get_verified_users_file

logger = logging.getLogger(__name__)


class JsonVerifiedUserRepository(VerifiedUserRepository):
    """JSON file implementation of VerifiedUserRepository"""

    def __init__(self, verified_users_file: Optional[JsonArrayFile] = None) -> None:
        self.verified_users_file = (
            verified_users_file if verified_users_file is not None else get_verified_users_file()
        )

    async def list_users(self) -> List[VerifiedUser]:
        """Return every verified user in insertion order"""
        records = await self.verified_users_file.read()
        return [self._record_to_user(record) for record in records]

    async def add_user(self, user: VerifiedUser) -> VerifiedUser:
        """Append a verified user"""
        record = self._user_to_record(user)
        await self.verified_users_file.update(lambda records: records + [record])
        logger.info(f"Verified user added: {user.name}")
        return user

    async def remove_user(self, name: str) -> int:
        """Remove every user whose name matches case-insensitively"""
        key = normalize_name(name)
        removed = 0

        def drop_matches(records: List[Record]) -> List[Record]:
            nonlocal removed
            kept = [
                record for record in records
                if normalize_name(self._record_to_user(record).name) != key
            ]
            removed = len(records) - len(kept)
            return kept

        await self.verified_users_file.update(drop_matches)
        logger.info(f"User removed: {name} ({removed} record(s))")
        return removed

    async def find_user(self, name: str) -> Optional[VerifiedUser]:
        """Find the first user whose name matches case-insensitively"""
        for user in await self.list_users():
            if user.matches(name):
                return user
        return None

    def _record_to_user(self, record: Any) -> VerifiedUser:
        """Convert stored record to VerifiedUser domain model"""
        if not isinstance(record, dict):
            raise StorageReadError(f"Invalid user record in {self.verified_users_file.path}: {record!r}")
        try:
            return VerifiedUser(
                name=record.get(VerifiedUserFields.NAME),
                role=record.get(VerifiedUserFields.ROLE),
                photo=record.get(VerifiedUserFields.PHOTO),
            )
        except ValidationError as e:
            raise StorageReadError(
                f"Invalid user record in {self.verified_users_file.path}: {e.message}"
            ) from e

    def _user_to_record(self, user: VerifiedUser) -> Dict[str, Any]:
        """Convert VerifiedUser domain model to stored record"""
        return {
            VerifiedUserFields.NAME: user.name,
            VerifiedUserFields.ROLE: user.role,
            VerifiedUserFields.PHOTO: user.photo,
        }
