from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.verified_user import VerifiedUser


class VerifiedUserRepository(ABC):
    """Repository interface - defines contract for verified user data access"""

    @abstractmethod
    async def list_users(self) -> List[VerifiedUser]:
        """Return every verified user in insertion order"""
        pass

    @abstractmethod
    async def add_user(self, user: VerifiedUser) -> VerifiedUser:
        """Append a verified user (duplicate names are not rejected)"""
        pass

    @abstractmethod
    async def remove_user(self, name: str) -> int:
        """Remove every user whose name matches case-insensitively, return how many were removed"""
        pass

    @abstractmethod
    async def find_user(self, name: str) -> Optional[VerifiedUser]:
        """Find the first user whose name matches case-insensitively"""
        pass
