from .log_repository import LogRepository
from .verified_user_repository import VerifiedUserRepository

__all__ = ["LogRepository", "VerifiedUserRepository"]
