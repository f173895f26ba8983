from .log_entry import LogEntry
from .verified_user import VerifiedUser, normalize_name

__all__ = ["LogEntry", "VerifiedUser", "normalize_name"]
