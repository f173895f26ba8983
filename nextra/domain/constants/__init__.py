"""Constants for domain model field names"""

from .log_fields import LogFields
from .verified_user_fields import VerifiedUserFields

__all__ = [
    "LogFields",
    "VerifiedUserFields",
]
