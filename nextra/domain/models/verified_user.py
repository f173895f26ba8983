# Standard library imports
from dataclasses import dataclass

# Local application imports
from ...core.exceptions import ValidationError
from ...utils.validation_utils import is_blank


def normalize_name(name: str) -> str:
    """Identity key used for every name comparison (case-insensitive)"""
    return name.casefold()


@dataclass(frozen=True)
class VerifiedUser:
    """
    Pure domain model for a verified user.

    The name is the identity key and is compared case-insensitively. The
    photo is the public reference path of the uploaded picture.
    """
    name: str
    role: str
    photo: str

    def __post_init__(self) -> None:
        """Business validations"""
        if is_blank(self.name):
            raise ValidationError("User name is required", user_message="Invalid user data")
        if is_blank(self.role):
            raise ValidationError("User role is required", user_message="Invalid user data")
        if is_blank(self.photo):
            raise ValidationError("User photo is required", user_message="Invalid user data")

    def matches(self, name: str) -> bool:
        return normalize_name(self.name) == normalize_name(name)
