# Standard library imports
from dataclasses import dataclass
from typing import Optional

# Local application imports
from ...core.exceptions import ValidationError
from ...utils.validation_utils import is_blank


@dataclass(frozen=True)
class LogEntry:
    """
    Pure domain model for a detection log entry.

    One record per scan event. Gait and auth are the simulated confidence
    values as percentage strings (e.g. "93.12%"); time is the client-side
    timestamp string. Entries are never modified once stored.
    """
    name: str
    time: str
    gait: Optional[str] = None
    auth: Optional[str] = None
    status: Optional[str] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if is_blank(self.name):
            raise ValidationError("Log name is required", user_message="Invalid log data")
        if is_blank(self.time):
            raise ValidationError("Log time is required", user_message="Invalid log data")
        for field_name in ("gait", "auth", "status"):
            value = getattr(self, field_name)
            if value is not None and not isinstance(value, str):
                raise ValidationError(
                    f"Log {field_name} must be a string, got {type(value).__name__}",
                    user_message="Invalid log data",
                )
