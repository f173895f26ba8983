"""
DateTime Utilities
==================

Small helpers for the timestamps the backend generates itself. Detection
log times are supplied by the client and stored verbatim; the server only
needs a clock for upload file names.

Functions:
- utc_now(): timezone-aware current UTC datetime
- epoch_millis(): milliseconds since the Unix epoch
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.
    """
    return datetime.now(dt_timezone.utc)


def epoch_millis(dt: Optional[datetime] = None) -> int:
    """
    Milliseconds since the Unix epoch.

    Args:
        dt: Datetime to convert (naive values are taken as UTC). Defaults to now.

    Returns:
        Integer milliseconds, e.g. 1735036200000
    """
    if dt is None:
        dt = utc_now()
    elif dt.tzinfo is None:
        dt = dt.replace(tzinfo=dt_timezone.utc)
    return int(dt.timestamp() * 1000)
