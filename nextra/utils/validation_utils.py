from typing import Any


def is_blank(value: Any) -> bool:
    """True for None, non-string values and whitespace-only strings"""
    return not isinstance(value, str) or not value.strip()
