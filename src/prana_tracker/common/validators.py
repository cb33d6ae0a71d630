from __future__ import annotations

from typing import Any, Optional

from ..core.enums import ActivityStatus
from ..core.exceptions import ValidationError


def is_blank(value: Any) -> bool:
    """Missing means absent, falsy (``False``, ``0``, empty containers) or whitespace-only text."""
    if isinstance(value, str):
        return not value.strip()
    return not value


def require_fields(message: str, *values: Any) -> None:
    """Raise ``ValidationError(message)`` if any value is missing or blank."""
    if any(is_blank(v) for v in values):
        raise ValidationError(message)


def clean_text(value: Any) -> str:
    return str(value).strip()


def optional_text(value: Any) -> Optional[str]:
    if is_blank(value):
        return None
    return str(value).strip()


def parse_activity_status(value: Any) -> ActivityStatus:
    try:
        return ActivityStatus(str(value).strip().lower())
    except ValueError:
        raise ValidationError("Invalid status")
