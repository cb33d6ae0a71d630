from __future__ import annotations

from enum import Enum


class ActivityStatus(str, Enum):
    """Progress of a scheduled daily activity."""

    PENDING = "pending"
    COMPLETED = "completed"
