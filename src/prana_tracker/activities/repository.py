from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import ActivityStatus
from .model import Activity


class ActivityRepository(Protocol):
    def list_for_scholar(self, scholar_id: str, *, on_date: Optional[date] = None) -> Sequence[Activity]:
        """Activities of one scholar on ``on_date`` (storage engine's today when None), newest first."""

        raise NotImplementedError

    def create_activity(
        self,
        *,
        scholar_id: str,
        activity_name: str,
        activity_time: Optional[str],
        status: ActivityStatus,
    ) -> int:
        raise NotImplementedError

    def update_status(self, *, activity_id: int, status: ActivityStatus) -> int:
        """Overwrite the status of one activity; returns the number of rows changed."""

        raise NotImplementedError
