from __future__ import annotations

from typing import Protocol, Sequence

from .model import ActivityFeedRow


class DashboardRepository(Protocol):
    """Aggregate queries for the admin dashboard. "Today" is the storage engine's date."""

    def count_students(self) -> int:
        raise NotImplementedError

    def count_active_today(self) -> int:
        """Distinct scholars with at least one completed activity today."""

        raise NotImplementedError

    def count_completed_today(self) -> int:
        raise NotImplementedError

    def count_activities_today(self) -> int:
        raise NotImplementedError

    def list_today_feed(self, *, limit: int) -> Sequence[ActivityFeedRow]:
        raise NotImplementedError
