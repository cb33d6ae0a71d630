from __future__ import annotations

import math

from ..core.constants import ADMIN_ACTIVITY_FEED_LIMIT
from ..students.repository import StudentRepository
from .model import DashboardStats
from .repository import DashboardRepository


def completion_rate(completed: int, total: int) -> int:
    """Percentage of today's activities that are completed, rounded half up.

    Zero activities counts as a denominator of 1, so the rate is 0 rather than an error.
    """
    denominator = max(int(total), 1)
    rate = math.floor(100 * int(completed) / denominator + 0.5)
    return max(0, min(100, rate))


class DashboardService:
    """Use cases: admin statistics, today's activity feed, student roster."""

    def __init__(
        self,
        dashboard: DashboardRepository,
        students: StudentRepository,
        *,
        feed_limit: int = ADMIN_ACTIVITY_FEED_LIMIT,
    ):
        self._dashboard = dashboard
        self._students = students
        self._feed_limit = int(feed_limit)

    def get_stats(self) -> DashboardStats:
        # Separate round-trips; the numbers may come from slightly different instants.
        total_students = self._dashboard.count_students()
        active_today = self._dashboard.count_active_today()
        completed = self._dashboard.count_completed_today()
        total = self._dashboard.count_activities_today()

        return DashboardStats(
            total_students=total_students,
            active_today=active_today,
            completion_rate=completion_rate(completed, total),
        )

    def list_today_activities(self) -> list[dict]:
        return [r.to_dict() for r in self._dashboard.list_today_feed(limit=self._feed_limit)]

    def list_students(self) -> list[dict]:
        return [s.admin_view() for s in self._students.list_all()]
