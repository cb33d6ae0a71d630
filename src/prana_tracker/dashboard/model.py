from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import isoformat_or_none
from ..core.enums import ActivityStatus


@dataclass(frozen=True)
class DashboardStats:
    total_students: int
    active_today: int
    completion_rate: int

    def to_dict(self) -> dict:
        return {
            "totalStudents": self.total_students,
            "activeToday": self.active_today,
            "completionRate": self.completion_rate,
        }


@dataclass(frozen=True)
class ActivityFeedRow:
    """Read-model for the admin feed: today's activity joined with its student."""

    activity_id: int
    scholar_id: str
    activity_name: str
    activity_time: Optional[str]
    status: ActivityStatus
    activity_date: Optional[date]
    created_at: Optional[datetime]
    name: str
    hostel: Optional[str]

    def to_dict(self) -> dict:
        return {
            "id": self.activity_id,
            "scholar_id": self.scholar_id,
            "activity_name": self.activity_name,
            "activity_time": self.activity_time,
            "status": self.status.value,
            "date": isoformat_or_none(self.activity_date),
            "created_at": isoformat_or_none(self.created_at),
            "name": self.name,
            "hostel": self.hostel,
        }
