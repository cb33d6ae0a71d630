from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import isoformat_or_none
from ..core.enums import ActivityStatus


@dataclass(frozen=True)
class Activity:
    """Domain entity: one scheduled activity of a student on a calendar day."""

    activity_id: int
    scholar_id: str
    activity_name: str
    activity_time: Optional[str]
    status: ActivityStatus
    activity_date: Optional[date]
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.activity_id,
            "scholar_id": self.scholar_id,
            "activity_name": self.activity_name,
            "activity_time": self.activity_time,
            "status": self.status.value,
            "date": isoformat_or_none(self.activity_date),
            "created_at": isoformat_or_none(self.created_at),
        }
