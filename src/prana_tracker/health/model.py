from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import isoformat_or_none


@dataclass(frozen=True)
class HealthStatus:
    """Domain entity: a student's self-reported health for one day (at most one per day)."""

    health_id: int
    scholar_id: str
    status: str
    notes: Optional[str]
    status_date: Optional[date]
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.health_id,
            "scholar_id": self.scholar_id,
            "status": self.status,
            "notes": self.notes,
            "date": isoformat_or_none(self.status_date),
            "created_at": isoformat_or_none(self.created_at),
        }


@dataclass(frozen=True)
class HealthUpsertResult:
    health_id: int
    created: bool
