from __future__ import annotations

from datetime import date
from typing import Any, Optional

from ..common.validators import clean_text, optional_text, require_fields
from .model import HealthUpsertResult
from .repository import HealthRepository


class HealthService:
    def __init__(self, health: HealthRepository):
        self._health = health

    def get_health(self, scholar_id: str, *, on_date: Optional[date] = None) -> Optional[dict]:
        row = self._health.get_for_scholar(clean_text(scholar_id), on_date=on_date)
        return row.to_dict() if row else None

    def upsert_health(self, *, scholar_id: Any, status: Any, notes: Optional[Any] = None) -> HealthUpsertResult:
        require_fields("Scholar ID and status required", scholar_id, status)
        return self._health.upsert_today(
            scholar_id=clean_text(scholar_id),
            status=clean_text(status),
            notes=optional_text(notes),
        )
