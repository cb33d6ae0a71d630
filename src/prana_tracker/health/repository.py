from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .model import HealthStatus, HealthUpsertResult


class HealthRepository(Protocol):
    def get_for_scholar(self, scholar_id: str, *, on_date: Optional[date] = None) -> Optional[HealthStatus]:
        raise NotImplementedError

    def upsert_today(self, *, scholar_id: str, status: str, notes: Optional[str]) -> HealthUpsertResult:
        """Insert today's row, or overwrite status/notes of the existing one.

        Must be safe against concurrent callers: never leaves two rows for one scholar/day.
        """

        raise NotImplementedError
