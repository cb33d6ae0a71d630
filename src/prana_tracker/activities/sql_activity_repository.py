from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import ActivityStatus
from ..database.base import (
    date_param,
    db_session,
    execute,
    fetchall,
    normalize_sql_date,
    normalize_sql_datetime,
)
from ..database.connection import DatabaseConnection
from .model import Activity
from .repository import ActivityRepository


class SQLActivityRepository(ActivityRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_scholar(self, scholar_id: str, *, on_date: Optional[date] = None) -> Sequence[Activity]:
        with db_session(self._conn_factory) as conn:
            rows = fetchall(
                execute(
                    conn,
                    """
                    SELECT id, scholar_id, activity_name, activity_time, status, date, created_at
                    FROM activities
                    WHERE scholar_id = :scholar_id
                      AND date = COALESCE(:on_date, CURRENT_DATE)
                    ORDER BY created_at DESC, id DESC
                    """,
                    {"scholar_id": scholar_id, "on_date": date_param(on_date)},
                )
            )
            return [
                Activity(
                    activity_id=int(r["id"]),
                    scholar_id=str(r["scholar_id"]),
                    activity_name=r["activity_name"],
                    activity_time=r.get("activity_time"),
                    status=ActivityStatus(r["status"]),
                    activity_date=normalize_sql_date(r.get("date")),
                    created_at=normalize_sql_datetime(r.get("created_at")),
                )
                for r in rows
            ]

    def create_activity(
        self,
        *,
        scholar_id: str,
        activity_name: str,
        activity_time: Optional[str],
        status: ActivityStatus,
    ) -> int:
        with db_session(self._conn_factory) as conn:
            result = execute(
                conn,
                """
                INSERT INTO activities (scholar_id, activity_name, activity_time, status)
                VALUES (:scholar_id, :activity_name, :activity_time, :status)
                """,
                {
                    "scholar_id": scholar_id,
                    "activity_name": activity_name,
                    "activity_time": activity_time,
                    "status": status.value,
                },
            )
            return int(result.lastrowid)

    def update_status(self, *, activity_id: int, status: ActivityStatus) -> int:
        with db_session(self._conn_factory) as conn:
            result = execute(
                conn,
                "UPDATE activities SET status = :status WHERE id = :activity_id",
                {"status": status.value, "activity_id": int(activity_id)},
            )
            return int(result.rowcount)
