from __future__ import annotations

from typing import Sequence

from ..core.enums import ActivityStatus
from ..database.base import (
    db_session,
    execute,
    fetchall,
    fetchscalar,
    normalize_sql_date,
    normalize_sql_datetime,
)
from ..database.connection import DatabaseConnection
from .model import ActivityFeedRow
from .repository import DashboardRepository


class SQLDashboardRepository(DashboardRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def count_students(self) -> int:
        with db_session(self._conn_factory) as conn:
            return fetchscalar(execute(conn, "SELECT COUNT(*) FROM students"))

    def count_active_today(self) -> int:
        with db_session(self._conn_factory) as conn:
            return fetchscalar(
                execute(
                    conn,
                    """
                    SELECT COUNT(DISTINCT scholar_id)
                    FROM activities
                    WHERE date = CURRENT_DATE AND status = :status
                    """,
                    {"status": ActivityStatus.COMPLETED.value},
                )
            )

    def count_completed_today(self) -> int:
        with db_session(self._conn_factory) as conn:
            return fetchscalar(
                execute(
                    conn,
                    "SELECT COUNT(*) FROM activities WHERE date = CURRENT_DATE AND status = :status",
                    {"status": ActivityStatus.COMPLETED.value},
                )
            )

    def count_activities_today(self) -> int:
        with db_session(self._conn_factory) as conn:
            return fetchscalar(execute(conn, "SELECT COUNT(*) FROM activities WHERE date = CURRENT_DATE"))

    def list_today_feed(self, *, limit: int) -> Sequence[ActivityFeedRow]:
        with db_session(self._conn_factory) as conn:
            rows = fetchall(
                execute(
                    conn,
                    """
                    SELECT a.id, a.scholar_id, a.activity_name, a.activity_time, a.status,
                           a.date, a.created_at,
                           s.name, s.hostel
                    FROM activities a
                    JOIN students s ON s.scholar_id = a.scholar_id
                    WHERE a.date = CURRENT_DATE
                    ORDER BY a.created_at DESC, a.id DESC
                    LIMIT :limit
                    """,
                    {"limit": int(limit)},
                )
            )
            return [
                ActivityFeedRow(
                    activity_id=int(r["id"]),
                    scholar_id=str(r["scholar_id"]),
                    activity_name=r["activity_name"],
                    activity_time=r.get("activity_time"),
                    status=ActivityStatus(r["status"]),
                    activity_date=normalize_sql_date(r.get("date")),
                    created_at=normalize_sql_datetime(r.get("created_at")),
                    name=r["name"],
                    hostel=r.get("hostel"),
                )
                for r in rows
            ]
