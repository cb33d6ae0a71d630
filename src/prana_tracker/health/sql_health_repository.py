from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from sqlalchemy.exc import IntegrityError

from ..core.exceptions import StorageError
from ..database.base import (
    date_param,
    db_session,
    execute,
    fetchone,
    normalize_sql_date,
    normalize_sql_datetime,
)
from ..database.connection import DatabaseConnection
from .model import HealthStatus, HealthUpsertResult
from .repository import HealthRepository

logger = logging.getLogger(__name__)

UPSERT_ATTEMPTS = 2


class SQLHealthRepository(HealthRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_scholar(self, scholar_id: str, *, on_date: Optional[date] = None) -> Optional[HealthStatus]:
        with db_session(self._conn_factory) as conn:
            r = fetchone(
                execute(
                    conn,
                    """
                    SELECT id, scholar_id, status, notes, date, created_at
                    FROM health_status
                    WHERE scholar_id = :scholar_id
                      AND date = COALESCE(:on_date, CURRENT_DATE)
                    """,
                    {"scholar_id": scholar_id, "on_date": date_param(on_date)},
                )
            )
            if not r:
                return None
            return HealthStatus(
                health_id=int(r["id"]),
                scholar_id=str(r["scholar_id"]),
                status=r["status"],
                notes=r.get("notes"),
                status_date=normalize_sql_date(r.get("date")),
                created_at=normalize_sql_datetime(r.get("created_at")),
            )

    def upsert_today(self, *, scholar_id: str, status: str, notes: Optional[str]) -> HealthUpsertResult:
        # Insert first and let UNIQUE(scholar_id, date) arbitrate; a losing writer updates instead.
        params = {"scholar_id": scholar_id, "status": status, "notes": notes}

        for _ in range(UPSERT_ATTEMPTS):
            try:
                with db_session(self._conn_factory) as conn:
                    result = execute(
                        conn,
                        """
                        INSERT INTO health_status (scholar_id, status, notes)
                        VALUES (:scholar_id, :status, :notes)
                        """,
                        params,
                    )
                    return HealthUpsertResult(health_id=int(result.lastrowid), created=True)
            except IntegrityError:
                pass

            with db_session(self._conn_factory) as conn:
                updated = execute(
                    conn,
                    """
                    UPDATE health_status
                    SET status = :status, notes = :notes
                    WHERE scholar_id = :scholar_id AND date = CURRENT_DATE
                    """,
                    params,
                )
                if updated.rowcount:
                    r = fetchone(
                        execute(
                            conn,
                            "SELECT id FROM health_status WHERE scholar_id = :scholar_id AND date = CURRENT_DATE",
                            {"scholar_id": scholar_id},
                        )
                    )
                    return HealthUpsertResult(health_id=int(r["id"]), created=False)

            # The day rolled over between the insert and the update; try again for the new day.
            logger.debug("Health upsert for scholar_id=%s retried after date change", scholar_id)

        raise StorageError()
