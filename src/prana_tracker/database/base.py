from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import date, datetime
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy import text
from sqlalchemy.engine import Connection, CursorResult
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..core.exceptions import StorageError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_session(conn_factory: DatabaseConnection) -> Iterator[Connection]:
    """Yield a connection inside one transaction (commit on success, rollback on error).

    ``IntegrityError`` propagates as-is so repositories can map the uniqueness rule it
    represents; every other driver failure becomes ``StorageError``.
    """
    try:
        with conn_factory.engine.begin() as conn:
            yield conn
    except IntegrityError:
        raise
    except SQLAlchemyError as e:
        logger.error("Database failure: %s", e, exc_info=True)
        raise StorageError() from e


def execute(conn: Connection, sql: str, params: Any = None) -> CursorResult:
    """Run a parameterized statement; ``params`` may be a list of dicts (executemany)."""
    return conn.execute(text(sql), params or {})


def fetchone(result: CursorResult) -> Optional[Dict[str, Any]]:
    row = result.mappings().first()
    return dict(row) if row else None


def fetchall(result: CursorResult) -> List[Dict[str, Any]]:
    return [dict(r) for r in result.mappings().all()]


def fetchscalar(result: CursorResult, default: int = 0) -> int:
    value = result.scalar()
    return int(value) if value is not None else default


def date_param(value: Optional[date]) -> Optional[str]:
    """Bind dates as ISO strings so they compare equal to stored CURRENT_DATE values."""
    return value.isoformat() if value else None


def normalize_sql_date(value: Any) -> Optional[date]:
    """Normalize DATE values across drivers.

    SQLite hands back ``'YYYY-MM-DD'`` strings for text() queries, other drivers
    return ``datetime.date``.
    """

    if value is None:
        return None

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        return datetime.strptime(value.strip()[:10], "%Y-%m-%d").date()

    raise TypeError(f"Unsupported DATE value type: {type(value)!r}")


def normalize_sql_datetime(value: Any) -> Optional[datetime]:
    """Normalize DATETIME/TIMESTAMP values (``datetime`` or ``'YYYY-MM-DD HH:MM:SS'``)."""

    if value is None:
        return None

    if isinstance(value, datetime):
        return value

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    if isinstance(value, str):
        v = value.strip().replace("T", " ")
        for fmt in ("%Y-%m-%d %H:%M:%S.%f", "%Y-%m-%d %H:%M:%S", "%Y-%m-%d"):
            try:
                return datetime.strptime(v, fmt)
            except ValueError:
                continue
        raise ValueError(f"Invalid datetime string: {value!r}")

    raise TypeError(f"Unsupported DATETIME value type: {type(value)!r}")
