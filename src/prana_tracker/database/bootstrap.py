from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from ..common.security import hash_password
from ..core.constants import DEMO_ACTIVITIES, DEMO_ADMIN, DEMO_STUDENT
from ..core.exceptions import StorageError
from .base import db_session, execute, fetchone, fetchscalar
from .connection import DatabaseConnection
from .schema import metadata

logger = logging.getLogger(__name__)


@dataclass
class SeedReport:
    student_created: bool = False
    admin_created: bool = False
    activities_created: int = 0
    notes: list[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.student_created or self.admin_created or self.activities_created > 0


def apply_schema(conn_factory: DatabaseConnection) -> None:
    """Create all tables that do not exist yet. Existing tables and rows are untouched."""
    try:
        metadata.create_all(conn_factory.engine, checkfirst=True)
    except SQLAlchemyError as e:
        logger.error("Schema creation failed: %s", e, exc_info=True)
        raise StorageError() from e


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    try:
        return sorted(inspect(conn_factory.engine).get_table_names())
    except SQLAlchemyError as e:
        raise StorageError() from e


def ensure_demo_data(conn_factory: DatabaseConnection) -> SeedReport:
    """Insert the demo student, demo admin and demo activities when missing.

    Safe to run on every startup: each row is looked up by its business key first,
    and activities are only seeded into a completely empty table.
    """
    report = SeedReport()

    with db_session(conn_factory) as conn:
        existing = fetchone(
            execute(conn, "SELECT id FROM students WHERE scholar_id = :scholar_id", {"scholar_id": DEMO_STUDENT["scholar_id"]})
        )
        if not existing:
            execute(
                conn,
                """
                INSERT INTO students (scholar_id, name, password_hash, hostel, email)
                VALUES (:scholar_id, :name, :password_hash, :hostel, :email)
                """,
                {
                    "scholar_id": DEMO_STUDENT["scholar_id"],
                    "name": DEMO_STUDENT["name"],
                    "password_hash": hash_password(DEMO_STUDENT["password"]),
                    "hostel": DEMO_STUDENT["hostel"],
                    "email": DEMO_STUDENT["email"],
                },
            )
            report.student_created = True

        existing = fetchone(execute(conn, "SELECT id FROM admins WHERE email = :email", {"email": DEMO_ADMIN["email"]}))
        if not existing:
            execute(
                conn,
                "INSERT INTO admins (email, password_hash, name) VALUES (:email, :password_hash, :name)",
                {
                    "email": DEMO_ADMIN["email"],
                    "password_hash": hash_password(DEMO_ADMIN["password"]),
                    "name": DEMO_ADMIN["name"],
                },
            )
            report.admin_created = True

        if fetchscalar(execute(conn, "SELECT COUNT(*) FROM activities")) == 0:
            execute(
                conn,
                """
                INSERT INTO activities (scholar_id, activity_name, activity_time, status)
                VALUES (:scholar_id, :activity_name, :activity_time, :status)
                """,
                [
                    {
                        "scholar_id": DEMO_STUDENT["scholar_id"],
                        "activity_name": name,
                        "activity_time": time_range,
                        "status": status,
                    }
                    for name, time_range, status in DEMO_ACTIVITIES
                ],
            )
            report.activities_created = len(DEMO_ACTIVITIES)

    if report.student_created:
        report.notes.append(f"student {DEMO_STUDENT['scholar_id']}")
    if report.admin_created:
        report.notes.append(f"admin {DEMO_ADMIN['email']}")
    if report.activities_created:
        report.notes.append(f"{report.activities_created} activities")

    if report.changed:
        logger.info("Seeded demo data: %s", ", ".join(report.notes))
    else:
        logger.debug("Demo data already present, nothing seeded")
    return report
