from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from sqlalchemy.exc import IntegrityError

from ..core.exceptions import ConflictError
from ..database.base import db_session, execute, fetchall, fetchone, normalize_sql_datetime
from ..database.connection import DatabaseConnection
from .model import Student
from .repository import StudentRepository


def _to_student(r: Dict[str, Any]) -> Student:
    return Student(
        student_id=int(r["id"]),
        scholar_id=str(r["scholar_id"]),
        name=r["name"],
        password_hash=r["password_hash"],
        hostel=r.get("hostel"),
        email=r.get("email"),
        created_at=normalize_sql_datetime(r.get("created_at")),
    )


class SQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_scholar_id(self, scholar_id: str) -> Optional[Student]:
        with db_session(self._conn_factory) as conn:
            r = fetchone(
                execute(
                    conn,
                    """
                    SELECT id, scholar_id, name, password_hash, hostel, email, created_at
                    FROM students
                    WHERE scholar_id = :scholar_id
                    """,
                    {"scholar_id": scholar_id},
                )
            )
            return _to_student(r) if r else None

    def create_student(
        self,
        *,
        scholar_id: str,
        name: str,
        password_hash: str,
        hostel: Optional[str],
        email: Optional[str],
    ) -> int:
        try:
            with db_session(self._conn_factory) as conn:
                result = execute(
                    conn,
                    """
                    INSERT INTO students (scholar_id, name, password_hash, hostel, email)
                    VALUES (:scholar_id, :name, :password_hash, :hostel, :email)
                    """,
                    {
                        "scholar_id": scholar_id,
                        "name": name,
                        "password_hash": password_hash,
                        "hostel": hostel,
                        "email": email,
                    },
                )
                return int(result.lastrowid)
        except IntegrityError as e:
            # Only the scholar_id UNIQUE constraint can reject a fully validated row.
            raise ConflictError("Scholar ID already exists") from e

    def list_all(self) -> Sequence[Student]:
        with db_session(self._conn_factory) as conn:
            rows = fetchall(
                execute(
                    conn,
                    """
                    SELECT id, scholar_id, name, password_hash, hostel, email, created_at
                    FROM students
                    ORDER BY created_at DESC, id DESC
                    """,
                )
            )
            return [_to_student(r) for r in rows]
