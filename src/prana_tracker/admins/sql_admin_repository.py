from __future__ import annotations

from typing import Optional

from ..database.base import db_session, execute, fetchone, normalize_sql_datetime
from ..database.connection import DatabaseConnection
from .model import Admin
from .repository import AdminRepository


class SQLAdminRepository(AdminRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_email(self, email: str) -> Optional[Admin]:
        with db_session(self._conn_factory) as conn:
            r = fetchone(
                execute(
                    conn,
                    """
                    SELECT id, email, password_hash, name, created_at
                    FROM admins
                    WHERE email = :email
                    """,
                    {"email": email},
                )
            )
            if not r:
                return None
            return Admin(
                admin_id=int(r["id"]),
                email=r["email"],
                password_hash=r["password_hash"],
                name=r.get("name"),
                created_at=normalize_sql_datetime(r.get("created_at")),
            )
