from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import isoformat_or_none


@dataclass(frozen=True)
class Student:
    """Domain entity: a student, keyed for the business by ``scholar_id``.

    Note: Plain data object (no DB access). ``password_hash`` never leaves the service layer.
    """

    student_id: int
    scholar_id: str
    name: str
    password_hash: str
    hostel: Optional[str]
    email: Optional[str]
    created_at: Optional[datetime] = None

    def public_profile(self) -> dict:
        return {
            "scholar_id": self.scholar_id,
            "name": self.name,
            "hostel": self.hostel,
            "email": self.email,
        }

    def admin_view(self) -> dict:
        return {
            "id": self.student_id,
            "scholar_id": self.scholar_id,
            "name": self.name,
            "hostel": self.hostel,
            "email": self.email,
            "created_at": isoformat_or_none(self.created_at),
        }
