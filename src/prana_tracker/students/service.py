from __future__ import annotations

import logging
from typing import Any, Optional

from ..common.security import hash_password, verify_password
from ..common.validators import clean_text, optional_text, require_fields
from ..core.exceptions import AuthenticationError
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentAuthService:
    """Use cases: student login and self-registration."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def login(self, scholar_id: Any, password: Any) -> dict:
        """Return the public profile for matching credentials.

        Unknown scholar IDs and wrong passwords are indistinguishable to the caller.
        """
        require_fields("Scholar ID and password required", scholar_id, password)
        scholar_id = clean_text(scholar_id)

        student = self._students.get_by_scholar_id(scholar_id)
        if not student or not verify_password(student.password_hash, str(password)):
            logger.info("Failed student login for scholar_id=%s", scholar_id)
            raise AuthenticationError("Invalid credentials")

        return student.public_profile()

    def register(
        self,
        *,
        scholar_id: Any,
        name: Any,
        password: Any,
        hostel: Optional[Any] = None,
        email: Optional[Any] = None,
    ) -> int:
        require_fields("Scholar ID, name, and password required", scholar_id, name, password)

        student_id = self._students.create_student(
            scholar_id=clean_text(scholar_id),
            name=clean_text(name),
            password_hash=hash_password(str(password)),
            hostel=optional_text(hostel),
            email=optional_text(email),
        )
        logger.info("Registered student scholar_id=%s", clean_text(scholar_id))
        return student_id
