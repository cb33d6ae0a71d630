from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Repository interface for Student.

    Services depend on this interface, not on a concrete database.
    """

    def get_by_scholar_id(self, scholar_id: str) -> Optional[Student]:
        raise NotImplementedError

    def create_student(
        self,
        *,
        scholar_id: str,
        name: str,
        password_hash: str,
        hostel: Optional[str],
        email: Optional[str],
    ) -> int:
        """Insert a student; raises ConflictError when the scholar ID is taken."""

        raise NotImplementedError

    def list_all(self) -> Sequence[Student]:
        """All students, newest first."""

        raise NotImplementedError
