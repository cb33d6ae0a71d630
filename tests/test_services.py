from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import pytest

from prana_tracker.admins.model import Admin
from prana_tracker.admins.service import AdminAuthService
from prana_tracker.common.security import hash_password
from prana_tracker.core.exceptions import AuthenticationError, ConflictError, ValidationError
from prana_tracker.students.model import Student
from prana_tracker.students.service import StudentAuthService


@dataclass
class InMemoryStudents:
    by_scholar_id: dict[str, Student] = field(default_factory=dict)

    def get_by_scholar_id(self, scholar_id: str) -> Optional[Student]:
        return self.by_scholar_id.get(scholar_id)

    def create_student(self, *, scholar_id, name, password_hash, hostel, email) -> int:
        if scholar_id in self.by_scholar_id:
            raise ConflictError("Scholar ID already exists")
        student_id = len(self.by_scholar_id) + 1
        self.by_scholar_id[scholar_id] = Student(
            student_id=student_id,
            scholar_id=scholar_id,
            name=name,
            password_hash=password_hash,
            hostel=hostel,
            email=email,
        )
        return student_id

    def list_all(self):
        return sorted(self.by_scholar_id.values(), key=lambda s: s.student_id, reverse=True)


@dataclass
class InMemoryAdmins:
    by_email: dict[str, Admin]

    def get_by_email(self, email: str) -> Optional[Admin]:
        return self.by_email.get(email)


def test_register_then_login_returns_same_profile():
    svc = StudentAuthService(InMemoryStudents())

    svc.register(scholar_id="24100001", name="Meera", password="s3cret", hostel="Gargi", email="meera@dsvv.ac.in")
    student = svc.login("24100001", "s3cret")

    assert student == {
        "scholar_id": "24100001",
        "name": "Meera",
        "hostel": "Gargi",
        "email": "meera@dsvv.ac.in",
    }
    assert "password" not in student and "password_hash" not in student


def test_register_stores_hash_not_plaintext():
    repo = InMemoryStudents()
    StudentAuthService(repo).register(scholar_id="1", name="A", password="plain")

    assert repo.by_scholar_id["1"].password_hash != "plain"


def test_register_optional_fields_default_to_none():
    svc = StudentAuthService(InMemoryStudents())
    svc.register(scholar_id="2", name="B", password="pw", hostel="  ", email=None)

    assert svc.login("2", "pw") == {"scholar_id": "2", "name": "B", "hostel": None, "email": None}


def test_register_duplicate_scholar_id_conflicts_and_keeps_original():
    repo = InMemoryStudents()
    svc = StudentAuthService(repo)
    svc.register(scholar_id="3", name="Original", password="pw")

    with pytest.raises(ConflictError):
        svc.register(scholar_id="3", name="Impostor", password="other")

    assert repo.by_scholar_id["3"].name == "Original"
    assert svc.login("3", "pw")["name"] == "Original"


@pytest.mark.parametrize(
    "payload",
    [
        {"scholar_id": "", "name": "A", "password": "pw"},
        {"scholar_id": "4", "name": None, "password": "pw"},
        {"scholar_id": "4", "name": "A", "password": ""},
    ],
)
def test_register_requires_fields(payload):
    with pytest.raises(ValidationError, match="Scholar ID, name, and password required"):
        StudentAuthService(InMemoryStudents()).register(**payload)


def test_student_login_wrong_password_raises():
    svc = StudentAuthService(InMemoryStudents())
    svc.register(scholar_id="5", name="A", password="right")

    with pytest.raises(AuthenticationError, match="Invalid credentials"):
        svc.login("5", "wrong")


def test_student_login_unknown_scholar_raises():
    with pytest.raises(AuthenticationError):
        StudentAuthService(InMemoryStudents()).login("nobody", "pw")


def test_student_login_requires_both_fields():
    with pytest.raises(ValidationError, match="Scholar ID and password required"):
        StudentAuthService(InMemoryStudents()).login("5", None)


def test_student_login_accepts_numeric_scholar_id():
    svc = StudentAuthService(InMemoryStudents())
    svc.register(scholar_id=23144099, name="Num", password="pw")

    assert svc.login("23144099", "pw")["scholar_id"] == "23144099"


def test_admin_login_returns_public_projection():
    admin = Admin(admin_id=7, email="admin@prana.com", password_hash=hash_password("admin123"), name="Admin User")
    svc = AdminAuthService(InMemoryAdmins({admin.email: admin}))

    assert svc.login("admin@prana.com", "admin123") == {"id": 7, "email": "admin@prana.com", "name": "Admin User"}


def test_admin_login_wrong_password_raises():
    admin = Admin(admin_id=1, email="a@b.c", password_hash=hash_password("right"), name=None)
    svc = AdminAuthService(InMemoryAdmins({admin.email: admin}))

    with pytest.raises(AuthenticationError):
        svc.login("a@b.c", "wrong")


def test_admin_login_with_legacy_plaintext_value_is_rejected():
    admin = Admin(admin_id=1, email="a@b.c", password_hash="admin123", name=None)
    svc = AdminAuthService(InMemoryAdmins({admin.email: admin}))

    with pytest.raises(AuthenticationError):
        svc.login("a@b.c", "admin123")


def test_admin_login_requires_fields():
    with pytest.raises(ValidationError, match="Email and password required"):
        AdminAuthService(InMemoryAdmins({})).login("", "pw")


@pytest.mark.parametrize("password", [False, 0, [], {}])
def test_student_login_treats_falsy_password_as_missing(password):
    with pytest.raises(ValidationError, match="Scholar ID and password required"):
        StudentAuthService(InMemoryStudents()).login("5", password)


def test_register_rejects_falsy_name():
    with pytest.raises(ValidationError, match="Scholar ID, name, and password required"):
        StudentAuthService(InMemoryStudents()).register(scholar_id="6", name=False, password="pw")
