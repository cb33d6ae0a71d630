from __future__ import annotations

import logging
from typing import Any

from ..common.security import verify_password
from ..common.validators import clean_text, require_fields
from ..core.exceptions import AuthenticationError
from .repository import AdminRepository

logger = logging.getLogger(__name__)


class AdminAuthService:
    """Use case: administrator login. There is no admin registration."""

    def __init__(self, admins: AdminRepository):
        self._admins = admins

    def login(self, email: Any, password: Any) -> dict:
        require_fields("Email and password required", email, password)
        email = clean_text(email)

        admin = self._admins.get_by_email(email)
        if not admin or not verify_password(admin.password_hash, str(password)):
            logger.info("Failed admin login for email=%s", email)
            raise AuthenticationError("Invalid credentials")

        return admin.public_profile()
