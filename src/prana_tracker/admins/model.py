from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Admin:
    """Domain entity: an administrator. Provisioned only by the seed initializer."""

    admin_id: int
    email: str
    password_hash: str
    name: Optional[str]
    created_at: Optional[datetime] = None

    def public_profile(self) -> dict:
        return {"id": self.admin_id, "email": self.email, "name": self.name}
