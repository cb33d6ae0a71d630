from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional

from ..common.validators import clean_text, is_blank, optional_text, parse_activity_status, require_fields
from ..core.enums import ActivityStatus
from ..core.exceptions import NotFoundError
from .repository import ActivityRepository

logger = logging.getLogger(__name__)


class ActivityService:
    """Use cases: list, create and tick off a student's daily activities."""

    def __init__(self, activities: ActivityRepository, *, strict_updates: bool = False):
        self._activities = activities
        self._strict_updates = bool(strict_updates)

    def list_activities(self, scholar_id: str, *, on_date: Optional[date] = None) -> list[dict]:
        """All activities for the day (server's today by default), newest first. Never raises on empty."""
        rows = self._activities.list_for_scholar(clean_text(scholar_id), on_date=on_date)
        return [r.to_dict() for r in rows]

    def create_activity(
        self,
        *,
        scholar_id: Any,
        activity_name: Any,
        activity_time: Optional[Any] = None,
        status: Optional[Any] = None,
    ) -> int:
        require_fields("Scholar ID and activity name required", scholar_id, activity_name)
        status_value = ActivityStatus.PENDING if is_blank(status) else parse_activity_status(status)

        return self._activities.create_activity(
            scholar_id=clean_text(scholar_id),
            activity_name=clean_text(activity_name),
            activity_time=optional_text(activity_time),
            status=status_value,
        )

    def update_status(self, activity_id: int, status: Any) -> int:
        """Overwrite an activity's status.

        Updating an unknown id succeeds with zero affected rows unless strict updates
        are enabled, in which case it raises NotFoundError.
        """
        require_fields("Status required", status)
        status_value = parse_activity_status(status)

        changed = self._activities.update_status(activity_id=int(activity_id), status=status_value)
        if changed == 0:
            if self._strict_updates:
                raise NotFoundError("Activity not found")
            logger.warning("Status update for unknown activity id=%s matched no rows", activity_id)
        return changed
