from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

import pytest

from prana_tracker.activities.model import Activity
from prana_tracker.activities.service import ActivityService
from prana_tracker.core.enums import ActivityStatus
from prana_tracker.core.exceptions import NotFoundError, ValidationError

TODAY = date(2026, 3, 1)


class InMemoryActivities:
    def __init__(self):
        self._rows: dict[int, Activity] = {}
        self._id = 0
        self._clock = datetime(2026, 3, 1, 5, 0, 0)
        self.last_list_args = None

    def list_for_scholar(self, scholar_id: str, *, on_date: Optional[date] = None):
        self.last_list_args = (scholar_id, on_date)
        day = on_date or TODAY
        items = [r for r in self._rows.values() if r.scholar_id == scholar_id and r.activity_date == day]
        items.sort(key=lambda r: (r.created_at, r.activity_id), reverse=True)
        return items

    def create_activity(self, *, scholar_id, activity_name, activity_time, status, activity_date=TODAY) -> int:
        self._id += 1
        self._clock += timedelta(minutes=1)
        self._rows[self._id] = Activity(
            activity_id=self._id,
            scholar_id=scholar_id,
            activity_name=activity_name,
            activity_time=activity_time,
            status=status,
            activity_date=activity_date,
            created_at=self._clock,
        )
        return self._id

    def update_status(self, *, activity_id: int, status: ActivityStatus) -> int:
        row = self._rows.get(activity_id)
        if not row:
            return 0
        self._rows[activity_id] = Activity(
            activity_id=row.activity_id,
            scholar_id=row.scholar_id,
            activity_name=row.activity_name,
            activity_time=row.activity_time,
            status=status,
            activity_date=row.activity_date,
            created_at=row.created_at,
        )
        return 1

    def get(self, activity_id: int) -> Activity:
        return self._rows[activity_id]


def test_create_defaults_status_to_pending():
    repo = InMemoryActivities()
    svc = ActivityService(repo)

    activity_id = svc.create_activity(scholar_id="23144003", activity_name="Yoga", activity_time="5:30 AM - 6:00 AM")

    assert repo.get(activity_id).status == ActivityStatus.PENDING


def test_create_requires_scholar_and_name():
    with pytest.raises(ValidationError, match="Scholar ID and activity name required"):
        ActivityService(InMemoryActivities()).create_activity(scholar_id="23144003", activity_name=" ")


def test_create_rejects_unknown_status():
    with pytest.raises(ValidationError, match="Invalid status"):
        ActivityService(InMemoryActivities()).create_activity(scholar_id="1", activity_name="Yoga", status="skipped")


def test_list_returns_newest_first_for_requested_day():
    repo = InMemoryActivities()
    svc = ActivityService(repo)
    svc.create_activity(scholar_id="1", activity_name="Morning Prayer")
    svc.create_activity(scholar_id="1", activity_name="Yoga")
    repo.create_activity(
        scholar_id="1", activity_name="Old", activity_time=None, status=ActivityStatus.PENDING, activity_date=date(2026, 2, 1)
    )
    svc.create_activity(scholar_id="2", activity_name="Other student")

    names = [a["activity_name"] for a in svc.list_activities("1")]

    assert names == ["Yoga", "Morning Prayer"]
    assert [a["activity_name"] for a in svc.list_activities("1", on_date=date(2026, 2, 1))] == ["Old"]


def test_list_empty_is_not_an_error():
    assert ActivityService(InMemoryActivities()).list_activities("nobody") == []


def test_list_forwards_date_filter():
    repo = InMemoryActivities()
    ActivityService(repo).list_activities(" 23144003 ", on_date=date(2026, 1, 5))

    assert repo.last_list_args == ("23144003", date(2026, 1, 5))


def test_list_rows_are_json_ready():
    repo = InMemoryActivities()
    svc = ActivityService(repo)
    svc.create_activity(scholar_id="1", activity_name="Yagya", activity_time="6:00 AM - 7:00 AM", status="completed")

    (row,) = svc.list_activities("1")

    assert row["status"] == "completed"
    assert row["date"] == "2026-03-01"
    assert row["created_at"] == "2026-03-01 05:01:00"


def test_update_status_overwrites():
    repo = InMemoryActivities()
    svc = ActivityService(repo)
    activity_id = svc.create_activity(scholar_id="1", activity_name="Yoga")

    assert svc.update_status(activity_id, "completed") == 1
    assert repo.get(activity_id).status == ActivityStatus.COMPLETED


def test_update_status_requires_status():
    with pytest.raises(ValidationError, match="Status required"):
        ActivityService(InMemoryActivities()).update_status(1, "")


def test_update_unknown_id_is_permissive_by_default():
    assert ActivityService(InMemoryActivities()).update_status(999, "completed") == 0


def test_update_unknown_id_raises_when_strict():
    svc = ActivityService(InMemoryActivities(), strict_updates=True)

    with pytest.raises(NotFoundError):
        svc.update_status(999, "completed")
