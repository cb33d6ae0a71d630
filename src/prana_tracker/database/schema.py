from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)

metadata = MetaData()

students = Table(
    "students",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("scholar_id", String(32), unique=True, nullable=False),
    Column("name", String(120), nullable=False),
    Column("password_hash", String(255), nullable=False),
    Column("hostel", String(120)),
    Column("email", String(255)),
    Column("created_at", DateTime, server_default=text("CURRENT_TIMESTAMP")),
    sqlite_autoincrement=True,
)

activities = Table(
    "activities",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("scholar_id", String(32), ForeignKey("students.scholar_id"), nullable=False),
    Column("activity_name", String(120), nullable=False),
    # Free-text range, e.g. "5:00 AM - 5:30 AM"
    Column("activity_time", String(64)),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("date", Date, server_default=text("CURRENT_DATE")),
    Column("created_at", DateTime, server_default=text("CURRENT_TIMESTAMP")),
    CheckConstraint("status IN ('pending', 'completed')", name="ck_activities_status"),
    sqlite_autoincrement=True,
)

health_status = Table(
    "health_status",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("scholar_id", String(32), ForeignKey("students.scholar_id"), nullable=False),
    Column("status", String(64), nullable=False),
    Column("notes", Text),
    Column("date", Date, server_default=text("CURRENT_DATE")),
    Column("created_at", DateTime, server_default=text("CURRENT_TIMESTAMP")),
    # One row per scholar per day; the upsert relies on this constraint.
    UniqueConstraint("scholar_id", "date", name="uq_health_status_scholar_date"),
    sqlite_autoincrement=True,
)

admins = Table(
    "admins",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("email", String(255), unique=True, nullable=False),
    Column("password_hash", String(255), nullable=False),
    Column("name", String(120)),
    Column("created_at", DateTime, server_default=text("CURRENT_TIMESTAMP")),
    sqlite_autoincrement=True,
)
