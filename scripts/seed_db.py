from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from prana_tracker.database.bootstrap import apply_schema, ensure_demo_data
from prana_tracker.database.connection import DBConfig, DatabaseConnection
from prana_tracker.main import load_settings


def main() -> None:
    settings = load_settings()
    conn = DatabaseConnection(DBConfig(url=settings["DATABASE_URL"]))

    apply_schema(conn)
    report = ensure_demo_data(conn)

    if report.changed:
        print(f"OK: Seeded {conn.url} -> {', '.join(report.notes)}")
    else:
        print(f"OK: {conn.url} already has demo data, nothing inserted")


if __name__ == "__main__":
    main()
