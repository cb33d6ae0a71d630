from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from prana_tracker.database.bootstrap import apply_schema, list_tables
from prana_tracker.database.connection import DBConfig, DatabaseConnection
from prana_tracker.main import load_settings


def main() -> None:
    settings = load_settings()
    conn = DatabaseConnection(DBConfig(url=settings["DATABASE_URL"]))

    apply_schema(conn)
    tables = list_tables(conn)
    print(f"OK: Schema ready -> {conn.url} (tables={', '.join(tables)})")


if __name__ == "__main__":
    main()
