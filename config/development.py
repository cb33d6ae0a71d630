import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]

PORT = int(os.getenv("PORT", "3000"))
HOST = os.getenv("HOST", "127.0.0.1")

# Colocated SQLite file unless DATABASE_URL points elsewhere.
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE_DIR / 'prana.db'}")

FRONTEND_DIR = os.getenv("FRONTEND_DIR", str(BASE_DIR / "static"))

DEBUG = bool(int(os.getenv("DEBUG", "1")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Create tables on startup (CREATE IF NOT EXISTS semantics)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Insert the demo student/admin/activities when missing
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))

STRICT_ACTIVITY_UPDATES = bool(int(os.getenv("STRICT_ACTIVITY_UPDATES", "0")))
