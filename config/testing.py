import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]

PORT = 3000
HOST = "127.0.0.1"

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite://")

FRONTEND_DIR = str(BASE_DIR / "static")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = True
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

STRICT_ACTIVITY_UPDATES = False
