from __future__ import annotations

import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .activities.controller import register as register_activities
from .admins.controller import register as register_admins
from .container import build_container
from .core.constants import DEFAULT_PORT, DEMO_ADMIN, DEMO_STUDENT
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import apply_schema, ensure_demo_data, list_tables
from .frontend.controller import register as register_frontend
from .health.controller import register as register_health
from .students.controller import register as register_students

logger = logging.getLogger(__name__)

SETTINGS_KEYS = (
    "PORT",
    "HOST",
    "DATABASE_URL",
    "FRONTEND_DIR",
    "DEBUG",
    "TESTING",
    "LOG_LEVEL",
    "AUTO_INIT_DB",
    "AUTO_SEED_DB",
    "STRICT_ACTIVITY_UPDATES",
)


def load_settings(overrides: Optional[Mapping[str, Any]] = None) -> dict:
    load_dotenv(override=False)
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    values = {key: getattr(settings, key) for key in SETTINGS_KEYS if hasattr(settings, key)}
    values["SETTINGS_MODULE"] = settings_module
    values.update(overrides or {})
    return values


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception):
        logger.exception("Unhandled error: %s", e)
        return jsonify({"error": "Internal server error"}), 500


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    settings = load_settings(overrides)

    app = Flask(__name__, static_folder=None)
    app.config.update(settings)
    app.json.sort_keys = False

    container = build_container(
        database_url=settings["DATABASE_URL"],
        strict_activity_updates=bool(settings.get("STRICT_ACTIVITY_UPDATES", False)),
    )
    app.extensions["prana_container"] = container

    logger.info("Starting with settings=%s db=%s", settings["SETTINGS_MODULE"], container.conn.url)

    if settings.get("AUTO_INIT_DB", True):
        apply_schema(container.conn)
        logger.info("Schema ready (tables=%s)", ", ".join(list_tables(container.conn)))
    if settings.get("AUTO_SEED_DB", False):
        ensure_demo_data(container.conn)
        if settings.get("DEBUG"):
            logger.info(
                "Default credentials - Student: %s / %s, Admin: %s / %s",
                DEMO_STUDENT["scholar_id"],
                DEMO_STUDENT["password"],
                DEMO_ADMIN["email"],
                DEMO_ADMIN["password"],
            )

    register_students(app, container)
    register_admins(app, container)
    register_activities(app, container)
    register_health(app, container)
    register_dashboard(app, container)
    register_frontend(app)
    register_error_handlers(app)

    return app


def run() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, str(settings.get("LOG_LEVEL", "INFO")).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = create_app()
    port = int(app.config.get("PORT") or DEFAULT_PORT)
    logger.info("PRANA server running on http://%s:%s", app.config.get("HOST", "127.0.0.1"), port)
    app.run(host=app.config.get("HOST", "127.0.0.1"), port=port, debug=bool(app.config.get("DEBUG")))
