from __future__ import annotations

import os

from flask import Flask, abort, send_from_directory
from werkzeug.security import safe_join


def _is_served_file(directory: str, path: str) -> bool:
    # Unsafe joins come back as None; paths the OS rejects (NUL bytes) read as missing.
    candidate = safe_join(directory, path)
    return candidate is not None and os.path.isfile(candidate)


def register(app: Flask) -> None:
    frontend_dir = str(app.config["FRONTEND_DIR"])

    @app.route("/", defaults={"path": ""}, methods=["GET"], endpoint="frontend")
    @app.route("/<path:path>", methods=["GET"], endpoint="frontend_path")
    def frontend(path: str):
        if path == "api" or path.startswith("api/"):
            abort(404)

        if path and _is_served_file(frontend_dir, path):
            return send_from_directory(frontend_dir, path)

        if not _is_served_file(frontend_dir, "index.html"):
            abort(404)
        return send_from_directory(frontend_dir, "index.html")
