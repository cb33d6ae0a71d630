from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container
from ..core.exceptions import AuthenticationError, StorageError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/login", methods=["POST"], endpoint="admin_login")
    def admin_login():
        data = json_body()
        try:
            admin = container.admin_auth_service.login(data.get("email"), data.get("password"))
            return jsonify({"success": True, "admin": admin})
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except AuthenticationError as e:
            return jsonify({"error": str(e)}), 401
        except StorageError as e:
            return jsonify({"error": str(e)}), 500
