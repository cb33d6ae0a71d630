from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container
from ..core.exceptions import AuthenticationError, ConflictError, StorageError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/student/login", methods=["POST"], endpoint="student_login")
    def student_login():
        data = json_body()
        try:
            student = container.student_auth_service.login(data.get("scholar_id"), data.get("password"))
            return jsonify({"success": True, "student": student})
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except AuthenticationError as e:
            return jsonify({"error": str(e)}), 401
        except StorageError as e:
            return jsonify({"error": str(e)}), 500

    @app.route("/api/student/register", methods=["POST"], endpoint="student_register")
    def student_register():
        data = json_body()
        try:
            container.student_auth_service.register(
                scholar_id=data.get("scholar_id"),
                name=data.get("name"),
                password=data.get("password"),
                hostel=data.get("hostel"),
                email=data.get("email"),
            )
            return jsonify({"success": True, "message": "Student registered successfully"})
        except (ValidationError, ConflictError) as e:
            return jsonify({"error": str(e)}), 400
        except StorageError as e:
            return jsonify({"error": str(e)}), 500
