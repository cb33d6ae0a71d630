from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_optional_date
from ..common.http import json_body
from ..container import Container
from ..core.exceptions import StorageError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/health/<scholar_id>", methods=["GET"], endpoint="get_health")
    def get_health(scholar_id: str):
        try:
            on_date = parse_optional_date(request.args.get("date"))
            return jsonify({"health": container.health_service.get_health(scholar_id, on_date=on_date)})
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except StorageError as e:
            return jsonify({"error": str(e)}), 500

    @app.route("/api/health", methods=["POST"], endpoint="upsert_health")
    def upsert_health():
        data = json_body()
        try:
            result = container.health_service.upsert_health(
                scholar_id=data.get("scholar_id"),
                status=data.get("status"),
                notes=data.get("notes"),
            )
            if result.created:
                return jsonify({"success": True, "id": result.health_id})
            return jsonify({"success": True, "message": "Health status updated"})
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except StorageError as e:
            return jsonify({"error": str(e)}), 500
