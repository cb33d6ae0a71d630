from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_optional_date
from ..common.http import json_body
from ..container import Container
from ..core.exceptions import NotFoundError, StorageError, ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/activities/<scholar_id>", methods=["GET"], endpoint="list_activities")
    def list_activities(scholar_id: str):
        try:
            on_date = parse_optional_date(request.args.get("date"))
            activities = container.activity_service.list_activities(scholar_id, on_date=on_date)
            return jsonify({"activities": activities})
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except StorageError as e:
            return jsonify({"error": str(e)}), 500

    @app.route("/api/activities", methods=["POST"], endpoint="create_activity")
    def create_activity():
        data = json_body()
        try:
            activity_id = container.activity_service.create_activity(
                scholar_id=data.get("scholar_id"),
                activity_name=data.get("activity_name"),
                activity_time=data.get("activity_time"),
                status=data.get("status"),
            )
            return jsonify({"success": True, "id": activity_id})
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except StorageError as e:
            return jsonify({"error": str(e)}), 500

    @app.route("/api/activities/<int:activity_id>", methods=["PUT"], endpoint="update_activity")
    def update_activity(activity_id: int):
        data = json_body()
        try:
            container.activity_service.update_status(activity_id, data.get("status"))
            return jsonify({"success": True, "message": "Activity updated"})
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except StorageError as e:
            return jsonify({"error": str(e)}), 500
