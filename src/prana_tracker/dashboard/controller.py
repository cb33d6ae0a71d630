from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..core.exceptions import StorageError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/stats", methods=["GET"], endpoint="admin_stats")
    def admin_stats():
        try:
            return jsonify(container.dashboard_service.get_stats().to_dict())
        except StorageError as e:
            return jsonify({"error": str(e)}), 500

    @app.route("/api/admin/activities", methods=["GET"], endpoint="admin_activities")
    def admin_activities():
        try:
            return jsonify({"activities": container.dashboard_service.list_today_activities()})
        except StorageError as e:
            return jsonify({"error": str(e)}), 500

    @app.route("/api/admin/students", methods=["GET"], endpoint="admin_students")
    def admin_students():
        try:
            return jsonify({"students": container.dashboard_service.list_students()})
        except StorageError as e:
            return jsonify({"error": str(e)}), 500
