from __future__ import annotations

from flask import request


def json_body() -> dict:
    """Request body as a dict; missing, malformed or non-object JSON reads as ``{}``."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return {}
    return data
