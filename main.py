"""Deployment wrapper for the review generation Cloud Function."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict

import flask
import functions_framework

project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.functions.review_generation.functions.main import GENERIC_FAILURE_MESSAGE, handle_request

logger = logging.getLogger(__name__)


@functions_framework.http
def review_generation_handler(request: flask.Request) -> flask.Response:
    """Generate reviews from a JSON ``summary`` or a multipart ``file`` upload."""

    if request.method == "OPTIONS":
        return _cors_response({}, status=204)

    if request.method == "GET":
        return _cors_response({"ok": True})

    if request.method != "POST":
        return _cors_response({"status": "error", "message": "Method not allowed. Use POST."}, status=405)

    try:
        upload = request.files.get("file")
        if upload is not None:
            payload: Dict[str, Any] = request.form.to_dict()
            body, status_code = handle_request(payload, document=upload.read())
        elif request.form and "summary" in request.form:
            body, status_code = handle_request(request.form.to_dict())
        else:
            payload = request.get_json(silent=True) or {}
            body, status_code = handle_request(payload)
        return _cors_response(body, status=status_code)
    except Exception:
        logger.exception("Unexpected error in review generation handler")
        return _cors_response({"status": "error", "message": GENERIC_FAILURE_MESSAGE}, status=500)


def _cors_response(body: Dict[str, Any] | list[Any], status: int = 200) -> flask.Response:
    response = flask.make_response(json.dumps(body, ensure_ascii=False), status)
    headers = response.headers
    headers["Content-Type"] = "application/json; charset=utf-8"
    headers["Access-Control-Allow-Origin"] = "*"
    headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
    headers["Access-Control-Allow-Headers"] = "Content-Type,Authorization"
    return response
