"""
API routes for listing directories and creating folders.
"""
from typing import Optional

from flask import Blueprint, Response, request, current_app

from ..services import response_encoder

api_bp = Blueprint("api", __name__)

ACTION_REQUEST_FILELIST = "requestFilelist"
ACTION_REQUEST_NEW_FOLDER = "requestNewFolder"


def _json_response(body: str, status: int = 200) -> Response:
    return Response(body, status=status, mimetype="application/json")


def _requested_path(data) -> Optional[str]:
    """Pull the "path" string out of a request body, None if it is malformed."""
    if not isinstance(data, dict):
        return None
    path = data.get("path", "")
    return path if isinstance(path, str) else None


@api_bp.route("/filelist", methods=["POST"])
def filelist():
    """List a directory below the root."""
    path = _requested_path(request.get_json(silent=True))
    if path is None:
        return _json_response(response_encoder.encode_error("Invalid request."), 400)

    return _json_response(current_app.file_service.filelist_response(path))


@api_bp.route("/new-folder", methods=["POST"])
def new_folder():
    """Create a new folder below the root."""
    path = _requested_path(request.get_json(silent=True))
    if path is None:
        return _json_response(response_encoder.encode_error("Invalid request."), 400)

    return _json_response(current_app.file_service.new_folder_response(path))


@api_bp.route("/message", methods=["POST"])
def message():
    """Dispatch a message envelope of the form {"action": ..., "path": ...}."""
    file_service = current_app.file_service

    data = request.get_json(silent=True)
    path = _requested_path(data)
    if path is None:
        return _json_response(response_encoder.encode_error("Invalid request."), 400)

    action = data.get("action")
    if action == ACTION_REQUEST_FILELIST:
        return _json_response(file_service.filelist_response(path))
    elif action == ACTION_REQUEST_NEW_FOLDER:
        return _json_response(file_service.new_folder_response(path))
    else:
        print(f"Warning: unknown message action {action!r}")
        return _json_response(response_encoder.encode_error(f"Unknown action: {action}"), 400)
