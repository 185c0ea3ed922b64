"""
Main routes for serving files from the root directory.
"""
import os

from flask import Blueprint, Response, abort, send_from_directory, current_app

from ..exceptions import PathSecurityError
from ..utils.path_utils import normalize_path_display

main_bp = Blueprint("main", __name__)


@main_bp.route("/", defaults={"path": ""})
@main_bp.route("/<path:path>")
def serve(path):
    """Serve a file, or the listing message when the path is a directory."""
    file_service = current_app.file_service

    try:
        abs_path = file_service.resolve(path)
    except PathSecurityError:
        abort(404)

    if os.path.isdir(abs_path):
        return Response(file_service.filelist_response(path), mimetype="application/json")

    rel_path = os.path.relpath(abs_path, file_service.root_dir)
    return send_from_directory(file_service.root_dir, normalize_path_display(rel_path))
