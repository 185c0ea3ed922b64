"""
Flask application factory for the file browser.
"""
from flask import Flask, Response
from werkzeug.exceptions import HTTPException

from .config import get_config
from .services.file_service import FileService
from .services import response_encoder
from .routes import register_blueprints


def create_app(config_name: str = None, root_dir: str = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: Configuration name (development, production, testing)
        root_dir: Serve this directory instead of the configured ROOT_DIR

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)

    #load configuration
    config = get_config(config_name)
    if root_dir is not None:
        config = config.with_root(root_dir)
    app.config.from_object(config)

    #store config object for easy access
    app.config_obj = config

    # Ensure the root exists before it is canonicalized
    config.ensure_directories()

    # Initialize services
    _init_services(app, config)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    _register_error_handlers(app)

    # Log startup information
    _log_startup_info(app, config)

    return app


def _init_services(app: Flask, config) -> None:
    """Initialize application services."""
    app.file_service = FileService(
        root_dir=config.canonical_root(),
        simple_icons=config.SIMPLE_ICONS
    )


def _register_error_handlers(app: Flask) -> None:
    """Register error handlers; every HTTP error becomes a sendError message."""

    @app.errorhandler(HTTPException)
    def http_error(e):
        return Response(
            response_encoder.encode_error(e.description or e.name),
            status=e.code,
            mimetype="application/json"
        )


def _log_startup_info(app: Flask, config) -> None:
    """Log startup information."""
    print("-" * 50)
    print("Starting File Browser...")
    print(f"Serving files from: {app.file_service.root_dir}")
    print(f"Simple icons: {'Yes' if config.SIMPLE_ICONS else 'No'}")
    print("-" * 50)
