import os
from pathlib import Path

import pytest


@pytest.fixture()
def root(tmp_path: Path) -> Path:
    """Sandbox root with a small tree: docs/, a.txt (5 bytes), and a sibling outside the root."""
    root_dir = tmp_path / "files"
    root_dir.mkdir()
    (root_dir / "docs").mkdir()
    (root_dir / "a.txt").write_text("hello")
    (tmp_path / "outside").mkdir()
    (tmp_path / "outside" / "secret.txt").write_text("secret")
    return Path(os.path.realpath(root_dir))


@pytest.fixture()
def file_service(root):
    from filebrowser.services.file_service import FileService
    return FileService(str(root))


# --- Flask app + test client fixtures ---
@pytest.fixture()
def app(root):
    """Provide a Flask app serving the temporary root."""
    from filebrowser import create_app
    application = create_app("testing", root_dir=str(root))
    ctx = application.app_context()
    ctx.push()
    try:
        yield application
    finally:
        ctx.pop()


@pytest.fixture()
def client(app):
    """Flask test client."""
    return app.test_client()
