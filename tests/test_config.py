"""Tests for configuration loading."""
import os

from filebrowser import create_app
from filebrowser.config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, get_config


def test_get_config_by_name():
    assert get_config("production") is ProductionConfig
    assert get_config("testing") is TestingConfig
    assert get_config("unknown") is DevelopmentConfig


def test_with_root_overrides_only_root(tmp_path):
    derived = ProductionConfig.with_root(str(tmp_path))
    assert derived.ROOT_DIR == str(tmp_path)
    assert derived.DEBUG is False
    assert ProductionConfig.ROOT_DIR == Config.ROOT_DIR


def test_canonical_root_resolves_parent_segments(tmp_path):
    (tmp_path / "a").mkdir()
    derived = Config.with_root(str(tmp_path / "a" / ".."))
    assert derived.canonical_root() == os.path.realpath(tmp_path)


def test_create_app_creates_and_canonicalizes_root(tmp_path):
    root = tmp_path / "new-root"
    app = create_app("testing", root_dir=str(root))

    assert root.is_dir()
    assert app.file_service.root_dir == os.path.realpath(root)
    assert app.config["TESTING"] is True
