"""Tests for path sanitizing and secure joining."""
import os
import sys

import pytest

from filebrowser.exceptions import PathSecurityError
from filebrowser.utils.path_utils import check_path_safety, fix_path, secure_join, split_parent


def test_fix_path():
    path = "some/windows/path.txt"
    if os.name == "nt":
        assert fix_path(path) == r"some\windows\path.txt"
    else:
        assert fix_path(path) == "some/windows/path.txt"


def test_fix_path_keeps_parent_segments():
    assert ".." in fix_path("a/../../b")


def test_secure_join_inside_root(root):
    result = secure_join(str(root), "docs")
    assert result == str(root / "docs")


def test_secure_join_is_idempotent(root):
    assert secure_join(str(root), "docs") == secure_join(str(root), "docs")


def test_secure_join_empty_path_is_root(root):
    assert secure_join(str(root), "") == str(root)


def test_secure_join_leading_slash_stays_in_root(root):
    assert secure_join(str(root), "/docs") == str(root / "docs")


def test_secure_join_resolves_inner_parent_segments(root):
    assert secure_join(str(root), "docs/../a.txt") == str(root / "a.txt")


@pytest.mark.parametrize("relative", ["..", "../outside", "docs/../../outside", "../outside/secret.txt"])
def test_secure_join_rejects_traversal(root, relative):
    with pytest.raises(PathSecurityError):
        secure_join(str(root), relative)


def test_secure_join_rejects_missing_path(root):
    with pytest.raises(PathSecurityError):
        secure_join(str(root), "does-not-exist")


@pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")
def test_secure_join_rejects_symlink_escape(root):
    os.symlink(str(root.parent / "outside"), str(root / "escape"))
    with pytest.raises(PathSecurityError):
        secure_join(str(root), "escape")


@pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")
def test_secure_join_allows_symlink_within_root(root):
    os.symlink(str(root / "docs"), str(root / "docs-link"))
    assert secure_join(str(root), "docs-link") == str(root / "docs")


def test_check_path_safety_requires_separator_boundary(root):
    assert check_path_safety(str(root), str(root))
    assert check_path_safety(str(root / "docs"), str(root))
    assert not check_path_safety(str(root) + "-other", str(root))


def test_split_parent():
    sep = os.sep
    assert split_parent(f"a{sep}b") == ("a", "b")
    assert split_parent(f"a{sep}b{sep}") == ("a", "b")
    assert split_parent("new") == ("", "new")


def test_secure_join_rejects_null_byte(root):
    with pytest.raises(PathSecurityError):
        secure_join(str(root), "docs\x00x")


def test_secure_join_absolute_request_is_rooted(root):
    assert secure_join(str(root), "/") == str(root)
    # an absolute path outside the root is looked up below the root instead
    with pytest.raises(PathSecurityError):
        secure_join(str(root), str(root.parent / "outside"))
