"""
Path manipulation and safety utilities.
"""
import os
from typing import Tuple

from ..exceptions import PathSecurityError


def fix_path(path: str) -> str:
    """
    Convert a forward-slash path to the platform's native separator.

    On Windows "/" becomes "\\" (doubled backslashes are collapsed),
    everywhere else the path is returned unchanged. ".." segments are
    left alone; resolving them is secure_join's job.

    Args:
        path: Client supplied path using "/" separators

    Returns:
        Path using the native separator
    """
    if os.name == "nt":
        return path.replace("/", "\\").replace("\\\\", "\\")
    return path


def check_path_safety(path_abs: str, root_dir: str) -> bool:
    """
    Check if the absolute path is the root directory or nested under it.

    Args:
        path_abs: Canonical absolute path to check
        root_dir: Canonical root directory

    Returns:
        True if path is safe, False otherwise
    """
    if path_abs == root_dir:
        return True
    prefix = root_dir if root_dir.endswith(os.sep) else root_dir + os.sep
    return path_abs.startswith(prefix)


def secure_join(root_dir: str, relative_path: str) -> str:
    """
    Join an untrusted relative path onto the root directory.

    The joined path is canonicalized against the real filesystem (symlinks
    and ".." resolved) before the containment check, so traversal such as
    "../../etc" or a symlink pointing outside cannot escape the root.
    The target has to exist.

    Leading separators are stripped first, so "/docs" means "<root>/docs"
    rather than an absolute path replacing the root in the join. A path the
    OS cannot represent (e.g. one with an embedded NUL byte) is rejected.

    Args:
        root_dir: Canonical absolute root directory
        relative_path: Untrusted path relative to the root

    Returns:
        Canonical absolute path inside the root

    Raises:
        PathSecurityError: If the path does not exist or escapes the root
    """
    separators = os.sep + (os.altsep or "")
    joined = os.path.join(root_dir, relative_path.lstrip(separators))

    try:
        resolved = os.path.realpath(joined, strict=True)
    except OSError as e:
        raise PathSecurityError(f"Cannot resolve {relative_path!r}: {e.strerror}") from e
    except ValueError as e:
        raise PathSecurityError(f"Cannot resolve {relative_path!r}: {e}") from e

    if not check_path_safety(resolved, root_dir):
        print(f"SECURITY: prevented path traversal attack: {relative_path!r} -> {resolved}")
        raise PathSecurityError(f"Path {relative_path!r} escapes the root directory")

    return resolved


def split_parent(path: str) -> Tuple[str, str]:
    """
    Split a path into its parent and its last segment.

    Trailing separators are ignored, so "a/b/" gives ("a", "b").
    A single segment has an empty parent.

    Args:
        path: Path using the native separator

    Returns:
        Tuple of (parent path, leaf name)
    """
    separators = os.sep + (os.altsep or "")
    trimmed = path.rstrip(separators)
    return os.path.dirname(trimmed), os.path.basename(trimmed)


def normalize_path_display(path: str) -> str:
    """
    Normalize path for display (use forward slashes).

    Args:
        path: Path to normalize

    Returns:
        Path with forward slashes
    """
    if os.sep != "/":
        return path.replace(os.sep, "/")
    return path
