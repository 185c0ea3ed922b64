"""
Utility modules for the file browser.
"""
from .path_utils import check_path_safety, fix_path, secure_join, split_parent
from .file_utils import escape_html, format_size, get_file_category

__all__ = [
    "check_path_safety",
    "fix_path",
    "secure_join",
    "split_parent",
    "escape_html",
    "format_size",
    "get_file_category",
]
