"""
File information and formatting utilities.
"""
import os

import humanize
from markupsafe import escape


# Extension groups for get_file_category, checked in order.
CATEGORY_EXTENSIONS = (
    ("pdf", (".pdf",)),
    ("image", (".png", ".jpg", ".jpeg", ".gif", ".bmp", ".svg", ".webp", ".tiff", ".tif", ".ico")),
    ("document", (".doc", ".docx", ".odt", ".rtf")),
    ("spreadsheet", (".xls", ".xlsx", ".ods", ".csv")),
    ("presentation", (".ppt", ".pptx", ".odp")),
    ("archive", (".zip", ".rar", ".7z", ".tar", ".gz", ".bz2", ".xz")),
    ("audio", (".mp3", ".wav", ".flac", ".ogg", ".m4a")),
    ("video", (".mp4", ".avi", ".mov", ".mkv", ".webm")),
    ("code", (".py", ".js", ".ts", ".java", ".cpp", ".c", ".h", ".rs", ".go", ".html", ".css", ".sh")),
    ("text", (".txt", ".md", ".log", ".json", ".yaml", ".yml", ".toml", ".ini", ".xml")),
)

# Categories that survive in simple icon mode
SIMPLE_CATEGORIES = {"image", "audio", "video", "archive"}


def get_file_category(filename: str, simple_icons: bool = False) -> str:
    """
    Determine the display category for a file based on its extension.

    Args:
        filename: The filename
        simple_icons: Collapse everything except media and archives to "file"

    Returns:
        Category label (e.g., 'pdf', 'image', 'code', 'file')
    """
    ext = get_file_extension(filename)

    for category, extensions in CATEGORY_EXTENSIONS:
        if ext in extensions:
            if simple_icons and category not in SIMPLE_CATEGORIES:
                return "file"
            return category
    return "file"


def get_file_extension(filename: str) -> str:
    """
    Get the file extension.

    Args:
        filename: The filename

    Returns:
        File extension (lowercase, including dot) or empty string
    """
    _, ext = os.path.splitext(filename)
    return ext.lower()


def format_size(num_bytes: int) -> str:
    """
    Format a byte count as human readable text, e.g. "5 bytes" or "1.2 kB".

    The byte unit is always spelled out as "bytes".
    """
    text = humanize.naturalsize(num_bytes)
    return text.replace(" Bytes", " bytes").replace(" Byte", " bytes")


def escape_html(text: str) -> str:
    """Escape HTML-sensitive characters in a name before it goes on the wire."""
    return str(escape(text))
