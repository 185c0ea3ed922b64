"""
Exceptions raised by the file browser core.
"""


class FileBrowserError(Exception):
    """Base class for file browser errors."""


class PathSecurityError(FileBrowserError, ValueError):
    """A requested path does not exist or resolves outside the root directory."""


class ListingError(FileBrowserError, OSError):
    """A resolved directory could not be opened for listing."""
