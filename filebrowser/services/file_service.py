"""
File operations service.
"""
import json
import os
from typing import Callable, Iterator

from ..exceptions import ListingError, PathSecurityError
from ..models import (
    DirectoryListing, EntryOutcome, FileEntry, FolderCreationResult, FolderEntry
)
from ..utils.file_utils import escape_html, format_size, get_file_category
from ..utils.path_utils import fix_path, normalize_path_display, secure_join, split_parent
from . import response_encoder

INVALID_FOLDER_MESSAGE = "Cannot create new folder, because the path is invalid"


class FileService:
    """Lists directories and creates folders inside a sandboxed root."""

    def __init__(
        self,
        root_dir: str,
        simple_icons: bool = False,
        classifier: Callable[[str, bool], str] = get_file_category
    ):
        """
        Initialize the file service.

        Args:
            root_dir: The root directory; canonicalized once here
            simple_icons: Display mode flag passed through to the classifier
            classifier: Maps (filename, simple_icons) to a category label
        """
        self.root_dir = os.path.realpath(root_dir)
        self.simple_icons = simple_icons
        self.classifier = classifier

    def resolve(self, relative_path: str) -> str:
        """
        Resolve a client path to a canonical path inside the root.

        Raises:
            PathSecurityError: If the path is missing or escapes the root
        """
        return secure_join(self.root_dir, fix_path(relative_path))

    def list_directory(self, relative_path: str) -> DirectoryListing:
        """
        List the contents of a directory.

        Entries that cannot be inspected are skipped or listed without a
        size; they never abort the listing.

        Args:
            relative_path: The relative path to list

        Returns:
            The assembled listing

        Raises:
            PathSecurityError: If the path is missing or escapes the root
            ListingError: If the directory cannot be opened
        """
        fixed_path = fix_path(relative_path)
        abs_path = secure_join(self.root_dir, fixed_path)

        listing = DirectoryListing(path=escape_html(normalize_path_display(fixed_path)))
        for outcome in self.iter_entries(abs_path):
            if outcome.skipped:
                print(f"Warning: skipped entry in {abs_path}: {outcome.skipped}")
            listing.add(outcome)

        print(f"Open path: {fixed_path!r}")
        return listing

    def iter_entries(self, abs_path: str) -> Iterator[EntryOutcome]:
        """
        Yield one outcome per entry of a resolved directory, sorted by name.

        The directory is read in full up front so it can be sorted; entries
        are inspected lazily as outcomes are consumed. A read error after the
        directory was opened ends the read early and keeps what was read.

        Args:
            abs_path: Canonical directory path inside the root

        Raises:
            ListingError: If the directory cannot be opened
        """
        try:
            it = os.scandir(abs_path)
        except OSError as e:
            print(f"Error listing directory {abs_path}: {e}")
            raise ListingError(e.errno, e.strerror) from e

        entries = []
        with it:
            while True:
                try:
                    entry = next(it)
                except StopIteration:
                    break
                except OSError as e:
                    print(f"Warning: stopped reading {abs_path} early: {e}")
                    break
                entries.append(entry)

        entries.sort(key=lambda e: e.name.lower())
        for entry in entries:
            yield self._inspect_entry(entry)

    def _inspect_entry(self, entry: os.DirEntry) -> EntryOutcome:
        try:
            entry.name.encode("utf-8")
        except UnicodeEncodeError:
            return EntryOutcome(skipped=f"failed to decode filename {entry.name!r}")

        try:
            is_dir = entry.is_dir()
        except OSError as e:
            return EntryOutcome(skipped=f"cannot read type of {entry.name!r}: {e}")

        name = escape_html(entry.name)
        if is_dir:
            return EntryOutcome(folder=FolderEntry(name=name))

        category = self.classifier(entry.name, self.simple_icons)
        try:
            size = format_size(entry.stat().st_size)
        except OSError as e:
            print(f"Warning: Could not stat {entry.path}: {e}")
            size = ""
        return EntryOutcome(file=FileEntry(name=name, size=size, category=category))

    def filelist_response(self, relative_path: str) -> str:
        """
        Build the encoded wire message for a listing request.

        Args:
            relative_path: The relative path to list

        Returns:
            JSON "sendFilelist" message, or "sendError" on any failure
        """
        try:
            listing = self.list_directory(relative_path)
        except (PathSecurityError, ListingError) as e:
            print(f"Cannot read path {relative_path!r}: {e}")
            quoted = json.dumps(escape_html(fix_path(relative_path)), ensure_ascii=False)
            return response_encoder.encode_error(f"Cannot read the given path: {quoted}")
        return response_encoder.encode_listing(listing)

    def create_folder(self, relative_path: str) -> FolderCreationResult:
        """
        Create a new folder.

        Only the parent is resolved against the root (the folder itself does
        not exist yet); the new folder is then created as the validated
        parent plus the single leaf name.

        Args:
            relative_path: Relative path of the folder to create

        Returns:
            The creation result
        """
        parent_rel, leaf = split_parent(fix_path(relative_path))

        try:
            parent_abs = secure_join(self.root_dir, parent_rel)
        except PathSecurityError as e:
            print(f"Refusing to create folder {relative_path!r}: {e}")
            return FolderCreationResult(created=False, message=INVALID_FOLDER_MESSAGE)

        if leaf in ("", ".", "..") or "\x00" in leaf:
            print(f"Refusing to create folder {relative_path!r}: invalid folder name")
            return FolderCreationResult(created=False, message=INVALID_FOLDER_MESSAGE)

        new_folder_abs = os.path.join(parent_abs, leaf)
        try:
            os.mkdir(new_folder_abs)
        except OSError as e:
            print(f"Error creating folder {new_folder_abs}: {e}")
            return FolderCreationResult(
                created=False,
                message=f"Cannot create new folder.<br><br>Exact Error: {e.strerror}"
            )

        print(f"Created new folder: {new_folder_abs}")
        return FolderCreationResult(created=True)

    def new_folder_response(self, relative_path: str) -> str:
        """Build the encoded wire message for a folder creation request."""
        return response_encoder.encode_folder_result(self.create_folder(relative_path))
