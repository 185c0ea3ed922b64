"""
Response structures for file listings and folder creation.

All of these are built per request and serialized with
services.response_encoder.
"""
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

ACTION_FILELIST = "sendFilelist"
ACTION_ERROR = "sendError"
ACTION_NEW_FOLDER = "sendNewFolder"


@dataclass
class FolderEntry:
    """A subdirectory found while listing. The name is already escaped."""
    name: str


@dataclass
class FileEntry:
    """A non-directory entry. Size is empty when metadata could not be read."""
    name: str
    size: str
    category: str


@dataclass
class EntryOutcome:
    """Result of inspecting one directory entry; exactly one field is set."""
    folder: Optional[FolderEntry] = None
    file: Optional[FileEntry] = None
    skipped: Optional[str] = None


@dataclass
class DirectoryListing:
    path: str
    folders: List[FolderEntry] = field(default_factory=list)
    files: List[FileEntry] = field(default_factory=list)
    action: str = ACTION_FILELIST

    def add(self, outcome: EntryOutcome) -> None:
        """Fold a single entry outcome into the listing."""
        if outcome.folder is not None:
            self.folders.append(outcome.folder)
        elif outcome.file is not None:
            self.files.append(outcome.file)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "action": self.action,
            "path": self.path,
            "folders": [asdict(f) for f in self.folders],
            "files": [asdict(f) for f in self.files],
        }


@dataclass
class ErrorResponse:
    message: str
    action: str = ACTION_ERROR

    def to_dict(self) -> Dict[str, Any]:
        return {"action": self.action, "message": self.message}


@dataclass
class FolderCreationResult:
    created: bool
    message: str = ""
    action: str = ACTION_NEW_FOLDER

    def to_dict(self) -> Dict[str, Any]:
        return {"action": self.action, "created": self.created, "message": self.message}
