"""
File and folder domain models.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

ROOT_FOLDER_ID = "root"


class ContentState(StrEnum):
    """Availability of a file's content on the appliance."""

    AVAILABLE = "AVAILABLE"
    SYNCING = "SYNCING"
    DESELECTED = "DESELECTED"
    INSUFFICIENT_STORAGE = "INSUFFICIENT_STORAGE"


@dataclass(frozen=True, kw_only=True)
class Folder:
    """
    Represents a folder.

    `sid` is set when the folder is shared; `path` and `children` are only
    populated when requested through the `fields` parameter.
    """

    folder_id: str
    name: str
    parent_id: str | None
    is_shared: bool = False
    sid: str | None = None
    path: "ParentPath | None" = None
    children: "Children | None" = None


@dataclass(frozen=True, kw_only=True)
class File:
    """Represents a file and its metadata."""

    file_id: str
    name: str
    parent_id: str | None
    size: int | None = None
    mime_type: str = ""
    etag: str | None = None
    last_modified: datetime | None = None
    content_state: ContentState | None = None
    path: "ParentPath | None" = None

    @property
    def is_available(self) -> bool:
        """Check if the content can be downloaded right now."""
        return self.content_state in (None, ContentState.AVAILABLE)


@dataclass(frozen=True, kw_only=True)
class ParentPath:
    """Chain of folders from the root down to an object's parent."""

    folders: tuple[Folder, ...] = ()

    def format(self) -> str:
        """Format as a POSIX-style path, skipping the root folder."""
        names = [f.name for f in self.folders if f.parent_id is not None]
        return "/" + "/".join(names)


@dataclass(frozen=True, kw_only=True)
class Children:
    """Direct children of a folder."""

    parent_id: str
    folders: tuple[Folder, ...] = ()
    files: tuple[File, ...] = ()

    def get_folder(self, name: str) -> Folder | None:
        """Get a child folder by name."""
        return next((f for f in self.folders if f.name == name), None)

    def get_file(self, name: str) -> File | None:
        """Get a child file by name."""
        return next((f for f in self.files if f.name == name), None)

    def __len__(self) -> int:
        return len(self.folders) + len(self.files)
