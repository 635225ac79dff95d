"""Shared types for the listing module."""

import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Protocol

EntryType = Literal["file", "directory"]


@dataclass(frozen=True)
class DirectoryEntry:
    """A single child of the listed directory.

    Attributes:
        name: Name of the file or directory
        relative_path: Path relative to the base directory, "/"-separated
        type: "directory" for directories, "file" for everything else
        size: Size in bytes as reported by stat
        modified: Modification time, ISO-8601 UTC

    """

    name: str
    relative_path: str
    type: EntryType
    size: int
    modified: str

    @property
    def is_dir(self) -> bool:
        """True if this entry is a directory."""
        return self.type == "directory"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON shape used in snapshot entries."""
        return {
            "name": self.name,
            "relativePath": self.relative_path,
            "type": self.type,
            "size": self.size,
            "modified": self.modified,
        }


@dataclass(frozen=True)
class Breadcrumb:
    """Navigable label/path pair for one ancestor segment."""

    label: str
    path: str

    def to_dict(self) -> dict[str, str]:
        return {"label": self.label, "path": self.path}


@dataclass(frozen=True)
class DirectorySnapshot:
    """One directory's listing plus navigation metadata.

    Rebuilt from scratch on every request; nothing here is cached or shared.

    Attributes:
        base_path: Absolute base directory all navigation is confined to
        requested_path: Raw path as supplied by the client
        absolute_path: Resolved absolute path (equal to or beneath base_path)
        parent_path: Breadcrumb path one level up, None at the root
        breadcrumbs: Root breadcrumb followed by one per path segment
        entries: Sorted children, directories first

    """

    base_path: str
    requested_path: str
    absolute_path: str
    parent_path: str | None
    breadcrumbs: tuple[Breadcrumb, ...]
    entries: tuple[DirectoryEntry, ...]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON shape served by the API."""
        return {
            "basePath": self.base_path,
            "requestedPath": self.requested_path,
            "absolutePath": self.absolute_path,
            "parentPath": self.parent_path,
            "breadcrumbs": [crumb.to_dict() for crumb in self.breadcrumbs],
            "entries": [entry.to_dict() for entry in self.entries],
        }


class FilesystemInterface(Protocol):
    """Protocol for filesystem operations to enable dependency injection."""

    def scandir(self, path: Path) -> Iterator[os.DirEntry[str]]:
        """Scan directory and yield its immediate children.

        Args:
            path: Directory path to scan

        Yields:
            DirEntry objects for each entry in the directory

        Raises:
            OSError: If the directory cannot be opened.

        """
        ...

    def stat(self, path: Path) -> os.stat_result:
        """Get file stats for a child entry.

        Args:
            path: Path to get stats for

        Returns:
            Stat result with st_size and st_mtime

        """
        ...
