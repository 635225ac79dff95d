"""Directory scanning with concurrent per-child metadata reads."""

import asyncio
import logging
import os
from collections.abc import Iterator
from pathlib import Path

from dirscope.core.listing.time_format import format_iso_timestamp
from dirscope.core.listing.types import DirectoryEntry, FilesystemInterface

logger = logging.getLogger(__name__)


class RealFilesystem:
    """Real filesystem implementation using os module."""

    def scandir(self, path: Path) -> Iterator[os.DirEntry[str]]:
        """Scan directory using os.scandir. OSError propagates to the caller."""
        with os.scandir(path) as it:
            yield from it

    def stat(self, path: Path) -> os.stat_result:
        return os.stat(path)


class DirectoryScanner:
    """Lists one directory level and stats every child concurrently.

    The scan itself runs in a worker thread; each child's stat is then fanned
    out to its own thread and gathered. Completion order is irrelevant since
    callers sort the result. The first failing stat aborts the whole scan.
    """

    def __init__(self, base_path: str, filesystem: FilesystemInterface | None = None) -> None:
        """Initialize the scanner.

        Args:
            base_path: Absolute base directory, used for relative paths.
            filesystem: Optional filesystem implementation for testing.

        """
        self.base_path = base_path
        self.filesystem = filesystem if filesystem is not None else RealFilesystem()

    def _list_children(self, directory: str) -> list[os.DirEntry[str]]:
        return list(self.filesystem.scandir(Path(directory)))

    def _relative_path(self, child_path: str) -> str:
        return Path(os.path.relpath(child_path, self.base_path)).as_posix()

    def _build_entry(self, dirent: os.DirEntry[str]) -> DirectoryEntry:
        """Stat a single child and convert it to a DirectoryEntry.

        Anything that is not a directory (symlinks, sockets, devices) is
        reported as a file.
        """
        is_dir = dirent.is_dir(follow_symlinks=False)
        stat_result = self.filesystem.stat(Path(dirent.path))

        return DirectoryEntry(
            name=dirent.name,
            relative_path=self._relative_path(dirent.path),
            type="directory" if is_dir else "file",
            size=max(int(stat_result.st_size), 0),
            modified=format_iso_timestamp(stat_result.st_mtime),
        )

    async def scan(self, directory: str) -> list[DirectoryEntry]:
        """Scan a directory's immediate children.

        Args:
            directory: Absolute directory path, already validated.

        Returns:
            Unsorted list of entries.

        Raises:
            OSError: If the directory or any child cannot be read.

        """
        dirents = await asyncio.to_thread(self._list_children, directory)
        logger.debug("Scanned %d entries in %s", len(dirents), directory)

        if not dirents:
            return []

        return list(
            await asyncio.gather(
                *(asyncio.to_thread(self._build_entry, dirent) for dirent in dirents)
            )
        )
