"""High-level service for directory snapshot assembly."""

import logging
import os
from pathlib import Path

from dirscope.core.exceptions import ReadError
from dirscope.core.listing.breadcrumbs import build_breadcrumbs, parent_path_of
from dirscope.core.listing.resolver import resolve_requested_path
from dirscope.core.listing.scanner import DirectoryScanner
from dirscope.core.listing.types import DirectoryEntry, DirectorySnapshot, FilesystemInterface

logger = logging.getLogger(__name__)


def sort_entries(entries: list[DirectoryEntry]) -> tuple[DirectoryEntry, ...]:
    """Sort entries with directories first, then by name.

    Names compare case-insensitively first ("a.txt" before "B.txt"). Names that
    differ only in case put lowercase first ("readme" before "README"), so the
    order never depends on listing order.
    """
    return tuple(
        sorted(entries, key=lambda e: (not e.is_dir, e.name.casefold(), e.name.swapcase()))
    )


class DirectorySnapshotService:
    """Builds DirectorySnapshot objects for paths beneath a fixed base directory.

    Orchestrates path resolution, directory scanning, sorting and breadcrumb
    construction. Holds no per-request state, so one instance can serve
    concurrent requests.
    """

    def __init__(
        self,
        base_directory: str | Path,
        filesystem: FilesystemInterface | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            base_directory: Root all navigation is confined to. Made absolute
                and normalized; symlinks are not resolved.
            filesystem: Optional filesystem implementation for testing.

        """
        self.base_path = os.path.abspath(os.fspath(base_directory))
        self.scanner = DirectoryScanner(self.base_path, filesystem)

    async def read_directory(self, requested_path: str = "") -> DirectorySnapshot:
        """Build a snapshot of the directory at requested_path.

        Args:
            requested_path: Path relative to the base directory ("" = root).

        Returns:
            Snapshot with sorted entries and navigation metadata.

        Raises:
            OutOfBoundsError: If the path escapes the base directory.
            ReadError: If the directory or any of its children cannot be read.

        """
        absolute_path = resolve_requested_path(self.base_path, requested_path)

        try:
            entries = await self.scanner.scan(absolute_path)
        except (OSError, ValueError) as e:
            # ValueError: paths the OS cannot represent, e.g. embedded NUL
            logger.warning(
                "Cannot read directory %s (requested %r): %s", absolute_path, requested_path, e
            )
            raise ReadError(requested_path=requested_path) from e

        breadcrumbs = build_breadcrumbs(self.base_path, requested_path)

        return DirectorySnapshot(
            base_path=self.base_path,
            requested_path=requested_path,
            absolute_path=absolute_path,
            parent_path=parent_path_of(breadcrumbs),
            breadcrumbs=breadcrumbs,
            entries=sort_entries(entries),
        )


async def read_directory(
    requested_path: str = "",
    *,
    base_directory: str | Path | None = None,
) -> DirectorySnapshot:
    """Build a snapshot using the configured base directory.

    Args:
        requested_path: Path relative to the base directory ("" = root).
        base_directory: Override for the configured base directory.

    Returns:
        DirectorySnapshot for the requested path.

    Raises:
        OutOfBoundsError: If the path escapes the base directory.
        ReadError: If the directory cannot be read.
        ConfigError: If no base_directory is given and config is not loaded.

    """
    if base_directory is None:
        from dirscope.core.config import get_config

        base_directory = get_config().base_directory

    return await DirectorySnapshotService(base_directory).read_directory(requested_path)
