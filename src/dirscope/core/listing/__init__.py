"""Directory snapshot builder.

Resolves a client-supplied relative path against a fixed base directory,
lists the directory's immediate children with size and modification time,
and computes breadcrumb/parent navigation state.

Usage:
    from dirscope.core.listing import DirectorySnapshotService

    service = DirectorySnapshotService("/dp-apps")
    snapshot = await service.read_directory("projects/site")
    payload = snapshot.to_dict()
"""

from dirscope.core.listing.breadcrumbs import build_breadcrumbs
from dirscope.core.listing.resolver import is_within_base, resolve_requested_path
from dirscope.core.listing.service import DirectorySnapshotService, read_directory, sort_entries
from dirscope.core.listing.types import Breadcrumb, DirectoryEntry, DirectorySnapshot

__all__ = [
    "Breadcrumb",
    "DirectoryEntry",
    "DirectorySnapshot",
    "DirectorySnapshotService",
    "build_breadcrumbs",
    "is_within_base",
    "read_directory",
    "resolve_requested_path",
    "sort_entries",
]
