"""Breadcrumb construction from the raw requested path."""

import os

from dirscope.core.listing.types import Breadcrumb


def root_label(base: str) -> str:
    """Label for the root breadcrumb: the base directory's own name."""
    return os.path.basename(base.rstrip(os.sep)) or base


def build_breadcrumbs(base: str, requested: str) -> tuple[Breadcrumb, ...]:
    """Build the breadcrumb trail for a requested path.

    Works on the raw request string rather than the resolved path, so labels
    follow the segments the user navigated through. Empty segments from
    repeated or trailing slashes are dropped.

    Args:
        base: Absolute base directory (used for the root label only).
        requested: Raw path from the client.

    Returns:
        Root breadcrumb (path "") followed by one breadcrumb per segment.

    """
    crumbs = [Breadcrumb(label=root_label(base), path="")]
    segments = [segment for segment in requested.split("/") if segment]

    for index, segment in enumerate(segments):
        crumbs.append(Breadcrumb(label=segment, path="/".join(segments[: index + 1])))

    return tuple(crumbs)


def parent_path_of(breadcrumbs: tuple[Breadcrumb, ...]) -> str | None:
    """Return the breadcrumb path one level up, or None at the root."""
    if len(breadcrumbs) > 1:
        return breadcrumbs[-2].path
    return None
