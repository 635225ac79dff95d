"""Path resolution and containment checks against the base directory."""

import logging
import os

from dirscope.core.exceptions import OutOfBoundsError

logger = logging.getLogger(__name__)

_LEADING_SEPARATORS = "/" + os.sep


def is_within_base(path: str, base: str) -> bool:
    """Check whether a normalized absolute path lies inside the base directory.

    A plain startswith() is not enough: "/dp-apps-evil" starts with "/dp-apps"
    but is a sibling. The base itself counts as inside.

    Args:
        path: Normalized absolute path to check.
        base: Normalized absolute base directory.

    Returns:
        True if path equals base or is nested beneath it.

    """
    if path == base:
        return True
    prefix = base if base.endswith(os.sep) else base + os.sep
    return path.startswith(prefix)


def resolve_requested_path(base: str, requested: str = "") -> str:
    """Resolve a client-supplied relative path against the base directory.

    Leading separators are stripped so "/foo" and "foo" are the same request.
    "." and ".." segments are collapsed lexically; symlinks are not resolved.

    Args:
        base: Normalized absolute base directory.
        requested: Raw path from the client (default: root).

    Returns:
        Normalized absolute path inside base.

    Raises:
        OutOfBoundsError: If the path normalizes outside base.

    """
    stripped = requested.lstrip(_LEADING_SEPARATORS)
    resolved = os.path.normpath(os.path.join(base, stripped))

    if not is_within_base(resolved, base):
        logger.warning("Rejected out-of-bounds path request: %r", requested)
        raise OutOfBoundsError(requested_path=requested)

    return resolved
