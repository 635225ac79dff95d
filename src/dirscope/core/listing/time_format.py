"""Time formatting utilities for directory listings."""

from datetime import UTC, datetime


def format_iso_timestamp(timestamp: float) -> str:
    """Format a Unix timestamp as an ISO-8601 UTC string.

    Args:
        timestamp: Unix timestamp (from stat().st_mtime)

    Returns:
        String like "2024-05-01T12:30:00.250Z" (millisecond precision,
        "Z" suffix).

    """
    moment = datetime.fromtimestamp(timestamp, tz=UTC)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
