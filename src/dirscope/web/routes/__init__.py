"""Web API routes package.

- directory: Directory snapshots and the health probe
"""

from .directory import directory_routes

# Aggregate all routes
API_ROUTES = list(directory_routes)

__all__ = ["API_ROUTES"]
