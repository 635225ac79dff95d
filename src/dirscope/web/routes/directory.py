"""Directory browsing routes.

Provides:
- /api/directory - Snapshot of one directory beneath the base directory

Security:
- Restricted to the configured base directory
- Error bodies carry generic messages only (no absolute paths)
- Read-only operations only
"""

import logging

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from dirscope.core.exceptions import DirscopeError, ReadError
from dirscope.core.listing import DirectorySnapshotService

logger = logging.getLogger(__name__)


def _get_service(request: Request) -> DirectorySnapshotService:
    """Get snapshot service from app state."""
    return request.app.state.snapshot_service


async def get_directory(request: Request) -> JSONResponse:
    """GET /api/directory - Snapshot of a directory.

    Query params:
        path: Path relative to the base directory (optional, defaults to root)

    Returns:
        200: DirectorySnapshot JSON.
        400: {"error": ...} on any failure: path escapes the base directory,
            cannot be read, or an unexpected error (logged, generic message).

    """
    requested_path = request.query_params.get("path", "")
    service = _get_service(request)

    try:
        snapshot = await service.read_directory(requested_path)
    except DirscopeError as e:
        return JSONResponse({"error": str(e)}, status_code=400)
    except Exception:
        logger.exception("Error reading directory: %r", requested_path)
        return JSONResponse({"error": ReadError.default_message}, status_code=400)

    return JSONResponse(snapshot.to_dict())


async def get_health(request: Request) -> JSONResponse:
    """GET /api/health - Liveness probe."""
    return JSONResponse({"status": "ok"})


# Route definitions
directory_routes = [
    Route("/api/directory", get_directory, methods=["GET"]),
    Route("/api/health", get_health, methods=["GET"]),
]
