"""Starlette application for the directory browser.

Serves the JSON API under /api and the static explorer page under /.
"""

import logging
import os
from pathlib import Path

import uvicorn
from starlette.applications import Starlette
from starlette.routing import Mount
from starlette.staticfiles import StaticFiles

from dirscope.core.listing import DirectorySnapshotService
from dirscope.web.routes import API_ROUTES

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


class DirectoryServer:
    """HTTP server exposing snapshots of one base directory.

    Attributes:
        base_directory: Root all browsing is confined to.
        snapshot_service: Service shared by all requests (stateless).

    """

    def __init__(self, base_directory: str | Path) -> None:
        """Initialize the server.

        Args:
            base_directory: Root all browsing is confined to.

        """
        self.snapshot_service = DirectorySnapshotService(base_directory)
        self.base_directory = self.snapshot_service.base_path

        if not os.path.isdir(self.base_directory):
            logger.warning(
                "Base directory %s does not exist or is not a directory; "
                "every request will fail until it is created",
                self.base_directory,
            )

    def create_app(self) -> Starlette:
        """Create the Starlette application.

        Returns:
            App with API routes and the static explorer mounted at /.

        """
        routes = [
            *API_ROUTES,
            Mount("/", app=StaticFiles(directory=STATIC_DIR, html=True), name="static"),
        ]
        app = Starlette(routes=routes)
        app.state.snapshot_service = self.snapshot_service
        return app

    def run(self, host: str = "127.0.0.1", port: int = 8000, log_level: str = "info") -> None:
        """Serve the app with uvicorn until interrupted."""
        logger.info("Serving %s on http://%s:%d", self.base_directory, host, port)
        uvicorn.run(self.create_app(), host=host, port=port, log_level=log_level.lower())
