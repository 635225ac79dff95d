"""Web layer: Starlette app, API routes and the static explorer page."""

from dirscope.web.server import DirectoryServer

__all__ = ["DirectoryServer"]
