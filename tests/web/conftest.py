"""Pytest fixtures for web tests.

Provides:
- DirectoryServer instance rooted at a populated temp base directory
- AsyncClient for API testing
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from dirscope.web import DirectoryServer


@pytest.fixture
def directory_server(populated_base: Path) -> DirectoryServer:
    """Create DirectoryServer over the populated base directory."""
    return DirectoryServer(populated_base)


@pytest.fixture
async def test_client(directory_server: DirectoryServer) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client for API testing."""
    app = directory_server.create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
