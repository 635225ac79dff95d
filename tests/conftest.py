"""Pytest configuration and fixtures for dirscope tests."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def reset_config_singleton():
    """Reset config singleton before and after each test.

    This ensures tests don't leak configuration between each other.
    Tests that need config must explicitly load it.
    """
    from dirscope.core.config import _reset_config

    _reset_config()
    yield
    _reset_config()


@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    """Base directory named like a production deployment root."""
    base = tmp_path / "dp-apps"
    base.mkdir()
    return base


@pytest.fixture
def populated_base(base_dir: Path) -> Path:
    """Base directory with a small nested tree.

    Layout:
        dp-apps/
            A/
            B/
            a.txt   (5 bytes)
            b.txt   (3 bytes)
            foo/bar/baz.log
            empty/
    """
    (base_dir / "A").mkdir()
    (base_dir / "B").mkdir()
    (base_dir / "a.txt").write_text("hello")
    (base_dir / "b.txt").write_text("bye")
    (base_dir / "foo" / "bar").mkdir(parents=True)
    (base_dir / "foo" / "bar" / "baz.log").write_text("log line\n")
    (base_dir / "empty").mkdir()
    return base_dir
