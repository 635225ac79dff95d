"""dirscope: browse a restricted directory tree through a web UI."""

__version__ = "0.1.0"
