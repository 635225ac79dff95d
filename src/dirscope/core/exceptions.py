"""Exception hierarchy for dirscope.

All errors raised by the listing layer derive from DirscopeError so the web
layer can translate them into a single JSON error shape. Messages are kept
generic on purpose: they are shown to the browser verbatim and must not
contain absolute paths.
"""

__all__ = [
    "DirscopeError",
    "ConfigError",
    "OutOfBoundsError",
    "ReadError",
]


class DirscopeError(Exception):
    """Base exception for all dirscope errors."""

    pass


class ConfigError(DirscopeError):
    """Configuration could not be loaded or failed validation."""

    pass


class OutOfBoundsError(DirscopeError):
    """Requested path normalizes outside the base directory.

    Raised before any filesystem access takes place.

    Attributes:
        requested_path: Raw path as supplied by the client.

    """

    default_message = "Requested path is outside the allowed directory."

    def __init__(self, message: str | None = None, *, requested_path: str = "") -> None:
        super().__init__(message or self.default_message)
        self.requested_path = requested_path


class ReadError(DirscopeError):
    """Directory or one of its children could not be read.

    Raised when:
    - The resolved path does not exist
    - The resolved path is not a directory
    - Permission is denied for the directory or a child entry
    - Stat of any child fails (no partial listings are returned)

    Attributes:
        requested_path: Raw path as supplied by the client.

    """

    default_message = "Unable to read the requested directory."

    def __init__(self, message: str | None = None, *, requested_path: str = "") -> None:
        super().__init__(message or self.default_message)
        self.requested_path = requested_path
