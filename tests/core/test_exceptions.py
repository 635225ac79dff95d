"""Tests for the dirscope exception hierarchy."""

from dirscope.core.exceptions import (
    ConfigError,
    DirscopeError,
    OutOfBoundsError,
    ReadError,
)


class TestExceptionHierarchy:
    """Test exception classes and inheritance."""

    def test_all_inherit_from_dirscope_error(self) -> None:
        for exc_class in (ConfigError, OutOfBoundsError, ReadError):
            assert issubclass(exc_class, DirscopeError)

    def test_out_of_bounds_default_message(self) -> None:
        err = OutOfBoundsError(requested_path="../../etc")

        assert str(err) == "Requested path is outside the allowed directory."
        assert err.requested_path == "../../etc"

    def test_read_error_default_message(self) -> None:
        err = ReadError()

        assert str(err) == "Unable to read the requested directory."
        assert err.requested_path == ""

    def test_custom_message(self) -> None:
        assert str(ReadError("nope")) == "nope"

    def test_in_all_exports(self) -> None:
        from dirscope.core import exceptions

        assert {"DirscopeError", "ConfigError", "OutOfBoundsError", "ReadError"} <= set(
            exceptions.__all__
        )
