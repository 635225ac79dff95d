"""Tests for the dirscope command-line launcher."""

from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from dirscope.cli import EXIT_CONFIG_ERROR, app
from dirscope.core.config import get_config

runner = CliRunner()


class TestServeCommand:
    """Tests for `dirscope serve`."""

    def test_serve_with_options(self, base_dir: Path) -> None:
        with patch("dirscope.web.server.DirectoryServer.run") as mock_run:
            result = runner.invoke(
                app, ["serve", "--base-dir", str(base_dir), "--port", "9200"]
            )

        assert result.exit_code == 0, result.output
        mock_run.assert_called_once_with(host="127.0.0.1", port=9200, log_level="INFO")
        assert get_config().base_directory == str(base_dir)

    def test_serve_with_config_file(self, base_dir: Path, tmp_path: Path) -> None:
        config_file = tmp_path / "dirscope.yaml"
        config_file.write_text(f"base_directory: {base_dir}\nport: 8300\nhost: 0.0.0.0\n")

        with patch("dirscope.web.server.DirectoryServer.run") as mock_run:
            result = runner.invoke(app, ["serve", "--config", str(config_file), "-p", "8400"])

        assert result.exit_code == 0, result.output
        mock_run.assert_called_once_with(host="0.0.0.0", port=8400, log_level="INFO")

    def test_invalid_config_exits(self) -> None:
        with patch("dirscope.web.server.DirectoryServer.run") as mock_run:
            result = runner.invoke(app, ["serve", "--base-dir", "relative/path"])

        assert result.exit_code == EXIT_CONFIG_ERROR
        assert "Configuration error" in result.output
        mock_run.assert_not_called()

    def test_bind_failure_exits(self, base_dir: Path) -> None:
        with patch(
            "dirscope.web.server.DirectoryServer.run",
            side_effect=OSError("Address already in use"),
        ):
            result = runner.invoke(app, ["serve", "--base-dir", str(base_dir)])

        assert result.exit_code == 1
        assert "Address already in use" in result.output
