"""Command-line launcher for dirscope.

Provides:
- `dirscope serve`: Start the directory browser HTTP server

Example:
    $ dirscope serve --base-dir /dp-apps --port 8080
    $ dirscope serve --config dirscope.yaml
"""

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console

from dirscope.core.config import load_config, load_config_file
from dirscope.core.exceptions import ConfigError

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="dirscope",
    help="Browse a restricted directory tree through a web UI",
    no_args_is_help=True,
)

# Shared console for output
console = Console()


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


@app.callback()
def main() -> None:
    """dirscope command group."""


@app.command(name="serve")
def serve_command(
    base_dir: Path = typer.Option(
        None,
        "--base-dir",
        "-b",
        help="Directory all browsing is confined to (default: /dp-apps)",
    ),
    host: str = typer.Option(None, "--host", help="Bind address (default: 127.0.0.1)"),
    port: int = typer.Option(None, "--port", "-p", help="Listen port (default: 8000)"),
    log_level: str = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING or ERROR"),
    config: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML config file; command-line options take precedence",
    ),
) -> None:
    """Start the directory browser HTTP server."""
    from dirscope.web import DirectoryServer

    overrides = {
        "base_directory": str(base_dir) if base_dir is not None else None,
        "host": host,
        "port": port,
        "log_level": log_level,
    }

    try:
        if config is not None:
            cfg = load_config_file(config, overrides=overrides)
        else:
            cfg = load_config({k: v for k, v in overrides.items() if v is not None})
    except ConfigError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from None

    _setup_logging(cfg.log_level)
    console.print(
        f"Serving [bold]{cfg.base_directory}[/bold] at http://{cfg.host}:{cfg.port}"
    )

    server = DirectoryServer(cfg.base_directory)
    try:
        server.run(host=cfg.host, port=cfg.port, log_level=cfg.log_level)
    except OSError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=EXIT_ERROR) from None


if __name__ == "__main__":
    app()
