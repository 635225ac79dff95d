"""Allow `python -m dirscope`."""

from dirscope.cli import app

app()
