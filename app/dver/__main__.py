"""Allow `python -m dver`."""

from dver.cli.main import app

app()
