"""Allow ``python -m mvnpurge``."""

from mvnpurge.cli.main import app

app()
