"""Allow running ocflwalk as ``python -m ocflwalk``."""

from ocflwalk.cli.main import app

app()
