"""CLI package for ocflwalk.

This package contains the Typer application and all subcommands.
"""

from ocflwalk.cli.main import app

__all__ = ["app"]
