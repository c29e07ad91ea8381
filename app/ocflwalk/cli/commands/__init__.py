"""CLI commands for ocflwalk.

This package contains all subcommand implementations.
"""

from ocflwalk.cli.commands import ls, root, show

__all__ = ["ls", "root", "show"]
