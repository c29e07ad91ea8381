"""Logging configuration for ocflwalk.

Installs a Rich handler on stderr for colored, leveled log output.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Configure logging with a Rich handler.

    Args:
        verbose: Enable DEBUG level logging.
        quiet: Suppress all but ERROR level logging.

    Returns:
        Configured logger for the ocflwalk package.
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=[handler], force=True
    )

    logger = logging.getLogger("ocflwalk")
    logger.setLevel(level)
    return logger
