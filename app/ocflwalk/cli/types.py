"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum

import typer

from ocflwalk.core.config import Settings, load_settings
from ocflwalk.core.errors import ConfigError
from ocflwalk.drivers.file import FileDriver
from ocflwalk.models.entity import EntityType
from ocflwalk.utils.formatting import print_error
from ocflwalk.walk.events import logging_observer


class TypeChoice(str, Enum):
    """Entity types selectable on the command line."""

    ROOT = "root"
    INTERMEDIATE = "intermediate"
    OBJECT = "object"
    VERSION = "version"
    FILE = "file"
    ANY = "any"

    def to_entity_type(self) -> EntityType:
        """Convert to the corresponding EntityType."""
        return EntityType.from_label(self.value)


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def require_settings(ctx: typer.Context) -> Settings:
    """Load settings once per invocation, or exit with an error message.

    Raises:
        typer.Exit: If the configuration cannot be loaded.
    """
    ctx.ensure_object(dict)
    settings = ctx.obj.get("settings")
    if settings is None:
        try:
            settings = load_settings()
        except ConfigError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e
        ctx.obj["settings"] = settings
    return settings


def get_driver(ctx: typer.Context) -> FileDriver:
    """Create a filesystem driver for the selected storage root.

    The ``--root`` option takes precedence over the configured root.
    Walk events are logged when ``--verbose`` is set.
    """
    settings = require_settings(ctx)
    root = ctx.obj.get("root") or settings.root
    observer = logging_observer if ctx.obj.get("verbose") else None
    return FileDriver(root, observer=observer)


def get_output_format(ctx: typer.Context, output_format: OutputFormat | None) -> OutputFormat:
    """Pick the explicit output format, falling back to the configured one."""
    if output_format is not None:
        return output_format
    return OutputFormat(require_settings(ctx).output_format)
