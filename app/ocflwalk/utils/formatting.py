"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ocflwalk.core.theme import get_theme
from ocflwalk.models.entity import EntityRef, EntityType


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def create_entity_table(title: str = "OCFL Entities") -> Table:
    """Create a pre-configured table for displaying entities.

    Args:
        title: Table title.

    Returns:
        Rich Table with Type, Coordinates and Address columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],  # Zebra striping for readability
    )
    table.add_column("Type", width=12)
    table.add_column("Coordinates", no_wrap=True)
    table.add_column("Address", style="muted", overflow="fold")
    return table


def format_coords(ref: EntityRef) -> str:
    """Format the logical identity of an entity as a slash-joined string.

    Intermediate directories have no coordinates and are shown by
    their root-relative id instead; the root is shown as "/".
    """
    if ref.type == EntityType.ROOT:
        return "/"
    if ref.type == EntityType.INTERMEDIATE:
        return ref.id
    return " / ".join(ref.coords())


def format_entity_row(ref: EntityRef) -> tuple[str, str, str]:
    """Format an entity as a table row with Rich markup.

    Returns:
        Tuple of (type, coordinates, address).
    """
    style = f"entity.{ref.type.label}"
    return (
        f"[{style}]{ref.type.label}[/]",
        f"[{style}]{escape(format_coords(ref))}[/]",
        escape(ref.addr),
    )


def entity_to_dict(ref: EntityRef) -> dict[str, object]:
    """Convert an entity to a JSON-serializable dictionary."""
    return {
        "type": ref.type.label,
        "id": ref.id,
        "coords": list(ref.coords()) if ref.type > EntityType.INTERMEDIATE else [],
        "addr": ref.addr,
    }


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")
