"""Show command implementation.

Resolves exactly one entity from a path or logical coordinates and
prints its details.
"""

import json
from typing import Annotated

import typer
from rich.markup import escape

from ocflwalk.cli.types import OutputFormat, get_driver, get_output_format
from ocflwalk.core.errors import EntityNotFoundError, OcflError
from ocflwalk.inventory.loader import load_inventory
from ocflwalk.models.entity import EntityRef, EntityType
from ocflwalk.utils.formatting import console, entity_to_dict, format_coords, print_error
from ocflwalk.walk.scope import Scope


def _details(ref: EntityRef) -> dict[str, object]:
    """Collect inventory details of an object or version."""
    obj = ref.ancestor(EntityType.OBJECT)
    if obj is None or ref.type > EntityType.VERSION:
        return {}

    inventory = load_inventory(obj.addr)
    if ref.type == EntityType.OBJECT:
        return {
            "head": inventory.head,
            "versions": sorted(inventory.versions),
            "digest_algorithm": inventory.digest_algorithm,
        }

    meta = inventory.version(ref.id)
    return {
        "created": meta.created,
        "message": meta.message,
        "user": meta.user.name if meta.user else None,
        "files": len(inventory.files_in(ref.id)),
    }


def show_entity(
    ctx: typer.Context,
    location: Annotated[
        list[str],
        typer.Argument(
            help="Path, or logical coordinates: OBJECT_ID [VERSION_ID [LOGICAL_PATH]].",
            show_default=False,
        ),
    ],
    output_format: Annotated[
        OutputFormat | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = None,
) -> None:
    """Resolve a single OCFL entity and show its details.

    Examples:
        ocflwalk show obj-A v2 docs/readme.txt
        ocflwalk show /srv/ocfl/ab/cd/obj-A/v1
    """
    driver = get_driver(ctx)
    fmt = get_output_format(ctx, output_format)

    try:
        start = driver.resolve(*location)
        matches = Scope(start, start.type).collect()
        if not matches:
            coords = start.coords()
            raise EntityNotFoundError("/".join(location), coords[0] if coords else "")
        ref = matches[0]
        details = _details(ref)
    except OcflError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if fmt == OutputFormat.JSON:
        console.print_json(json.dumps({**entity_to_dict(ref), **details}))
        return

    style = f"entity.{ref.type.label}"
    console.print(f"[{style}]{ref.type.label}[/] [bold]{escape(format_coords(ref))}[/]")
    console.print(f"  [muted]address:[/] {escape(ref.addr)}")
    for key, value in details.items():
        console.print(f"  [muted]{key}:[/] {escape(str(value))}")
