"""List command implementation.

Walks a storage root, object, version or intermediate directory and
lists the entities of one type underneath it.
"""

import json
from typing import Annotated

import typer

from ocflwalk.cli.types import OutputFormat, TypeChoice, get_driver, get_output_format
from ocflwalk.core.errors import OcflError
from ocflwalk.models.entity import EntityRef, Select
from ocflwalk.utils.formatting import (
    console,
    create_entity_table,
    entity_to_dict,
    format_entity_row,
    print_error,
    print_info,
)


def ls_entities(
    ctx: typer.Context,
    location: Annotated[
        list[str] | None,
        typer.Argument(
            help="Path, or logical coordinates: OBJECT_ID [VERSION_ID [LOGICAL_PATH]].",
            show_default=False,
        ),
    ] = None,
    entity_type: Annotated[
        TypeChoice,
        typer.Option(
            "--type",
            "-t",
            help="Entity type to list.",
            case_sensitive=False,
        ),
    ] = TypeChoice.FILE,
    head: Annotated[
        bool,
        typer.Option("--head", help="Only consider the head version of each object."),
    ] = False,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = None,
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-n",
            help="Limit number of entities to display.",
        ),
    ] = None,
) -> None:
    """List OCFL entities of one type under a location.

    Without a location, everything under the storage root is walked.

    Examples:
        ocflwalk ls --type object                 # All objects under the root
        ocflwalk ls obj-A                         # All files of all versions of obj-A
        ocflwalk ls obj-A v2                      # Files of version v2
        ocflwalk ls /srv/ocfl/ab/cd -t object     # Objects below a directory
        ocflwalk ls --head --format json          # Head files as JSON
    """
    driver = get_driver(ctx)
    fmt = get_output_format(ctx, output_format)
    select = Select(entity_type.to_entity_type(), head=head)

    found: list[EntityRef] = []
    try:
        driver.walk(select, found.append, *(location or []))
    except OcflError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    # Walk order is unspecified; sort for stable output
    found.sort(key=lambda r: (r.type, r.coords(), r.addr))
    display = found[:limit] if limit else found

    if fmt == OutputFormat.JSON:
        console.print_json(json.dumps([entity_to_dict(r) for r in display]))
        return

    if not found:
        print_info(f"No {entity_type.value} entities found.")
        return

    table = create_entity_table()
    for ref in display:
        table.add_row(*format_entity_row(ref))
    console.print(table)

    console.print(f"\n[dim]Found {len(found)} entities[/dim]")
    if limit and len(display) < len(found):
        console.print(f"[dim](showing {len(display)} of {len(found)}, limited to {limit})[/dim]")
