"""Root command implementation.

Resolves the configured storage root through the resolver context.
"""

import typer
from rich.markup import escape

from ocflwalk.cli.types import get_driver
from ocflwalk.core.errors import OcflError
from ocflwalk.layout.probe import is_root
from ocflwalk.models.entity import EntityType
from ocflwalk.resolver import ResolverConfig, init_resolver
from ocflwalk.utils.formatting import console, print_error


def show_root(ctx: typer.Context) -> None:
    """Show the storage root that walks without a location start from."""
    driver = get_driver(ctx)
    root = ctx.obj.get("root") or ctx.obj["settings"].root

    try:
        resolver = init_resolver(ResolverConfig(root=root, drivers=[driver]))
        _, declaration = is_root(resolver.root.addr, EntityType.ROOT)
    except OcflError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    console.print(f"[entity.root]root[/] {escape(resolver.root.addr)}")
    console.print(f"  [muted]declaration:[/] {declaration}")
    console.print(f"  [muted]driver:[/] {type(resolver.driver).__name__}")
