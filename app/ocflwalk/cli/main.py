"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from ocflwalk import __version__
from ocflwalk.cli.commands import ls, root, show
from ocflwalk.core.logging_setup import setup_logging

# Create main Typer app
app = typer.Typer(
    name="ocflwalk",
    help="Resolve and walk entities of OCFL storage roots.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"ocflwalk version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    storage_root: Annotated[
        Path | None,
        typer.Option(
            "--root",
            "-r",
            help="OCFL storage root (overrides OCFL_ROOT and config.toml).",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """ocflwalk - resolve and walk OCFL storage roots.

    List objects, versions and files by physical path or by logical
    coordinates (object id, version id, logical path).
    """
    setup_logging(verbose=verbose, quiet=quiet)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["root"] = storage_root
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# Register commands
app.command("ls")(ls.ls_entities)
app.command("show")(show.show_entity)
app.command("root")(root.show_root)


if __name__ == "__main__":
    app()
