"""Command-line interface for createfile using Typer.

Two console scripts are exposed:

- ``createfile [NAME]`` creates *NAME* (``untitled.txt`` by default), or its
  first free numbered variant ``NAME(1)``, ``NAME(2)`` … when it is taken.
- ``renamefile OLD NEW`` renames a file, optionally numbering *NEW* the same
  way so an existing target is never replaced.

Both print an ``Error:`` line on stderr and exit with status 1 on failure.
"""

import logging

import typer
from typing_extensions import Annotated

from createfile import __version__
from createfile.allocator import allocate, create_unique
from createfile.exceptions import CreateFailedError, CreateFileError, ExhaustedError
from createfile.filesystem import LocalFileSystem
from createfile.utils.constant import (
    DEFAULT_FILENAME,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_NAME_LENGTH,
)
from createfile.utils.file_utils import get_unique_filename


def version_callback(value: bool):
    """Show the application's version and exit."""
    if value:
        print(f"createfile version: {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Route library debug logs through Rich, or silence them."""
    if not verbose:
        logging.disable(logging.CRITICAL)
        return

    from rich.console import Console  # pylint: disable=import-outside-toplevel
    from rich.logging import RichHandler  # pylint: disable=import-outside-toplevel

    logging.disable(logging.NOTSET)
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _print_settings(rows: list[tuple[str, str]]) -> None:
    from rich.console import Console  # pylint: disable=import-outside-toplevel
    from rich.table import Table  # pylint: disable=import-outside-toplevel

    table = Table(title="Settings", show_header=True, header_style="bold magenta")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="yellow")
    for setting, value in rows:
        table.add_row(setting, value)
    Console(stderr=True).print(table)


app = typer.Typer(
    name="createfile",
    help="Create a file, numbering its name when it is already taken.",
    add_completion=False,
)


@app.command()
def create(
    name: Annotated[
        str | None,
        typer.Argument(
            help=f"Desired filename (default: {DEFAULT_FILENAME}).",
            show_default=False,
        ),
    ] = None,
    max_attempts: Annotated[
        int,
        typer.Option(
            "--max-attempts",
            min=0,
            help="Numbered variants to try before giving up.",
        ),
    ] = DEFAULT_MAX_ATTEMPTS,
    max_name_length: Annotated[
        int,
        typer.Option(
            "--max-name-length",
            min=1,
            help="Maximum filename length in bytes.",
        ),
    ] = DEFAULT_MAX_NAME_LENGTH,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Report the name that would be created without creating it.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            help="Suppress the success message; errors are still reported.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            help="Log every probed name.",
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show the application's version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> str:
    """Create NAME, or NAME(1), NAME(2) … if it already exists."""
    if quiet:
        verbose = False
    _configure_logging(verbose)

    desired = DEFAULT_FILENAME if name is None else name
    if verbose:
        _print_settings(
            [
                ("Desired Name", desired),
                ("Max Attempts", str(max_attempts)),
                ("Max Name Length", str(max_name_length)),
                ("Dry Run", str(dry_run)),
            ]
        )

    fs = LocalFileSystem()
    try:
        if dry_run:
            created = allocate(desired, fs.exists, max_attempts, max_name_length)
        else:
            created = create_unique(desired, fs, max_attempts, max_name_length)
    except ExhaustedError as exc:
        typer.echo(f"Error: too many files with similar names to {exc.name}", err=True)
        raise typer.Exit(code=1) from exc
    except CreateFailedError as exc:
        typer.echo(f"Error: couldn't create file {exc.name} ({exc.reason})", err=True)
        raise typer.Exit(code=1) from exc
    except CreateFileError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if not quiet:
        typer.echo(f"{'Would create' if dry_run else 'Created'}: {created}")
    return created


rename_app = typer.Typer(
    name="renamefile",
    help="Rename a file, optionally numbering the target when it is taken.",
    add_completion=False,
)


@rename_app.command()
def rename(
    old: Annotated[str, typer.Argument(help="Existing file.", show_default=False)],
    new: Annotated[str, typer.Argument(help="New name.", show_default=False)],
    unique: Annotated[
        bool,
        typer.Option(
            "--unique",
            help="Number NEW as NEW(1), NEW(2) … instead of replacing it.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            help="Log every probed name.",
        ),
    ] = False,
) -> str:
    """Rename OLD to NEW."""
    _configure_logging(verbose)

    target = new
    try:
        if unique:
            target = str(get_unique_filename(new))
        LocalFileSystem().rename(old, target)
    except CreateFileError as exc:
        typer.echo(f"Error: rename {old} {new} failed: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    except OSError as exc:
        typer.echo(
            f"Error: rename {old} {target} failed: {exc.strerror or exc}", err=True
        )
        raise typer.Exit(code=1) from exc

    typer.echo(f"Renamed: {old} -> {target}")
    return target
