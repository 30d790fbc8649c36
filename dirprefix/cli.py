"""CLI entrypoints."""

import re
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape

from dirprefix.models.rename import RenameOptions
from dirprefix.processors.prefix_extractor import get_dirname, get_prefix
from dirprefix.processors.rename_processor import RenameProcessor


console = Console()
err_console = Console(stderr=True)


def _debug(label: str, value: str) -> None:
    console.print(f"{label} = {value!r}", style="dim", markup=False, emoji=False, highlight=False, soft_wrap=True)


def _fail(message: str, error: Exception) -> NoReturn:
    err_console.print(f"[bold red]Error:[/bold red] {message}: {escape(str(error))}", emoji=False, soft_wrap=True)
    raise SystemExit(1) from error


@click.command(context_settings=dict(show_default=True))
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "-e",
    "pattern",
    type=str,
    required=True,
    help="Regular expression matched against the directory name. Use '' for the full name.",
)
@click.option(
    "-d",
    "--dry_run",
    "dry_run",
    is_flag=True,
    default=False,
    help="Show the renames without performing them.",
)
def cli(path: Path, pattern: str, dry_run: bool) -> None:
    """Prefix every entry of PATH with a part of the directory's own name.

    The first match of PATTERN in the directory name becomes the prefix and
    each entry is renamed to '<prefix>_<name>'. Subdirectories are renamed
    too but never entered.

    Examples:

        dirprefix photos/20241231_trip -e '\\d+'

        dirprefix photos/20241231_trip -e '' --dry_run
    """
    options = RenameOptions(path=path, pattern=pattern, dry_run=dry_run)

    try:
        dirname = get_dirname(options.path)
    except ValueError as e:
        _fail("Invalid path", e)
    _debug("dirname", dirname)

    try:
        prefix = get_prefix(options.pattern, dirname)
    except re.error as e:
        _fail("Error compiling regex", e)
    _debug("prefix", prefix)

    processor = RenameProcessor(prefix=prefix)
    try:
        plan = processor.rename_files(options.path, dry_run=options.dry_run)
    except OSError as e:
        _fail("Error renaming files", e)

    if options.dry_run:
        console.print(f"[yellow]Dry run: {len(plan)} entries would be renamed.[/yellow]")
    else:
        console.print(f"[bold green]Renamed {len(plan)} entries.[/bold green]")


def main() -> None:
    cli()
