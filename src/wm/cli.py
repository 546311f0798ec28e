"""Typer-based CLI for wm."""

import logging
from typing import NoReturn, Optional

import click
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from typer.core import TyperGroup

from . import __version__
from .config import load_config, resolve_config_path
from .dates import resolve_date
from .editor import edit_and_wait, open_detached
from .errors import WmError
from .paths import log_path
from .search import compile_terms, search_patterns
from .store import ensure_log_file

DEFAULT_COMMAND = "open"

HELP = """WM. A working-memory log system.

Opens the log file for the date provided, or for today when no date is
given. A missing log is created first. The program used to open logs is
set in the configuration file (wm.toml, or the path in WMCFG); run
'wm config' to edit it.

Dates may be 'today', 'yesterday', 'tomorrow', or forms such as 3/5/2024,
5-3-2024, 'Mar 5, 2024', '5 March 2024' or 5-Mar-2024.
"""


class DefaultCommandGroup(TyperGroup):
    """Route anything that is not a known command to the open command.

    Lets `wm`, `wm yesterday` and `wm March 5, 2024` work alongside
    `wm config` and `wm search`.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        position = next(
            (i for i, arg in enumerate(args) if not arg.startswith("-")),
            len(args),
        )
        if position == len(args) or args[position] not in self.commands:
            args = args[:position] + [DEFAULT_COMMAND] + args[position:]
        return super().parse_args(ctx, args)


app = typer.Typer(
    name="wm",
    help=HELP,
    cls=DefaultCommandGroup,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"wm {__version__}")
        raise typer.Exit()


def _fail(error: Exception) -> NoReturn:
    err_console.print(f"[red]Error: {escape(str(error))}[/red]")
    raise typer.Exit(code=1)


@app.callback()
def main(
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging on stderr",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Display the current version",
    ),
):
    _configure_logging(debug)


@app.command(DEFAULT_COMMAND)
def open_log(
    date: Optional[list[str]] = typer.Argument(
        None,
        help="Date of the log to open (default: today)",
        show_default=False,
    ),
):
    """Open the log for a date, creating it first if needed (the default command)."""
    date_text = " ".join(date or [])

    try:
        settings = load_config(resolve_config_path())
        calendar_date = resolve_date(date_text)
        path = log_path(calendar_date, settings.root)
        created = ensure_log_file(path, calendar_date)
        open_detached(settings.editor, path)
    except WmError as e:
        _fail(e)

    if created:
        console.print(f"[green]+[/green] Created {escape(str(path))}")
    else:
        console.print(f"[dim]Opening {escape(str(path))}[/dim]")


@app.command()
def config():
    """Open the configuration file in the editor and wait for it to close."""
    config_path = resolve_config_path()

    try:
        settings = load_config(config_path)
        edit_and_wait(settings.editor, config_path)
    except WmError as e:
        _fail(e)


@app.command()
def search(
    terms: Optional[list[str]] = typer.Argument(
        None,
        help="Regular expressions to search all logs for",
        show_default=False,
    ),
):
    """Search every log for one or more regular expressions.

    Prints a header for every log, followed by numbered context windows.
    Hits are grouped by term within each log.
    """
    terms = terms or []

    try:
        settings = load_config(resolve_config_path())
        patterns = compile_terms(terms)
    except WmError as e:
        _fail(e)

    console.print(f"searching for [{' '.join(terms)}]", markup=False, highlight=False)

    try:
        results = search_patterns(settings.root, patterns, settings.context_size)
    except WmError as e:
        _fail(e)

    for file_hits in results:
        console.print(str(file_hits.file_path), markup=False, highlight=False)
        console.print("----------")
        console.print()
        for hit in file_hits.hits:
            console.print(f"{hit.number}:", highlight=False)
            console.print(hit.context_text, markup=False, highlight=False)

    if terms and not any(file_hits.hits for file_hits in results):
        console.print("[dim]No matches[/dim]")
