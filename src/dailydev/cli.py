"""Typer-based CLI for dailydev."""

import logging
import sys
from datetime import date as date_cls
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import DEFAULT_EDITOR, DailyConfig
from .editor import CommandEditor, Editor, NullEditor
from .errors import DailyDevError
from .index import list_entries
from .journal import append_task, create_today_entry, init_journal
from .paths import DailyPaths
from .prompting import ConsoleInput
from .templates import TemplateStore

app = typer.Typer(
    name="dailydev",
    help="dailydev - dated markdown dev journal",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


class Context:
    """Objects shared by all commands of one invocation."""

    def __init__(self, config: DailyConfig, open_editor: bool = True):
        self.config = config
        self.paths = DailyPaths.from_config(config)
        self.store = TemplateStore(config, self.paths)
        self.editor: Editor = CommandEditor(config.editor, quiet=config.editor == DEFAULT_EDITOR) if open_editor else NullEditor()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _fail(error: DailyDevError) -> None:
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    if error.hint:
        console.print(f"[yellow]{error.hint}[/yellow]")
    raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def root(
    ctx: typer.Context,
    journal_dir: str = typer.Option(
        None,
        "--dir",
        help="Journal directory (default: DAILYDEV_DIR env or ./.daily)",
    ),
    no_open: bool = typer.Option(
        False,
        "--no-open",
        help="Do not open entries in the editor",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable debug logging",
    ),
):
    """Create and maintain dated markdown dev journal entries."""
    _configure_logging(verbose)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_usage())
        raise typer.Exit(code=1)

    ctx.obj = Context(DailyConfig.from_env(journal_dir), open_editor=not no_open)


@app.command()
def init(
    ctx: typer.Context,
    lang: str = typer.Option(
        None,
        "--lang",
        "-l",
        help="Template language (ru or en); asked interactively when omitted",
    ),
):
    """Initialize the journal: templates, index and language.

    This command is idempotent - an existing journal is left as is.
    """
    state: Context = ctx.obj

    try:
        result = init_journal(state.store, ConsoleInput(console), lang=lang)
    except DailyDevError as e:
        _fail(e)

    if result.already_initialized:
        console.print(f"[yellow]Journal already initialized at {escape(str(state.paths.root))} ({result.lang})[/yellow]")
        return

    for path in result.created:
        console.print(f"[green]+[/green] Created {escape(str(path))}")
    console.print(f"[bold green]Journal initialized ({result.lang})[/bold green]")


@app.command()
def create(
    ctx: typer.Context,
    date: str = typer.Option(
        None,
        "--date",
        "-d",
        help="Entry date (YYYY-MM-DD, default: today)",
    ),
):
    """Create today's entry from the start template and add it to the index."""
    state: Context = ctx.obj

    entry_date = None
    if date:
        try:
            entry_date = date_cls.fromisoformat(date)
        except ValueError:
            console.print(f"[red]Error: Invalid date {escape(repr(date))}, expected YYYY-MM-DD[/red]")
            raise typer.Exit(code=1)

    try:
        result = create_today_entry(state.paths, state.store, state.editor, today=entry_date)
    except DailyDevError as e:
        _fail(e)

    if not result.created:
        console.print(f"[yellow]{result.date}.md already started[/yellow]")
        return

    console.print(f"[green]Created:[/green] {escape(str(result.entry_path))}")
    if result.index_update and not result.index_update.added:
        console.print("[dim]Index already lists this entry[/dim]")


@app.command()
def task(
    ctx: typer.Context,
    name: Optional[List[str]] = typer.Argument(
        None,
        help="Task name (default: Untitled)",
    ),
):
    """Append a timestamped task block to today's entry."""
    state: Context = ctx.obj

    try:
        result = append_task(state.paths, state.store, state.editor, name_words=name or [])
    except DailyDevError as e:
        _fail(e)

    console.print(f"[green]Added task[/green] {escape(result.task_name)} [dim]({result.timestamp})[/dim] to {escape(str(result.entry_path))}")


@app.command("list")
def list_command(ctx: typer.Context):
    """Show the entries listed in the index."""
    state: Context = ctx.obj

    if not state.store.is_initialized():
        console.print(f"[red]Error: Journal not initialized at {escape(str(state.paths.root))}[/red]")
        console.print("[yellow]Run 'dailydev init' first[/yellow]")
        raise typer.Exit(code=1)

    entries = list_entries(state.paths.index_file)
    if not entries:
        console.print("[dim]No entries in index[/dim]")
        return

    table = Table(title=f"{len(entries)} Entr{'y' if len(entries) == 1 else 'ies'}")
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Path", style="dim")
    for entry_date, path in entries:
        table.add_row(escape(entry_date), escape(path))

    console.print(table)


@app.command()
def version():
    """Show dailydev version."""
    from . import __version__
    console.print(f"dailydev v{__version__}")


def main():
    """Entry point for the CLI.

    Usage errors (unknown command, bad option) exit with code 1.
    """
    try:
        app()
    except SystemExit as e:
        sys.exit(1 if e.code == 2 else e.code)


if __name__ == "__main__":
    main()
