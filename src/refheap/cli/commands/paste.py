"""Paste commands."""
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from ..app import app, app_state
from ..utils.api_error_handler import APIErrorHandler
from ...api import Paste

__all__ = []

console = Console()


def _read_contents(file: Path | None) -> str:
    """Read paste contents from a file, or from stdin if no file was given."""
    if file is None:
        return sys.stdin.read()
    return file.read_text(encoding='utf-8')


def _print_paste(paste: Paste) -> None:
    table = Table(title=f"Paste {paste.paste_id}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("URL", paste.url)
    table.add_row("User", paste.user or "[dim]anonymous[/dim]")
    table.add_row("Language", paste.language)
    table.add_row("Private", "yes" if paste.private else "no")
    table.add_row("Lines", str(paste.lines))
    table.add_row("Views", str(paste.views))
    table.add_row("Date", paste.date)

    console.print(table)


@app.command()
def get(
        paste_id: str = typer.Argument(..., help="ID of the paste"),
        raw: bool = typer.Option(
            False, "--raw", "-r",
            help="Print only the contents of the paste"
        )
):
    """
    Show a paste.
    """
    with APIErrorHandler(console):
        with app_state.client() as client:
            paste = client.get_paste(paste_id)

    if not raw:
        _print_paste(paste)
    console.print(paste.contents, markup=False, highlight=False, soft_wrap=True)


@app.command()
def create(
        file: Path | None = typer.Argument(
            None, exists=True, dir_okay=False,
            help="File to paste (reads stdin if omitted)"
        ),
        language: str | None = typer.Option(
            None, "--language", "-l",
            help="Language of the paste, e.g. Python (RefHeap guesses if omitted)"
        ),
        private: bool = typer.Option(
            False, "--private", "-p",
            help="Create a private paste"
        )
):
    """
    Create a new paste.
    """
    paste = Paste(contents=_read_contents(file), language=language or "", private=private)

    with APIErrorHandler(console):
        with app_state.client() as client:
            client.create(paste)

    console.print(f"[green]✓[/green] Created paste [cyan]{paste.paste_id}[/cyan]: {paste.url}")


@app.command()
def edit(
        paste_id: str = typer.Argument(..., help="ID of the paste"),
        file: Path | None = typer.Argument(
            None, exists=True, dir_okay=False,
            help="File with the new contents (keeps the current contents if omitted)"
        ),
        language: str | None = typer.Option(
            None, "--language", "-l",
            help="New language of the paste"
        ),
        private: bool | None = typer.Option(
            None, "--private/--public",
            help="Change the visibility of the paste"
        )
):
    """
    Edit a paste you own.
    """
    with APIErrorHandler(console):
        with app_state.client() as client:
            paste = client.get_paste(paste_id)
            if file is not None:
                paste.contents = _read_contents(file)
            if language is not None:
                paste.language = language
            if private is not None:
                paste.private = private
            client.save(paste)

    console.print(f"[green]✓[/green] Saved paste [cyan]{paste.paste_id}[/cyan]: {paste.url}")


@app.command()
def delete(
        paste_id: str = typer.Argument(..., help="ID of the paste"),
        yes: bool = typer.Option(
            False, "--yes", "-y",
            help="Don't ask for confirmation"
        )
):
    """
    Delete a paste you own.
    """
    if not yes:
        typer.confirm(f"Delete paste {paste_id}?", abort=True)

    with APIErrorHandler(console):
        with app_state.client() as client:
            client.delete(Paste(paste_id=paste_id))

    console.print(f"[green]✓[/green] Deleted paste [cyan]{paste_id}[/cyan]")


@app.command()
def fork(
        paste_id: str = typer.Argument(..., help="ID of the paste to fork"),
):
    """
    Fork a paste into a new one owned by you.
    """
    paste = Paste(paste_id=paste_id)
    with APIErrorHandler(console):
        with app_state.client() as client:
            client.fork(paste)

    console.print(f"[green]✓[/green] Forked [cyan]{paste_id}[/cyan] to "
                  f"[cyan]{paste.paste_id}[/cyan]: {paste.url}")


@app.command()
def highlight(
        paste_id: str = typer.Argument(..., help="ID of the paste"),
):
    """
    Print the syntax highlighted HTML of a paste.
    """
    with APIErrorHandler(console):
        with app_state.client() as client:
            result = client.get_highlighted(Paste(paste_id=paste_id))

    console.print(result.content, markup=False, highlight=False, soft_wrap=True)
