"""Main CLI application."""

import logging
from pathlib import Path
from typing import Annotated, Optional
from zipfile import BadZipFile

import typer
from ebooklib.epub import EpubException
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from webpub.commands.inspect import execute_layout, execute_locator, execute_toc
from webpub.errors import ParseError

app = typer.Typer(
    name="webpub",
    help="Inspect Readium locators and EPUB presentation hints.",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logs"),
    ] = False,
) -> None:
    """Inspect Readium locators and EPUB presentation hints."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


@app.command()
def locator(
    source: Annotated[
        Optional[Path],
        typer.Argument(
            help="Locator JSON file. Reads stdin if omitted.",
            exists=True,
            file_okay=True,
            dir_okay=False,
        ),
    ] = None,
    indent: Annotated[
        int,
        typer.Option("--indent", help="JSON indentation", min=0),
    ] = 2,
) -> None:
    """Parse a locator and print its canonical JSON."""
    try:
        execute_locator(source, indent, console)
    except (ParseError, UnicodeDecodeError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/]")
        raise typer.Exit(1)


@app.command()
def toc(
    book_path: Annotated[
        Path,
        typer.Argument(
            help="Path to the EPUB file",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print locators as a JSON array"),
    ] = False,
) -> None:
    """List the table of contents of an EPUB as locators."""
    try:
        execute_toc(book_path, as_json, console)
    except (EpubException, BadZipFile, OSError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/]")
        raise typer.Exit(1)


@app.command()
def layout(
    book_path: Annotated[
        Path,
        typer.Argument(
            help="Path to the EPUB file",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
) -> None:
    """Show presentation hints and the layout of each resource."""
    try:
        execute_layout(book_path, console)
    except (EpubException, BadZipFile, OSError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
