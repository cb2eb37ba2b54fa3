"""Inspect command implementations."""

import sys
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from webpub.core.epub_parser import EpubParser
from webpub.models.locator import Locator


def execute_locator(source: Path | None, indent: int, console: Console) -> None:
    """Parse a locator document and print its canonical JSON."""
    text = source.read_text(encoding="utf-8") if source else sys.stdin.read()

    locator = Locator.from_json_string(text)
    if locator is None:
        console.print("[yellow]No locator in document[/]")
        return

    console.print_json(data=locator.to_json(), indent=indent)


def execute_toc(book_path: Path, as_json: bool, console: Console) -> None:
    """List the table of contents of an EPUB as locators."""
    locators = EpubParser.from_path(book_path).toc_locators()

    if as_json:
        console.print_json(data=[locator.to_json() for locator in locators])
        return

    if not locators:
        console.print("[yellow]No table of contents found[/]")
        return

    table = Table(title="Table of Contents", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Href", style="white")
    table.add_column("Fragment", style="green")
    table.add_column("Title", style="white")

    for i, locator in enumerate(locators):
        table.add_row(
            str(i + 1),
            locator.href,
            locator.locations.fragments[0] if locator.locations.fragments else "",
            locator.title or "",
        )

    console.print(table)


def execute_layout(book_path: Path, console: Console) -> None:
    """Show presentation hints and the layout of each reading order resource."""
    parsed = EpubParser.from_path(book_path).parse()
    presentation = parsed.metadata.presentation

    hints = presentation.to_json()
    if hints:
        body = "\n".join(f"[bold]{key}:[/] {value}" for key, value in hints.items())
    else:
        body = "[dim]No presentation hints[/]"
    console.print(Panel(body, title=parsed.metadata.title))

    table = Table(title="Reading Order", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Href", style="white")
    table.add_column("Type", style="dim")
    table.add_column("Layout", style="green")

    for i, link in enumerate(parsed.reading_order):
        table.add_row(
            str(i + 1),
            link.href,
            link.type or "",
            presentation.layout_of(link).value,
        )

    console.print(table)
