# ABOUTME: Shared Click options and helpers for Bookfinder CLI commands.
# ABOUTME: Provides the --json flag, the finder context manager, and result rendering.

import json
from collections.abc import Iterator
from contextlib import contextmanager

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bookfinder.metadata.google_books import GoogleBooksFinder
from bookfinder.metadata.http import BookfinderHttpClient
from bookfinder.metadata.provider import BookFinder
from bookfinder.metadata.types import NormalizedBook

json_option = click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the result as JSON instead of a table.",
)


@contextmanager
def open_finder() -> Iterator[BookFinder]:
    """Yield the default book finder (Google Books), closing its HTTP client after."""
    client = BookfinderHttpClient()
    try:
        yield GoogleBooksFinder(http_client=client)
    finally:
        client.close()


def print_book(console: Console, book: NormalizedBook, as_json: bool) -> None:
    """Render a normalized book as JSON or as a key/value table."""
    if as_json:
        click.echo(json.dumps(book.to_dict(), indent=2, ensure_ascii=False))
        return

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=14)
    table.add_column("Value")

    table.add_row("Title", escape(book.title) if book.title else "[dim]untitled[/dim]")
    table.add_row("Author", escape(book.author or "unknown"))
    if book.publisher:
        table.add_row("Publisher", escape(book.publisher))
    if book.published_date:
        table.add_row("Published", escape(book.published_date))
    table.add_row("Language", escape(book.language or "?"))
    if book.isbn13:
        table.add_row("ISBN-13", escape(book.isbn13))
    if book.isbn10:
        table.add_row("ISBN-10", escape(book.isbn10))
    if book.page_count:
        table.add_row("Pages", str(book.page_count))
    if book.categories:
        table.add_row("Categories", escape(", ".join(book.categories)))
    if book.ratings_count:
        table.add_row("Rating", f"{book.average_rating:g} ({book.ratings_count} ratings)")
    if book.description:
        table.add_row("Description", escape(book.description))
    table.add_row("Image", escape(book.image))
    table.add_row("Google ID", escape(book.google_books.id))
    if book.google_books.info:
        table.add_row("Info", escape(book.google_books.info))

    console.print(table)
