# ABOUTME: The `bookfinder isbn` command for exact lookup by ISBN-10 or ISBN-13.
# ABOUTME: Takes Google Books' first hit for the ISBN without ranking.

import click
from rich.console import Console
from rich.markup import escape

from bookfinder.cli import options
from bookfinder.metadata.google_books import BookNotFoundError
from bookfinder.metadata.http import MetadataFetchError


@click.command("isbn")
@click.argument("isbn_value", metavar="ISBN")
@options.json_option
def isbn(isbn_value: str, as_json: bool) -> None:
    """Look up a book by ISBN (hyphens allowed)."""
    console = Console()

    try:
        with options.open_finder() as finder:
            book = finder.search_by_isbn(isbn_value)
    except BookNotFoundError as exc:
        console.print(f"[red]{escape(str(exc))}.[/red]")
        raise SystemExit(1) from None
    except (MetadataFetchError, ValueError) as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from None

    options.print_book(console, book, as_json)
