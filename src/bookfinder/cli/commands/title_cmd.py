# ABOUTME: The `bookfinder title` command for finding the best match for a title query.
# ABOUTME: Ranks Google Books results and prints the winning record.

import click
from rich.console import Console
from rich.markup import escape

from bookfinder.cli import options
from bookfinder.metadata.google_books import BookNotFoundError
from bookfinder.metadata.http import MetadataFetchError
from bookfinder.metadata.types import SearchOptions


@click.command("title")
@click.argument("query")
@click.option(
    "-n",
    "--max-results",
    type=click.IntRange(min=1),
    default=10,
    help="How many candidates to request from Google Books (default 10).",
)
@click.option(
    "--exact",
    "exact_title_match",
    is_flag=True,
    default=False,
    help="Prefer candidates whose title equals the query exactly.",
)
@click.option(
    "--min-rating",
    type=click.FloatRange(min=0.0),
    default=0.0,
    help="Drop candidates rated below this, unless that drops all of them.",
)
@click.option(
    "-l",
    "--language",
    default=None,
    help="Restrict results to a language code (e.g. 'en').",
)
@options.json_option
def title(
    query: str,
    max_results: int,
    exact_title_match: bool,
    min_rating: float,
    language: str | None,
    as_json: bool,
) -> None:
    """Find the most relevant book for a title or structured QUERY."""
    console = Console()
    search_options = SearchOptions(
        max_results=max_results,
        exact_title_match=exact_title_match,
        min_rating=min_rating,
        language=language,
    )

    try:
        with options.open_finder() as finder:
            book = finder.search_by_title(query, search_options)
    except BookNotFoundError:
        console.print(f"[red]No book found for {escape(repr(query))}.[/red]")
        raise SystemExit(1) from None
    except (MetadataFetchError, ValueError) as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from None

    options.print_book(console, book, as_json)
