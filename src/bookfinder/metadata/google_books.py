# ABOUTME: Google Books finder: one volumes search per call, ranked down to a single best match.
# ABOUTME: Title searches are scored and filtered; ISBN searches take the provider's first hit.

import logging
import re

from bookfinder.metadata.candidate import ScoredCandidate
from bookfinder.metadata.google_books_parser import parse_search_results
from bookfinder.metadata.http import BookfinderHttpClient, HttpClient
from bookfinder.metadata.normalizer import normalize_candidate
from bookfinder.metadata.scoring import is_exact_title_match, score_candidate
from bookfinder.metadata.types import NormalizedBook, RawCandidate, SearchOptions

logger = logging.getLogger(__name__)

_GOOGLE_BOOKS_URL = "https://www.googleapis.com/books/v1/volumes"

# Queries made only of digits and hyphens look like ISBNs and go through as-is.
_ISBN_SHAPED_RE = re.compile(r"[0-9-]+")


class BookNotFoundError(Exception):
    """Raised when the provider returns no candidates for a search."""

    def __init__(self, message: str, *, query: str | None = None, isbn: str | None = None) -> None:
        super().__init__(message)
        self.query = query
        self.isbn = isbn


def build_search_query(query: str) -> str:
    """Turn user input into the provider's `q` value.

    Field-qualified input (anything with a colon) and ISBN-shaped input pass
    through untouched; everything else becomes a quoted title phrase.
    """
    if ":" in query or _ISBN_SHAPED_RE.fullmatch(query):
        return query
    return f'intitle:"{query}"'


def rank_candidates(
    candidates: list[RawCandidate], query: str, options: SearchOptions
) -> list[ScoredCandidate]:
    """Score, filter, and sort candidates for a title query.

    The rating filter applies as-is; the exact-title filter only narrows when
    something in the working set matches. Emptiness is checked once, after
    both filters: an empty working set falls back to every candidate at
    score 0, which leaves the provider's order in charge.
    Returns candidates best-first; equal scores keep provider order.
    """
    scored = [ScoredCandidate(candidate=c, score=score_candidate(c, query)) for c in candidates]
    working = scored

    if options.min_rating > 0:
        working = [s for s in working if (s.candidate.average_rating or 0) >= options.min_rating]

    if options.exact_title_match:
        exact = [s for s in working if is_exact_title_match(s.candidate, query)]
        if exact:
            working = exact
        else:
            logger.debug("No exact title match for %r, keeping all candidates", query)

    if not working:
        logger.debug("Filters removed every candidate for %r, using provider order", query)
        working = [ScoredCandidate(candidate=c, score=0) for c in candidates]

    return sorted(working, key=lambda s: s.score, reverse=True)


class GoogleBooksFinder:
    """Book finder backed by the Google Books volumes API.

    Each call issues exactly one GET through the injected HttpClient. Transport
    failures from the client propagate to the caller unchanged.
    """

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    @property
    def name(self) -> str:
        return "googlebooks"

    def search_by_title(
        self, query: str, options: SearchOptions | None = None
    ) -> NormalizedBook:
        """Find the most relevant volume for free text or a structured query.

        Raises:
            ValueError: If the query is blank.
            BookNotFoundError: If the provider returns no candidates.
        """
        if not query.strip():
            raise ValueError("query must not be blank")
        options = options or SearchOptions()

        params: dict[str, str] = {"q": build_search_query(query)}
        if options.language:
            params["langRestrict"] = options.language
        params["maxResults"] = str(options.max_results)

        data = self._http.get(_GOOGLE_BOOKS_URL, params=params)
        candidates = parse_search_results(data)
        if not candidates:
            logger.error("No results found for query %r: %s", query, data)
            raise BookNotFoundError("Book not found", query=query)

        ranked = rank_candidates(candidates, query, options)
        best = ranked[0]
        logger.debug(
            "Picked %s (%r) with score %.2f out of %d candidate(s)",
            best.candidate.id,
            best.candidate.title,
            best.score,
            len(candidates),
        )
        return normalize_candidate(best.candidate)

    def search_by_isbn(self, isbn: str) -> NormalizedBook:
        """Look up a volume by ISBN-10 or ISBN-13.

        Hyphens are stripped before querying. ISBN matches are taken to be
        precise, so the provider's first result is returned without ranking.

        Raises:
            ValueError: If nothing is left of the ISBN once hyphens are removed.
            BookNotFoundError: If the provider returns no candidates.
        """
        clean_isbn = isbn.replace("-", "").strip()
        if not clean_isbn:
            raise ValueError("isbn must not be blank")

        data = self._http.get(_GOOGLE_BOOKS_URL, params={"q": f"isbn:{clean_isbn}"})
        candidates = parse_search_results(data)
        if not candidates:
            logger.error("No results found for ISBN %s", isbn)
            raise BookNotFoundError(f"Book with ISBN {isbn} not found", isbn=isbn)

        return normalize_candidate(candidates[0])


def search_by_title(
    query: str,
    options: SearchOptions | None = None,
    *,
    http_client: HttpClient | None = None,
) -> NormalizedBook:
    """Search Google Books for a title and return the best match.

    Builds (and closes) a default BookfinderHttpClient unless one is supplied.
    """
    if http_client is not None:
        return GoogleBooksFinder(http_client=http_client).search_by_title(query, options)
    client = BookfinderHttpClient()
    try:
        return GoogleBooksFinder(http_client=client).search_by_title(query, options)
    finally:
        client.close()


def search_by_isbn(isbn: str, *, http_client: HttpClient | None = None) -> NormalizedBook:
    """Search Google Books by ISBN and return the first match."""
    if http_client is not None:
        return GoogleBooksFinder(http_client=http_client).search_by_isbn(isbn)
    client = BookfinderHttpClient()
    try:
        return GoogleBooksFinder(http_client=client).search_by_isbn(isbn)
    finally:
        client.close()
