# ABOUTME: Metadata package for Google Books lookup, ranking, and normalization.
# ABOUTME: Exports the finder, its search functions, and the data types callers see.

from bookfinder.metadata.candidate import ScoredCandidate
from bookfinder.metadata.google_books import (
    BookNotFoundError,
    GoogleBooksFinder,
    search_by_isbn,
    search_by_title,
)
from bookfinder.metadata.http import MetadataFetchError
from bookfinder.metadata.provider import BookFinder
from bookfinder.metadata.types import NormalizedBook, RawCandidate, SearchOptions

__all__ = [
    "BookFinder",
    "BookNotFoundError",
    "GoogleBooksFinder",
    "MetadataFetchError",
    "NormalizedBook",
    "RawCandidate",
    "ScoredCandidate",
    "SearchOptions",
    "search_by_isbn",
    "search_by_title",
]
