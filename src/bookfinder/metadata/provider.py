# ABOUTME: BookFinder protocol defining the contract for book lookup services.
# ABOUTME: Any metadata source that resolves a query or ISBN to one NormalizedBook implements this.

from typing import Protocol, runtime_checkable

from bookfinder.metadata.types import NormalizedBook, SearchOptions


@runtime_checkable
class BookFinder(Protocol):
    """Protocol for book lookup services.

    Implementations return exactly one normalized record per call or raise;
    they never return partial results.
    """

    @property
    def name(self) -> str: ...

    def search_by_title(
        self, query: str, options: SearchOptions | None = None
    ) -> NormalizedBook: ...

    def search_by_isbn(self, isbn: str) -> NormalizedBook: ...
