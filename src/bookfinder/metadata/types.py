# ABOUTME: Core data structures for search options, provider candidates, and normalized books.
# ABOUTME: RawCandidate mirrors the provider payload; NormalizedBook is the stable output shape.

from dataclasses import dataclass, field
from typing import Any

_DEFAULT_MAX_RESULTS = 10


@dataclass
class SearchOptions:
    """Tuning knobs for a title search.

    max_results caps how many candidates the provider returns. min_rating and
    exact_title_match narrow the candidates, but never down to nothing.
    language restricts provider results to one language code.
    """

    max_results: int = _DEFAULT_MAX_RESULTS
    exact_title_match: bool = False
    min_rating: float = 0
    language: str | None = None

    def __post_init__(self) -> None:
        if self.max_results < 1:
            msg = f"max_results must be at least 1, got {self.max_results}"
            raise ValueError(msg)
        if self.min_rating < 0:
            msg = f"min_rating must be non-negative, got {self.min_rating}"
            raise ValueError(msg)


@dataclass
class Identifier:
    """An industry identifier attached to a volume (ISBN_10, ISBN_13, OTHER, ...)."""

    type: str
    identifier: str


@dataclass
class RawCandidate:
    """A single volume as returned by the provider.

    Every field except the provider id and title may be absent. Absent values
    stay None here; defaults are applied once, during normalization.
    """

    id: str
    title: str
    authors: list[str] | None = None
    publisher: str | None = None
    published_date: str | None = None
    description: str | None = None
    identifiers: list[Identifier] | None = None
    page_count: int | None = None
    print_type: str | None = None
    categories: list[str] | None = None
    average_rating: float | None = None
    ratings_count: int | None = None
    maturity_rating: str | None = None
    thumbnail: str | None = None
    language: str | None = None
    preview_link: str | None = None
    info_link: str | None = None
    canonical_link: str | None = None


@dataclass
class ProviderLinks:
    """Provider id and the three volume URLs carried through to the output."""

    id: str
    preview: str = ""
    info: str = ""
    canonical: str = ""


@dataclass
class NormalizedBook:
    """The normalized best match for a search.

    All list and scalar fields carry concrete defaults; only the ISBNs are
    optional since a volume may simply not have one.
    """

    title: str
    image: str
    google_books: ProviderLinks
    authors: list[str] = field(default_factory=list)
    publisher: str = ""
    published_date: str = ""
    description: str = ""
    language: str = ""
    average_rating: float = 0
    ratings_count: int = 0
    categories: list[str] = field(default_factory=list)
    page_count: int = 0
    isbn10: str | None = None
    isbn13: str | None = None

    @property
    def author(self) -> str:
        """Convenience property: joined author string for display."""
        return ", ".join(self.authors)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the provider-compatible camelCase shape.

        isbn10/isbn13 are left out entirely when unset.
        """
        data: dict[str, Any] = {
            "title": self.title,
            "authors": list(self.authors),
            "publisher": self.publisher,
            "publishedDate": self.published_date,
            "description": self.description,
            "image": self.image,
            "language": self.language,
            "averageRating": self.average_rating,
            "ratingsCount": self.ratings_count,
            "categories": list(self.categories),
            "pageCount": self.page_count,
        }
        if self.isbn10 is not None:
            data["isbn10"] = self.isbn10
        if self.isbn13 is not None:
            data["isbn13"] = self.isbn13
        data["googleBooks"] = {
            "id": self.google_books.id,
            "preview": self.google_books.preview,
            "info": self.google_books.info,
            "canonical": self.google_books.canonical,
        }
        return data
