# ABOUTME: Maps a raw Google Books candidate onto the stable NormalizedBook shape.
# ABOUTME: Applies field defaults, extracts ISBNs, and builds the fallback cover image URL.

from urllib.parse import quote, urlencode

from bookfinder.metadata.types import Identifier, NormalizedBook, ProviderLinks, RawCandidate

_IMAGE_SEARCH_URL = "https://tse2.mm.bing.net/th"

# Presentation parameters for the fallback image: ~256px wide, moderate
# adult filter, English-India market. Order matters for URL stability.
_IMAGE_SEARCH_PARAMS = (
    ("w", "256"),
    ("c", "7"),
    ("rs", "1"),
    ("p", "0"),
    ("dpr", "3"),
    ("pid", "1.7"),
    ("mkt", "en-IN"),
    ("adlt", "moderate"),
)

# Characters JavaScript's encodeURIComponent leaves alone, beyond alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"

_ISBN_10 = "ISBN_10"
_ISBN_13 = "ISBN_13"


def build_fallback_image_url(title: str, authors: list[str]) -> str:
    """Build an image-search URL for "{title} by {authors}".

    Used when the provider has no thumbnail. The result is a deterministic
    string; nothing guarantees the search endpoint returns an image for it.
    """
    search = f"{title} by {', '.join(authors)}"
    query = quote(search, safe=_URI_COMPONENT_SAFE)
    return f"{_IMAGE_SEARCH_URL}?q={query}&{urlencode(_IMAGE_SEARCH_PARAMS)}"


def find_identifier(identifiers: list[Identifier] | None, id_type: str) -> str | None:
    """Return the first identifier value of the given type, or None."""
    for entry in identifiers or []:
        if entry.type == id_type:
            return entry.identifier
    return None


def normalize_candidate(candidate: RawCandidate) -> NormalizedBook:
    """Convert a RawCandidate into a NormalizedBook.

    This is the only place provider defaults are applied: missing strings
    become "", missing numbers 0, missing lists [].
    """
    authors = list(candidate.authors or [])
    image = candidate.thumbnail or build_fallback_image_url(candidate.title, authors)

    return NormalizedBook(
        title=candidate.title,
        authors=authors,
        publisher=candidate.publisher or "",
        published_date=candidate.published_date or "",
        description=candidate.description or "",
        image=image,
        language=candidate.language or "",
        average_rating=candidate.average_rating or 0,
        ratings_count=candidate.ratings_count or 0,
        categories=list(candidate.categories or []),
        page_count=candidate.page_count or 0,
        isbn10=find_identifier(candidate.identifiers, _ISBN_10),
        isbn13=find_identifier(candidate.identifiers, _ISBN_13),
        google_books=ProviderLinks(
            id=candidate.id,
            preview=candidate.preview_link or "",
            info=candidate.info_link or "",
            canonical=candidate.canonical_link or "",
        ),
    )
