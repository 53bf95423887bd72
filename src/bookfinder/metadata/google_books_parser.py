# ABOUTME: Parsing functions for Google Books API JSON responses.
# ABOUTME: Converts volumes search payloads into RawCandidate instances without defaulting.

from typing import Any

from bookfinder.metadata.types import Identifier, RawCandidate


def parse_identifiers(entries: list[dict[str, Any]] | None) -> list[Identifier] | None:
    """Parse the industryIdentifiers list, skipping entries without a value."""
    if entries is None:
        return None
    identifiers: list[Identifier] = []
    for entry in entries:
        value = entry.get("identifier")
        if not value:
            continue
        identifiers.append(Identifier(type=entry.get("type", ""), identifier=value))
    return identifiers


def parse_volume(item: dict[str, Any]) -> RawCandidate:
    """Parse a single search result item into a RawCandidate.

    Optional fields stay None when the provider omits them. A missing
    volumeInfo block yields a candidate with only its id and an empty title.
    """
    info = item.get("volumeInfo") or {}
    image_links = info.get("imageLinks") or {}

    return RawCandidate(
        id=item.get("id") or "",
        title=info.get("title") or "",
        authors=info.get("authors"),
        publisher=info.get("publisher"),
        published_date=info.get("publishedDate"),
        description=info.get("description"),
        identifiers=parse_identifiers(info.get("industryIdentifiers")),
        page_count=info.get("pageCount"),
        print_type=info.get("printType"),
        categories=info.get("categories"),
        average_rating=info.get("averageRating"),
        ratings_count=info.get("ratingsCount"),
        maturity_rating=info.get("maturityRating"),
        thumbnail=image_links.get("thumbnail"),
        language=info.get("language"),
        preview_link=info.get("previewLink"),
        info_link=info.get("infoLink"),
        canonical_link=info.get("canonicalVolumeLink"),
    )


def parse_search_results(data: dict[str, Any]) -> list[RawCandidate]:
    """Parse a volumes search response into candidates, preserving provider order.

    A missing or null "items" field means the provider found nothing.
    """
    items = data.get("items") or []
    return [parse_volume(item) for item in items]
