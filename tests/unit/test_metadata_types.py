# ABOUTME: Unit tests for the metadata dataclasses.
# ABOUTME: Validates SearchOptions defaults and bounds, and NormalizedBook serialization.

import pytest

from bookfinder.metadata.types import NormalizedBook, ProviderLinks, RawCandidate, SearchOptions


class TestSearchOptions:
    """Tests for SearchOptions dataclass."""

    def test_defaults(self) -> None:
        """Default options request 10 results with no filtering."""
        options = SearchOptions()
        assert options.max_results == 10
        assert options.exact_title_match is False
        assert options.min_rating == 0
        assert options.language is None

    def test_zero_max_results_raises(self) -> None:
        """max_results below 1 raises ValueError."""
        with pytest.raises(ValueError, match="max_results"):
            SearchOptions(max_results=0)

    def test_negative_min_rating_raises(self) -> None:
        """Negative min_rating raises ValueError."""
        with pytest.raises(ValueError, match="min_rating"):
            SearchOptions(min_rating=-1)


class TestRawCandidate:
    """Tests for RawCandidate dataclass."""

    def test_minimal_construction(self) -> None:
        """A RawCandidate needs only an id and a title; the rest stays None."""
        raw = RawCandidate(id="abc", title="Dune")
        assert raw.authors is None
        assert raw.identifiers is None
        assert raw.average_rating is None
        assert raw.thumbnail is None
        assert raw.canonical_link is None


class TestNormalizedBook:
    """Tests for NormalizedBook dataclass."""

    def _book(self, **overrides: object) -> NormalizedBook:
        fields: dict[str, object] = {
            "title": "Dune",
            "image": "https://example.com/dune.jpg",
            "google_books": ProviderLinks(id="B1hSG45JCX4C", info="https://example.com/info"),
        }
        fields.update(overrides)
        return NormalizedBook(**fields)  # type: ignore[arg-type]

    def test_defaults(self) -> None:
        """Unspecified fields default to empty values, ISBNs to None."""
        book = self._book()
        assert book.authors == []
        assert book.publisher == ""
        assert book.average_rating == 0
        assert book.page_count == 0
        assert book.isbn10 is None
        assert book.isbn13 is None

    def test_author_property_joins_names(self) -> None:
        """author joins multiple authors with a comma."""
        book = self._book(authors=["Neil Gaiman", "Terry Pratchett"])
        assert book.author == "Neil Gaiman, Terry Pratchett"

    def test_to_dict_uses_camel_case_keys(self) -> None:
        """to_dict produces the provider-compatible key names."""
        data = self._book(published_date="1965", page_count=412).to_dict()
        assert data["publishedDate"] == "1965"
        assert data["pageCount"] == 412
        assert data["averageRating"] == 0
        assert data["ratingsCount"] == 0
        assert data["googleBooks"] == {
            "id": "B1hSG45JCX4C",
            "preview": "",
            "info": "https://example.com/info",
            "canonical": "",
        }

    def test_to_dict_omits_unset_isbns(self) -> None:
        """isbn10 and isbn13 keys are absent when the book has no ISBNs."""
        data = self._book().to_dict()
        assert "isbn10" not in data
        assert "isbn13" not in data

    def test_to_dict_includes_set_isbns(self) -> None:
        """isbn10 and isbn13 are present when set."""
        data = self._book(isbn10="0441013597", isbn13="9780441013593").to_dict()
        assert data["isbn10"] == "0441013597"
        assert data["isbn13"] == "9780441013593"
