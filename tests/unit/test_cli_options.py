# ABOUTME: Unit tests for the shared CLI helpers in bookfinder.cli.options.
# ABOUTME: Checks that open_finder closes the HTTP client it creates.

from typing import Any

import pytest

from bookfinder.cli import options
from bookfinder.metadata.google_books import GoogleBooksFinder


class ClosableClient:
    """Stand-in HTTP client that records whether close() was called."""

    def __init__(self) -> None:
        self.closed = False

    def get(self, url: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return {}

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch) -> ClosableClient:
    instance = ClosableClient()
    monkeypatch.setattr(options, "BookfinderHttpClient", lambda: instance)
    return instance


class TestOpenFinder:
    """Tests for the open_finder context manager."""

    def test_yields_google_books_finder(self, client: ClosableClient) -> None:
        """The yielded finder is a GoogleBooksFinder."""
        with options.open_finder() as finder:
            assert isinstance(finder, GoogleBooksFinder)
            assert not client.closed

    def test_closes_client_on_exit(self, client: ClosableClient) -> None:
        """The client is closed once the block finishes."""
        with options.open_finder():
            pass
        assert client.closed

    def test_closes_client_when_block_raises(self, client: ClosableClient) -> None:
        """The client is closed even if the block raises."""
        with pytest.raises(RuntimeError), options.open_finder():
            raise RuntimeError("boom")
        assert client.closed
