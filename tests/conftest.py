# ABOUTME: Shared pytest fixtures for Bookfinder tests.
# ABOUTME: Provides a CLI finder wired to a canned-response HTTP client.

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

import pytest

from bookfinder.metadata.google_books import GoogleBooksFinder
from tests.fixtures.http_clients import CannedHttpClient


@pytest.fixture
def cli_finder(monkeypatch: pytest.MonkeyPatch) -> Callable[[dict[str, Any] | Exception], CannedHttpClient]:
    """Point the CLI at a GoogleBooksFinder backed by a canned response.

    Call the fixture with the response body (or exception) to serve; it
    returns the client so tests can inspect the requests made.
    """

    def install(response: dict[str, Any] | Exception) -> CannedHttpClient:
        client = CannedHttpClient(response)

        @contextmanager
        def open_finder() -> Iterator[GoogleBooksFinder]:
            yield GoogleBooksFinder(http_client=client)

        monkeypatch.setattr("bookfinder.cli.options.open_finder", open_finder)
        return client

    return install
