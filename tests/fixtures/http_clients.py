# ABOUTME: Fake HTTP clients shared by the finder, integration, and CLI tests.
# ABOUTME: CannedHttpClient serves one fixed body (or error) and records every request.

from typing import Any


class CannedHttpClient:
    """HTTP client returning one fixed body (or raising one error) for every GET."""

    def __init__(self, response: dict[str, Any] | Exception) -> None:
        self._response = response
        self.request_log: list[tuple[str, dict[str, str] | None]] = []

    def get(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        self.request_log.append((url, params))
        if isinstance(self._response, Exception):
            raise self._response
        return self._response
