# ABOUTME: HTTP client abstraction for metadata provider API calls.
# ABOUTME: Issues a single GET per call with an injectable transport for testing.

import logging
from typing import Any, Protocol, runtime_checkable

import httpx

from bookfinder import __version__

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT = 30.0


class MetadataFetchError(Exception):
    """Raised when an HTTP request to a metadata provider fails."""


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP GET operations against metadata APIs."""

    def get(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]: ...


class BookfinderHttpClient:
    """HTTP client for metadata API calls.

    Wraps httpx.Client and turns every failure (network, non-200 status,
    undecodable body) into a MetadataFetchError. No retries are attempted.
    """

    def __init__(
        self,
        *,
        timeout: float = _DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": f"bookfinder/{__version__}"},
            "timeout": timeout,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)

    def get(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        """Send a GET request and decode the JSON body.

        Args:
            url: The URL to request.
            params: Optional query parameters, URL-encoded by httpx.

        Returns:
            Parsed JSON response body.

        Raises:
            MetadataFetchError: On transport errors, non-200 responses, or
                bodies that are not a JSON object.
        """
        logger.debug("GET %s params=%s", url, params)
        try:
            response = self._client.get(url, params=params)
        except httpx.HTTPError as exc:
            raise MetadataFetchError(f"Request failed: {url}: {exc}") from exc

        if response.status_code != 200:
            raise MetadataFetchError(f"HTTP {response.status_code} from {url}")

        try:
            data = response.json()
        except ValueError as exc:
            raise MetadataFetchError(f"Invalid JSON from {url}: {exc}") from exc

        if not isinstance(data, dict):
            raise MetadataFetchError(f"Unexpected response body from {url}")
        return data

    def close(self) -> None:
        """Release the underlying connection pool."""
        self._client.close()
