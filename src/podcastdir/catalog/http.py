"""HTTP client port and its httpx implementation."""

import logging
from types import TracebackType
from typing import Any, Protocol

import httpx

from podcastdir import __version__
from podcastdir.utils.errors import CatalogConnectionError, CatalogHTTPError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


class HttpClient(Protocol):
    """Fetches JSON documents over HTTP."""

    async def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """GET a URL and return its parsed JSON body.

        Raises:
            CatalogHTTPError: On a non-2xx status or a non-JSON body
            CatalogConnectionError: On transport failure
        """
        ...


class HttpxClient:
    """HttpClient backed by a shared ``httpx.AsyncClient``.

    Example:
        >>> async with HttpxClient() as http:
        ...     data = await http.get_json("https://itunes.apple.com/lookup", {"id": "1"})
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the client.

        Args:
            client: Existing AsyncClient to use (e.g. with a mock transport)
            timeout: Request timeout in seconds for an owned client
        """
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            headers={"User-Agent": f"podcastdir/{__version__}"},
        )

    async def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        logger.debug("GET %s params=%s", url, params)

        try:
            response = await self._client.get(url, params=params)
        except httpx.HTTPError as e:
            raise CatalogConnectionError(f"Request to {url} failed: {e}") from e

        if not response.is_success:
            logger.info("Catalog returned HTTP %s for %s", response.status_code, url)
            raise CatalogHTTPError(response.status_code, str(response.url))

        try:
            return response.json()
        except ValueError as e:
            raise CatalogHTTPError(
                response.status_code,
                str(response.url),
                f"Invalid JSON in response from {response.url}",
            ) from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
