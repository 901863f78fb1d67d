"""HTTP fetch collaborators.

The endpoint depends only on the Fetcher interface, so tests and callers
can swap in any transport. HttpxFetcher is the default, backed by a
single long-lived httpx.AsyncClient.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

import httpx

from apitemplate.config import get_settings
from apitemplate.config.settings import Settings
from apitemplate.observability.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FetchResult:
    """Outcome of a single GET.

    Attributes:
        success: True for a 2xx status
        status_code: HTTP status code
        body: Raw response body (empty when not read)
    """

    success: bool
    status_code: int
    body: bytes = b""


class Fetcher(ABC):
    """Interface for issuing a single GET against a built URI."""

    @abstractmethod
    async def fetch(self, uri: str) -> FetchResult:
        """Issue a GET and return its status and body.

        Transport-level failures (connection errors, timeouts) raise;
        non-success statuses are reported through FetchResult.success.
        """
        pass

    async def aclose(self) -> None:
        """Release transport resources."""
        return None


def create_http_client(
    settings: Settings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Create an httpx.AsyncClient from configuration.

    Args:
        settings: Settings to use (defaults to get_settings())
        extra_headers: Headers added to every request

    Returns:
        Configured client; the caller owns and must close it
    """
    http = (settings or get_settings()).http
    headers: dict[str, str] = {}
    if http.user_agent:
        headers["User-Agent"] = http.user_agent
    if extra_headers:
        headers.update(extra_headers)

    return httpx.AsyncClient(
        base_url=http.base_url,
        timeout=httpx.Timeout(http.timeout_seconds),
        follow_redirects=http.follow_redirects,
        limits=httpx.Limits(max_connections=http.max_connections),
        headers=headers,
    )


class HttpxFetcher(Fetcher):
    """Fetcher backed by a shared httpx.AsyncClient.

    Pass a client to share one connection pool across several endpoints;
    in that case the caller keeps ownership and aclose() leaves it open.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client if client is not None else create_http_client(settings)

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def fetch(self, uri: str) -> FetchResult:
        response = await self._client.get(uri)
        if not response.is_success:
            return FetchResult(success=False, status_code=response.status_code)
        return FetchResult(
            success=True,
            status_code=response.status_code,
            body=response.content,
        )

    async def aclose(self) -> None:
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("http_client_closed")
