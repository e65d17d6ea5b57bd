"""
HTTP fetcher built on httpx.
"""

import asyncio
import weakref

import httpx

from interlinear._logging import log_ignored_options
from interlinear.config import InterlinearSettings, get_settings
from interlinear.exceptions import FetchError
from interlinear.fetch.base import BaseFetcher
from interlinear.models import FetchOptions, FetchResponse


# Transport cache modes mapped to request Cache-Control values
CACHE_CONTROL = {
    "no-store": "no-store",
    "no-cache": "no-cache",
    "reload": "no-cache",
}

# FetchOptions.extra keys forwarded to httpx as request keywords
REQUEST_OPTIONS = ("params", "cookies", "timeout", "follow_redirects", "extensions")


class HttpFetcher(BaseFetcher):
    """
    Fetches annotation resources over HTTP with ``httpx.AsyncClient``.

    An async client is bound to the event loop it first runs on, so the
    fetcher keeps one client per loop. A fetcher shared by a long-lived hook
    keeps working across separate ``asyncio.run`` calls and threads.

    Example:
        async with HttpFetcher() as fetcher:
            response = await fetcher.fetch("https://docs.example.com/guide_en.md")
    """

    def __init__(
        self,
        settings: InterlinearSettings | None = None,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the HTTP fetcher.

        Args:
            settings: Settings instance to use (timeout)
            client: Pre-built client used on every loop; the fetcher will not close it
            transport: Custom transport for fetcher-owned clients (e.g. httpx.MockTransport)
        """
        self._settings = settings or get_settings()
        self._transport = transport
        self._external_client = client
        self._clients: weakref.WeakKeyDictionary = weakref.WeakKeyDictionary()

    @property
    def client(self) -> httpx.AsyncClient | None:
        """Client for the running event loop, if one was created."""
        if self._external_client is not None:
            return self._external_client
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return None
        return self._clients.get(loop)

    @property
    def is_loaded(self) -> bool:
        """Whether any HTTP client exists."""
        return self._external_client is not None or len(self._clients) > 0

    def load(self) -> None:
        """Create the HTTP client for the running event loop if needed."""
        if self._external_client is not None:
            return

        loop = asyncio.get_running_loop()
        if loop in self._clients:
            return

        self._clients[loop] = httpx.AsyncClient(
            timeout=httpx.Timeout(self._settings.request_timeout, connect=10.0),
            transport=self._transport,
            follow_redirects=True,
        )

    async def aclose(self) -> None:
        """Close the client this fetcher created for the running event loop."""
        if self._external_client is not None:
            return

        client = self._clients.pop(asyncio.get_running_loop(), None)
        if client is not None:
            await client.aclose()

    async def fetch(self, url: str, options: FetchOptions | None = None) -> FetchResponse:
        self.load()
        client = self.client

        options = options or FetchOptions()
        headers = dict(options.headers)
        cache_control = CACHE_CONTROL.get(options.cache or "")
        if cache_control and "Cache-Control" not in headers:
            headers["Cache-Control"] = cache_control

        kwargs = {k: v for k, v in options.extra.items() if k in REQUEST_OPTIONS}
        ignored = sorted(set(options.extra) - set(kwargs))
        if ignored:
            log_ignored_options(url, ignored)

        try:
            response = await client.get(url, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            raise FetchError(f"Request failed: {e}", url=url) from e

        return FetchResponse(url=url, status_code=response.status_code, text=response.text)
