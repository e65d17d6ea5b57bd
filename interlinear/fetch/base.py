"""
Abstract base class for fetching annotation resources.

This module defines the interface that all fetcher implementations must follow,
plus the helper that composes fetch options.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping

from interlinear.models import FetchOptions, FetchResponse


def build_fetch_options(
    base: Mapping[str, Any] | None = None,
    headers: Mapping[str, str] | None = None,
    default_cache: str = "force-cache",
) -> FetchOptions:
    """
    Compose fetch options from a base option set and caller headers.

    Caller headers are merged over the base set's headers. The cache mode
    falls back to ``default_cache`` only when the base set leaves it unset.

    Args:
        base: Base option set (keys "headers", "cache", anything else goes to extra)
        headers: Caller-supplied request headers
        default_cache: Cache mode used when none is given

    Returns:
        FetchOptions ready to pass to a fetcher
    """
    opts = dict(base or {})

    merged_headers = dict(opts.pop("headers", None) or {})
    if headers:
        merged_headers.update(headers)

    cache = opts.pop("cache", None) or default_cache

    return FetchOptions(headers=merged_headers, cache=cache, extra=opts)


class BaseFetcher(ABC):
    """
    Abstract interface for the fetch capability.

    Fetchers report not-found and other failures through the response status;
    they only raise for transport-level problems.

    Example:
        class MyFetcher(BaseFetcher):
            async def fetch(self, url, options=None) -> FetchResponse:
                ...
    """

    @abstractmethod
    async def fetch(self, url: str, options: FetchOptions | None = None) -> FetchResponse:
        """
        Fetch a resource.

        Args:
            url: Resolved locator
            options: Headers and cache mode

        Returns:
            FetchResponse with status code and body
        """
        pass

    def load(self) -> None:
        """Acquire any resources the fetcher needs. No-op by default."""

    async def aclose(self) -> None:
        """Release resources held by the fetcher. No-op by default."""

    async def __aenter__(self) -> "BaseFetcher":
        """Async context manager entry - loads the fetcher."""
        self.load()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - closes the fetcher."""
        await self.aclose()
