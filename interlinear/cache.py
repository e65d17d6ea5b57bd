"""
Annotation resource cache.

Fetches annotation resources once per resolved locator and keeps the settled
outcome (text or None) for the lifetime of the cache. Concurrent requests for
the same locator share one in-flight future, also across threads running
their own event loops.
"""

import asyncio
import threading
from concurrent.futures import Future

from interlinear._logging import log_cache_hit, log_fetch_start, log_warning
from interlinear.exceptions import FetchError
from interlinear.fetch.base import BaseFetcher
from interlinear.models import AnnotationEntry, EntryStatus, FetchOptions


class AnnotationCache:
    """
    Memoizing, de-duplicating front for a fetcher.

    A not-found response settles to None silently. Any other failure settles
    to None and logs a warning; errors never reach the caller. Entries are
    never evicted.

    The fetch for a locator runs on the event loop of the first caller. Its
    outcome is published through a ``concurrent.futures.Future``, which callers
    on any loop or thread await with ``asyncio.wrap_future`` (see :meth:`load`).

    Example:
        cache = AnnotationCache(HttpFetcher())
        text = await cache.load("https://docs.example.com/guide_en.md")
    """

    def __init__(self, fetcher: BaseFetcher, options: FetchOptions | None = None):
        """
        Initialize the cache.

        Args:
            fetcher: Fetch capability used for cache misses
            options: Fetch options applied to every request
        """
        self._fetcher = fetcher
        self._options = options or FetchOptions()
        self._entries: dict[str, Future] = {}
        self._tasks: set[asyncio.Task] = set()
        self._lock = threading.Lock()
        self.fetch_count = 0

    @property
    def options(self) -> FetchOptions:
        return self._options

    def get(self, url: str | None) -> Future:
        """
        Return the shared future resolving to the resource text (or None).

        A cache miss starts the fetch on the running event loop, so the first
        call for a locator must come from inside one. The future is already
        marked running: a cancelled waiter cannot cancel the shared fetch.
        """
        if not url:
            future: Future = Future()
            future.set_result(None)
            return future

        with self._lock:
            future = self._entries.get(url)
            if future is not None:
                log_cache_hit(url)
                return future

            loop = asyncio.get_running_loop()
            future = Future()
            future.set_running_or_notify_cancel()
            self._entries[url] = future
            self.fetch_count += 1

        task = loop.create_task(self._run(url, future))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return future

    async def load(self, url: str | None) -> str | None:
        """Await the resource text from any event loop."""
        return await asyncio.wrap_future(self.get(url))

    async def _run(self, url: str, future: Future) -> None:
        try:
            text = await self._fetch(url)
        except asyncio.CancelledError:
            # Owning loop shut down mid-fetch: release waiters, allow a refetch
            with self._lock:
                if self._entries.get(url) is future:
                    del self._entries[url]
            future.set_result(None)
            raise
        future.set_result(text)

    async def _fetch(self, url: str) -> str | None:
        log_fetch_start(url)
        try:
            response = await self._fetcher.fetch(url, self._options)
            if not response.ok:
                raise FetchError(
                    f"Request failed: {response.status_code}",
                    url=url,
                    status_code=response.status_code,
                )
            return response.text
        except FetchError as e:
            if e.is_not_found:
                return None
            log_warning("Failed to load annotation file", url=url, error=e.message)
            return None
        except Exception as e:
            # Transport and fetcher faults are soft failures
            log_warning("Failed to load annotation file", url=url, error=repr(e))
            return None

    def entry(self, url: str) -> AnnotationEntry | None:
        """Snapshot of the cache entry for a locator, or None if never requested."""
        future = self._entries.get(url)
        if future is None:
            return None
        if not future.done():
            return AnnotationEntry(url=url, status=EntryStatus.PENDING)
        if future.result() is None:
            return AnnotationEntry(url=url, status=EntryStatus.ABSENT)
        return AnnotationEntry(url=url, status=EntryStatus.RESOLVED, text=future.result())

    def __contains__(self, url: object) -> bool:
        return url in self._entries

    def __len__(self) -> int:
        return len(self._entries)
