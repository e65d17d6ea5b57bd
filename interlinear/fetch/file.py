"""
Local filesystem fetcher.

Serves annotation files from a directory, for building static sites or
running the batch command without a web server.
"""

import asyncio
from pathlib import Path
from urllib.parse import unquote, urlparse

from interlinear._logging import log_ignored_options
from interlinear.exceptions import FetchError
from interlinear.fetch.base import BaseFetcher
from interlinear.models import FetchOptions, FetchResponse


class FileFetcher(BaseFetcher):
    """
    Reads annotation resources from disk.

    Relative locators are resolved against ``root``; ``file://`` URLs are used
    as-is. A missing file is reported as a 404 response, an unreadable one as 500.
    """

    def __init__(self, root: str | Path = ".", encoding: str = "utf-8"):
        self.root = Path(root)
        self.encoding = encoding

    def resolve_path(self, url: str) -> Path:
        """Map a locator onto a filesystem path."""
        parsed = urlparse(url)
        if parsed.scheme == "file":
            return Path(unquote(parsed.path))
        if parsed.scheme and len(parsed.scheme) > 1:
            raise FetchError(f"Unsupported scheme for file fetcher: {parsed.scheme}", url=url)
        return self.root / unquote(url).lstrip("/")

    def _read(self, path: Path, encoding: str) -> tuple[int, str]:
        if not path.is_file():
            return 404, ""
        try:
            return 200, path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError):
            return 500, ""

    async def fetch(self, url: str, options: FetchOptions | None = None) -> FetchResponse:
        path = self.resolve_path(url)
        extra = dict(options.extra) if options else {}
        encoding = extra.pop("encoding", self.encoding)
        if extra:
            log_ignored_options(url, sorted(extra))
        status_code, text = await asyncio.to_thread(self._read, path, encoding)
        return FetchResponse(url=url, status_code=status_code, text=text)
