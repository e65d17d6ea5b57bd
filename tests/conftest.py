import asyncio
import logging

import pytest

from interlinear.config import reset_settings
from interlinear.fetch.base import BaseFetcher
from interlinear.models import FetchOptions, FetchResponse


class StubFetcher(BaseFetcher):
    """Fetcher serving canned outcomes; unknown locators are 404."""

    def __init__(self, outcomes: dict | None = None):
        self.outcomes = outcomes or {}
        self.calls: list[tuple[str, FetchOptions | None]] = []
        self.gate: asyncio.Event | None = None
        self.delay = 0.0

    async def fetch(self, url, options=None):
        self.calls.append((url, options))
        if self.gate is not None:
            await self.gate.wait()
        if self.delay:
            await asyncio.sleep(self.delay)

        outcome = self.outcomes.get(url)
        if outcome is None:
            return FetchResponse(url=url, status_code=404)
        if isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, int):
            return FetchResponse(url=url, status_code=outcome)
        return FetchResponse(url=url, status_code=200, text=outcome)

    @property
    def urls(self) -> list[str]:
        return [url for url, _ in self.calls]


@pytest.fixture
def stub_fetcher():
    return StubFetcher()


@pytest.fixture(autouse=True)
def _isolate_state():
    yield
    reset_settings()
    logger = logging.getLogger("interlinear")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def warnings_from(caplog) -> list[logging.LogRecord]:
    return [
        r for r in caplog.records
        if r.name.startswith("interlinear") and r.levelno == logging.WARNING
    ]
