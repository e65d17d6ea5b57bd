"""
Fetch request and response data models.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, computed_field


class FetchOptions(BaseModel):
    """
    Options passed to a fetcher.

    Attributes:
        headers: Request headers
        cache: Transport cache mode ("force-cache", "no-cache", "no-store", ...)
        extra: Fetcher-specific options. HttpFetcher forwards httpx request
            keywords (params, cookies, timeout, follow_redirects, extensions);
            FileFetcher reads "encoding". Other keys are logged and ignored.
    """

    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Request headers",
    )
    cache: Optional[str] = Field(
        default=None,
        description="Transport cache mode",
    )
    extra: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional fetcher-specific options",
    )


class FetchResponse(BaseModel):
    """
    Response returned by a fetcher.

    Attributes:
        url: Locator that was fetched
        status_code: Status code (HTTP semantics, also used by the file fetcher)
        text: Response body
    """

    url: str = Field(
        ...,
        description="Locator that was fetched",
    )
    status_code: int = Field(
        ...,
        description="Response status code",
    )
    text: str = Field(
        default="",
        description="Response body",
    )

    @computed_field
    @property
    def ok(self) -> bool:
        """Whether the status code signals success (2xx)."""
        return 200 <= self.status_code < 300

    def __str__(self) -> str:
        return f"FetchResponse({self.url}, status={self.status_code})"
