"""
Annotation cache entry data model.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class EntryStatus(str, Enum):
    """State of an annotation resource in the cache."""

    PENDING = "pending"
    RESOLVED = "resolved"
    ABSENT = "absent"


class AnnotationEntry(BaseModel):
    """
    Snapshot of a cache entry for one resolved annotation locator.

    Attributes:
        url: Resolved annotation locator
        status: Whether the fetch is in flight, produced text, or produced nothing
        text: Resource text when status is RESOLVED
    """

    url: str = Field(
        ...,
        description="Resolved annotation locator",
    )
    status: EntryStatus = Field(
        default=EntryStatus.PENDING,
        description="Current state of the entry",
    )
    text: Optional[str] = Field(
        default=None,
        description="Resource text when resolved",
    )

    @property
    def is_settled(self) -> bool:
        """Whether the fetch has finished."""
        return self.status != EntryStatus.PENDING

    def __str__(self) -> str:
        return f"AnnotationEntry({self.url}, status={self.status.value})"
