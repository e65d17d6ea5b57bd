"""
Pydantic data models for the interlinear library.

These models represent the core data structures used throughout the library:
- Segment: A block of the primary document with its trailing separator
- AnnotationEntry: A cache entry for one annotation resource
- FetchOptions / FetchResponse: The fetch capability's request and response
- MergeResult: Result of merging annotations into a document
"""

from interlinear.models.segment import Segment
from interlinear.models.entry import AnnotationEntry, EntryStatus
from interlinear.models.fetch import FetchOptions, FetchResponse
from interlinear.models.result import MergeResult

__all__ = [
    "Segment",
    "AnnotationEntry",
    "EntryStatus",
    "FetchOptions",
    "FetchResponse",
    "MergeResult",
]
