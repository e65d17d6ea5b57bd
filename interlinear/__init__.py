"""
interlinear — Interlinear glosses for rendered documents.

Aligns the prose blocks of a primary-language document with the paragraphs of
a secondary-language annotation file (``guide.md`` -> ``guide_en.md``) and wraps
each aligned block in ``<ruby>`` markup. Headings, code, lists, quotes, tables
and raw markup are left untouched.

Usage:
    from interlinear import AnnotationHook, configure

    hook = AnnotationHook(settings=configure(base_path="https://docs.example.com/"))

    # In the rendering pipeline's "before parse" extension point
    content = await hook(content, "guide.md")

    # Or merge text directly
    from interlinear.core import merge_content

    merged = merge_content(document, annotation_text)
"""

from interlinear.models import (
    Segment,
    AnnotationEntry,
    EntryStatus,
    FetchOptions,
    FetchResponse,
    MergeResult,
)
from interlinear.config import InterlinearSettings, get_settings, configure
from interlinear.exceptions import (
    InterlinearError,
    ResolutionError,
    FetchError,
    MergeError,
    ConfigurationError,
)
from interlinear.cache import AnnotationCache
from interlinear.adapter import AnnotationHook

__version__ = "0.1.0"
__all__ = [
    # Version
    "__version__",
    # Models
    "Segment",
    "AnnotationEntry",
    "EntryStatus",
    "FetchOptions",
    "FetchResponse",
    "MergeResult",
    # Config
    "InterlinearSettings",
    "get_settings",
    "configure",
    # Exceptions
    "InterlinearError",
    "ResolutionError",
    "FetchError",
    "MergeError",
    "ConfigurationError",
    # Pipeline
    "AnnotationCache",
    "AnnotationHook",
]
