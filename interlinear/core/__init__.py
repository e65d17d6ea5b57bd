"""
Core modules for the interlinear library.

This package contains the pure, synchronous alignment engine:
- Annotation locator resolution
- Lossless blank-line segmentation
- Block eligibility classification
- Gloss markup
- Positional merge
"""

from interlinear.core.paths import (
    is_absolute,
    normalize_base_path,
    join_base_path,
    derive_annotation_path,
    resolve_annotation_url,
    is_annotation_path,
)
from interlinear.core.segmenter import split_segments, join_segments, split_annotations
from interlinear.core.classifier import (
    EligibilityRule,
    EligibilityClassifier,
    DEFAULT_RULES,
    default_classifier,
    gloss_rule,
    is_eligible,
)
from interlinear.core.markup import GlossMarkup, DEFAULT_MARKUP, escape_html, wrap_with_ruby
from interlinear.core.merger import merge_annotations, merge_content

__all__ = [
    # Paths
    "is_absolute",
    "normalize_base_path",
    "join_base_path",
    "derive_annotation_path",
    "resolve_annotation_url",
    "is_annotation_path",
    # Segmenter
    "split_segments",
    "join_segments",
    "split_annotations",
    # Classifier
    "EligibilityRule",
    "EligibilityClassifier",
    "DEFAULT_RULES",
    "default_classifier",
    "gloss_rule",
    "is_eligible",
    # Markup
    "GlossMarkup",
    "DEFAULT_MARKUP",
    "escape_html",
    "wrap_with_ruby",
    # Merger
    "merge_annotations",
    "merge_content",
]
