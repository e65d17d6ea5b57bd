"""
Positional merge of annotation units into a primary document.

The Nth eligible block of the document receives the Nth annotation unit.
There is no content-based matching: surplus eligible blocks stay unwrapped,
surplus annotation units are reported and dropped. Separators are never
touched, so the output differs from the input only inside wrapped blocks.
"""

from interlinear._logging import log_merge_complete, log_warning
from interlinear.core.classifier import EligibilityClassifier, default_classifier
from interlinear.core.markup import DEFAULT_MARKUP, GlossMarkup
from interlinear.core.segmenter import join_segments, split_annotations, split_segments
from interlinear.models import MergeResult


def merge_annotations(
    document: str,
    annotation_text: str | None,
    classifier: EligibilityClassifier | None = None,
    markup: GlossMarkup | None = None,
    document_id: str | None = None,
) -> MergeResult:
    """
    Merge annotation units into a document and report what happened.

    Args:
        document: Primary document
        annotation_text: Raw annotation resource text
        classifier: Eligibility rules (default rule set if None)
        markup: Gloss markup (``<ruby>``/``<rt>``/``<br>`` if None)
        document_id: Identifier used in diagnostics

    Returns:
        MergeResult holding the merged content and counts
    """
    classifier = classifier or default_classifier
    markup = markup or DEFAULT_MARKUP

    segments = split_segments(document)
    annotations = split_annotations(annotation_text)

    if not annotations:
        return MergeResult(content=document, segment_count=len(segments))

    annotation_index = 0
    eligible_count = 0

    for segment in segments:
        if not classifier.is_eligible(segment.block):
            continue

        eligible_count += 1
        if annotation_index >= len(annotations):
            continue

        segment.block = markup.wrap(segment.block, annotations[annotation_index])
        annotation_index += 1

    unused = len(annotations) - annotation_index
    if unused > 0:
        if document_id:
            log_warning("Unused annotations", count=unused, document=document_id)
        else:
            log_warning("Unused annotations", count=unused)

    log_merge_complete(annotation_index, eligible_count, len(annotations))

    return MergeResult(
        content=join_segments(segments),
        segment_count=len(segments),
        eligible_count=eligible_count,
        wrapped_count=annotation_index,
        annotation_count=len(annotations),
    )


def merge_content(
    document: str,
    annotation_text: str | None,
    classifier: EligibilityClassifier | None = None,
    markup: GlossMarkup | None = None,
) -> str:
    """
    Merge annotation units into a document.

    Examples:
        >>> merge_content("Hola.\\n\\n# T\\n\\nAdiós.", "Hello.\\n\\nGoodbye.")
        '<ruby>Hola.<rt>Hello.</rt></ruby>\\n\\n# T\\n\\n<ruby>Adiós.<rt>Goodbye.</rt></ruby>'
    """
    return merge_annotations(document, annotation_text, classifier, markup).content
