"""
Splitting documents into blocks on blank-line boundaries.

A blank-line boundary is a maximal run of two or more line breaks. The
primary document is split losslessly (every block keeps the boundary that
followed it); the annotation text is split into trimmed, non-empty units.
"""

import re

from interlinear.models import Segment


# "\r\n" counts as a single line break so CRLF documents round-trip exactly
BOUNDARY_PATTERN = re.compile(r"(?:\r?\n){2,}")


def split_segments(text: str | None) -> list[Segment]:
    """
    Split a document into segments that reconstruct it exactly.

    Args:
        text: Primary document

    Returns:
        Ordered segments; always at least one (the last one has an empty separator)

    Examples:
        >>> [s.block for s in split_segments("a\\n\\n\\nb")]
        ['a', 'b']
        >>> "".join(s.text for s in split_segments("a\\n\\nb\\n")) == "a\\n\\nb\\n"
        True
    """
    text = text or ""
    segments = []
    last_index = 0

    for match in BOUNDARY_PATTERN.finditer(text):
        segments.append(Segment(block=text[last_index:match.start()], separator=match.group(0)))
        last_index = match.end()

    segments.append(Segment(block=text[last_index:], separator=""))

    return segments


def join_segments(segments: list[Segment]) -> str:
    """Concatenate segments back into a document."""
    return "".join(segment.block + segment.separator for segment in segments)


def split_annotations(text: str | None) -> list[str]:
    """
    Split annotation text into trimmed, non-empty units.

    Examples:
        >>> split_annotations("one\\n\\n\\n  two  \\n\\n   ")
        ['one', 'two']
    """
    normalized = (text or "").replace("\r\n", "\n")
    units = (unit.strip() for unit in BOUNDARY_PATTERN.split(normalized))
    return [unit for unit in units if unit]
