"""
Annotation locator resolution.

Derives the locator of a document's annotation file from the document's own
locator and the configured base path. Pure string manipulation, no I/O.
"""

import re

from interlinear.exceptions import ResolutionError


ABSOLUTE_URL_PATTERN = re.compile(r"^([a-z]+:)?//", re.IGNORECASE)


def is_absolute(url: str | None) -> bool:
    """
    Whether a locator is scheme-qualified or protocol-relative.

    Examples:
        >>> is_absolute("https://example.com/a.md")
        True
        >>> is_absolute("//cdn.example.com/a.md")
        True
        >>> is_absolute("docs/a.md")
        False
    """
    return bool(ABSOLUTE_URL_PATTERN.match(url or ""))


def normalize_base_path(base_path: str | list[str] | tuple[str, ...] | None) -> str:
    """Return the effective base path; only the first candidate of a list counts."""
    if isinstance(base_path, (list, tuple)):
        return base_path[0] if base_path else ""
    return base_path or ""


def join_base_path(base_path: str | list[str] | None, file: str | None) -> str | None:
    """
    Join a relative locator onto a base path.

    Absolute locators are returned unchanged. Otherwise the base is given
    exactly one trailing slash and the locator loses its leading one.

    Args:
        base_path: Base path, or list of candidates
        file: Locator to join

    Returns:
        Joined locator, or None if ``file`` is empty

    Examples:
        >>> join_base_path("docs", "/guide_en.md")
        'docs/guide_en.md'
        >>> join_base_path(["https://x.org/"], "guide_en.md")
        'https://x.org/guide_en.md'
    """
    if not file:
        return None

    if is_absolute(file):
        return file

    base = normalize_base_path(base_path)
    if not base:
        return file

    return base.rstrip("/") + "/" + file.lstrip("/")


def derive_annotation_path(
    file: str | None,
    suffix: str = "_en",
    extension: str = ".md",
) -> str:
    """
    Insert the language suffix before the document's extension.

    Args:
        file: Primary document locator (e.g. "guide.md")
        suffix: Language suffix (default "_en")
        extension: Extension the document must end with (case-insensitive)

    Returns:
        Annotation locator (e.g. "guide_en.md")

    Raises:
        ResolutionError: If the document does not carry the extension, or the
            rewrite would point back at the document itself
    """
    if not file:
        raise ResolutionError("No document locator to resolve")

    pattern = re.compile(re.escape(extension) + r"$", re.IGNORECASE)
    match = pattern.search(file)
    if match is None:
        raise ResolutionError(
            f"Document is not annotatable (expected {extension})", locator=file
        )

    annotation_file = file[: match.start()] + suffix + extension
    if annotation_file == file:
        raise ResolutionError(
            "Annotation locator would equal the document locator", locator=file
        )

    return annotation_file


def resolve_annotation_url(
    file: str | None,
    base_path: str | list[str] | None = None,
    suffix: str = "_en",
    extension: str = ".md",
) -> str:
    """
    Resolve the full annotation locator for a primary document.

    Raises:
        ResolutionError: If no annotation locator can be derived
    """
    url = join_base_path(base_path, derive_annotation_path(file, suffix, extension))
    if url is None:
        raise ResolutionError("Annotation locator resolved to nothing", locator=file)
    return url


def is_annotation_path(file: str, suffix: str = "_en", extension: str = ".md") -> bool:
    """Whether a locator already names an annotation file."""
    return file.lower().endswith((suffix + extension).lower())
