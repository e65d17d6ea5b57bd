"""
Gloss markup: escaping annotation text and wrapping blocks.
"""

from dataclasses import dataclass


_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}


def escape_html(text: str | None) -> str:
    """
    Escape markup-significant characters.

    Examples:
        >>> escape_html('a < b & "c"')
        'a &lt; b &amp; &quot;c&quot;'
    """
    return "".join(_ESCAPES.get(char, char) for char in (text or ""))


@dataclass(frozen=True)
class GlossMarkup:
    """Element names used to render an interlinear gloss."""
    wrap_tag: str = "ruby"
    text_tag: str = "rt"
    line_break_tag: str = "br"

    def format_annotation(self, annotation: str) -> str:
        """Escape an annotation and stack its lines with explicit line breaks."""
        escaped = escape_html(annotation).replace("\r\n", "\n")
        return f"<{self.line_break_tag}>".join(line.strip() for line in escaped.split("\n"))

    def wrap(self, block: str, annotation: str) -> str:
        """
        Wrap a block with its gloss, keeping surrounding whitespace outside.

        Examples:
            >>> GlossMarkup().wrap("  Hola  ", "Hello")
            '  <ruby>Hola<rt>Hello</rt></ruby>  '
        """
        core = block.strip()
        if not core:
            return block

        leading = block[: len(block) - len(block.lstrip())]
        trailing = block[len(block.rstrip()):]
        gloss = self.format_annotation(annotation)

        return (
            f"{leading}<{self.wrap_tag}>{core}"
            f"<{self.text_tag}>{gloss}</{self.text_tag}>"
            f"</{self.wrap_tag}>{trailing}"
        )


DEFAULT_MARKUP = GlossMarkup()


def wrap_with_ruby(block: str, annotation: str) -> str:
    """Wrap a block with the default ``<ruby>``/``<rt>`` markup."""
    return DEFAULT_MARKUP.wrap(block, annotation)
