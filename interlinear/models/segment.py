"""
Document segment data model.
"""

from pydantic import BaseModel, Field


class Segment(BaseModel):
    """
    One block of a primary document plus the blank-line run that followed it.

    Joining ``block + separator`` for every segment in order reproduces the
    source document exactly.

    Attributes:
        block: Text between two blank-line boundaries
        separator: The boundary text that followed the block ("" for the last one)
    """

    block: str = Field(
        ...,
        description="Text between two blank-line boundaries",
    )
    separator: str = Field(
        default="",
        description="Run of two or more line breaks that followed the block",
    )

    @property
    def text(self) -> str:
        """Block and separator joined back together."""
        return self.block + self.separator

    @property
    def stripped(self) -> str:
        """Block without surrounding whitespace."""
        return self.block.strip()

    def __str__(self) -> str:
        preview = self.stripped[:30]
        return f"Segment({preview!r}, separator={len(self.separator)} chars)"
