"""
Merge result data model.
"""

from pydantic import BaseModel, Field, computed_field


class MergeResult(BaseModel):
    """
    Result of merging annotation units into a primary document.

    Attributes:
        content: The merged document
        segment_count: Number of segments in the primary document
        eligible_count: Number of segments classified as prose
        wrapped_count: Number of segments that received a gloss
        annotation_count: Number of annotation units available
    """

    content: str = Field(
        ...,
        description="The merged document",
    )
    segment_count: int = Field(
        default=0,
        description="Number of segments in the primary document",
        ge=0,
    )
    eligible_count: int = Field(
        default=0,
        description="Number of segments classified as prose",
        ge=0,
    )
    wrapped_count: int = Field(
        default=0,
        description="Number of segments that received a gloss",
        ge=0,
    )
    annotation_count: int = Field(
        default=0,
        description="Number of annotation units available",
        ge=0,
    )

    @computed_field
    @property
    def unused_count(self) -> int:
        """Annotation units left over after every eligible block was glossed."""
        return self.annotation_count - self.wrapped_count

    @computed_field
    @property
    def is_complete(self) -> bool:
        """Whether block and annotation supply matched exactly."""
        return self.unused_count == 0 and self.wrapped_count == self.eligible_count

    def __str__(self) -> str:
        return (
            f"MergeResult(wrapped={self.wrapped_count}/{self.eligible_count}, "
            f"annotations={self.annotation_count}, unused={self.unused_count})"
        )
