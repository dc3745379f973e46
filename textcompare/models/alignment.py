"""
Alignment result data models.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, computed_field


class EditKind(str, Enum):
    """Kind of a single step in an alignment."""

    MATCH = "match"
    SUBSTITUTION = "substitution"
    INSERTION = "insertion"
    DELETION = "deletion"


class EditOperation(BaseModel):
    """
    One step of an alignment path.

    Attributes:
        kind: Whether the step is a match, substitution, insertion or deletion
        source: Element consumed from the first sequence (None for insertions)
        target: Element consumed from the second sequence (None for deletions)
        row: Row of the matrix cell the step ends on
        col: Column of the matrix cell the step ends on
    """

    kind: EditKind = Field(
        ...,
        description="Whether the step is a match, substitution, insertion or deletion",
    )
    source: Optional[str] = Field(
        default=None,
        description="Element consumed from the first sequence (None for insertions)",
    )
    target: Optional[str] = Field(
        default=None,
        description="Element consumed from the second sequence (None for deletions)",
    )
    row: int = Field(
        ...,
        description="Row of the matrix cell the step ends on",
        ge=0,
    )
    col: int = Field(
        ...,
        description="Column of the matrix cell the step ends on",
        ge=0,
    )

    @property
    def is_error(self) -> bool:
        """Whether the step costs anything."""
        return self.kind != EditKind.MATCH


class AlignmentResult(BaseModel):
    """
    Element-by-element alignment of two sequences.

    ``top`` and ``bottom`` always have the same length; the placeholder fills
    the side that consumed no element at insertions and deletions.

    Attributes:
        top: Aligned elements of the first sequence, rendered as text
        bottom: Aligned elements of the second sequence, rendered as text
        placeholder: Element used for gaps
        distance: Edit distance between the two sequences
        substitution_cost: Substitution cost the alignment was computed with
        operations: Steps of the alignment in left-to-right order
        path: Matrix coordinates from (0, 0) to (len1, len2)
    """

    top: list[str] = Field(
        default_factory=list,
        description="Aligned elements of the first sequence, rendered as text",
    )
    bottom: list[str] = Field(
        default_factory=list,
        description="Aligned elements of the second sequence, rendered as text",
    )
    placeholder: str = Field(
        default=" ",
        description="Element used for gaps",
    )
    distance: int = Field(
        ...,
        description="Edit distance between the two sequences",
        ge=0,
    )
    substitution_cost: int = Field(
        default=1,
        description="Substitution cost the alignment was computed with",
        ge=0,
    )
    operations: list[EditOperation] = Field(
        default_factory=list,
        description="Steps of the alignment in left-to-right order",
    )
    path: list[tuple[int, int]] = Field(
        default_factory=list,
        description="Matrix coordinates from (0, 0) to (len1, len2)",
    )

    @computed_field
    @property
    def length(self) -> int:
        """Number of aligned columns."""
        return len(self.top)

    @computed_field
    @property
    def matches(self) -> int:
        return self._count(EditKind.MATCH)

    @computed_field
    @property
    def substitutions(self) -> int:
        return self._count(EditKind.SUBSTITUTION)

    @computed_field
    @property
    def insertions(self) -> int:
        return self._count(EditKind.INSERTION)

    @computed_field
    @property
    def deletions(self) -> int:
        return self._count(EditKind.DELETION)

    def _count(self, kind: EditKind) -> int:
        return sum(1 for op in self.operations if op.kind == kind)

    def as_text(self, separator: str = "") -> tuple[str, str]:
        """
        Render both aligned rows as strings.

        Args:
            separator: Joined between columns ("" for graphemes, " " for words)

        Returns:
            Tuple of (top, bottom)
        """
        return separator.join(self.top), separator.join(self.bottom)

    def __str__(self) -> str:
        top, bottom = self.as_text()
        return f"{top}\n{bottom}"
