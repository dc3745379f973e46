"""
Data models for the textcompare library.

- Graphemes: A grapheme-cluster sequence built from text
- AlignmentResult: Result of aligning two sequences
- EditOperation / EditKind: Single steps of an alignment
"""

from textcompare.models.graphemes import Graphemes
from textcompare.models.alignment import AlignmentResult, EditKind, EditOperation

__all__ = [
    "Graphemes",
    "AlignmentResult",
    "EditKind",
    "EditOperation",
]
