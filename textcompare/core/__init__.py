"""
Core modules for the textcompare library.

This package contains the comparison algorithms:
- Edit distance (Wagner-Fischer)
- Alignment path recovery and alignment strings
- Max-match dictionary segmentation
- Word error rate and related metrics
"""

from textcompare.core.sequence import ComparableSequence, as_graphemes, as_sequence
from textcompare.core.distance import levenshtein_distance, levenshtein_matrix
from textcompare.core.dp_core import Coordinate, DPCell, alignment_path, backtrack, build_dp_matrix
from textcompare.core.alignment import align, alignment_strings, edit_operations
from textcompare.core.segmenter import build_dictionary, max_match
from textcompare.core.metrics import character_error_rate, word_accuracy, word_error_rate

__all__ = [
    # Sequence
    "ComparableSequence",
    "as_graphemes",
    "as_sequence",
    # Distance
    "levenshtein_distance",
    "levenshtein_matrix",
    # DP core
    "Coordinate",
    "DPCell",
    "alignment_path",
    "backtrack",
    "build_dp_matrix",
    # Alignment
    "align",
    "alignment_strings",
    "edit_operations",
    # Segmenter
    "build_dictionary",
    "max_match",
    # Metrics
    "character_error_rate",
    "word_accuracy",
    "word_error_rate",
]
