"""
textcompare — grapheme-aware text comparison primitives.

Usage:
    from textcompare import Graphemes, levenshtein_distance, alignment_strings, max_match

    levenshtein_distance("kitten", "sitting")            # 3

    top, bottom = alignment_strings("intention", "execution", 1, "-")
    print(top)
    print(bottom)

    segmented = max_match("他特别喜欢北京烤鸭", {"他", "特别", "喜欢", "北京烤鸭"})
    print(segmented)                                     # 他 特别 喜欢 北京烤鸭

    word_error_rate("we can only see", "we canon l y see")
"""

from textcompare.models import AlignmentResult, EditKind, EditOperation, Graphemes
from textcompare.config import TextCompareSettings, configure, get_settings, reset_settings
from textcompare.core import (
    ComparableSequence,
    align,
    alignment_path,
    alignment_strings,
    build_dictionary,
    character_error_rate,
    edit_operations,
    levenshtein_distance,
    levenshtein_matrix,
    max_match,
    word_accuracy,
    word_error_rate,
)
from textcompare.exceptions import (
    TextCompareError,
    AlignmentError,
    MetricError,
    ConfigurationError,
)

__version__ = "0.3.0"
__all__ = [
    # Version
    "__version__",
    # Models
    "Graphemes",
    "AlignmentResult",
    "EditKind",
    "EditOperation",
    # Config
    "TextCompareSettings",
    "get_settings",
    "configure",
    "reset_settings",
    # Core
    "ComparableSequence",
    "levenshtein_distance",
    "levenshtein_matrix",
    "alignment_path",
    "alignment_strings",
    "align",
    "edit_operations",
    "build_dictionary",
    "max_match",
    "word_error_rate",
    "word_accuracy",
    "character_error_rate",
    # Exceptions
    "TextCompareError",
    "AlignmentError",
    "MetricError",
    "ConfigurationError",
]
