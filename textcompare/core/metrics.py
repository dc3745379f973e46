"""
Evaluation metrics built on the edit-distance engine.
"""

from textcompare.core.distance import levenshtein_distance
from textcompare.core.sequence import as_graphemes, resolve_grapheme_setting
from textcompare.exceptions import MetricError
from textcompare.models import Graphemes


def word_error_rate(
    actual_sentence: Graphemes | str,
    predict_sentence: Graphemes | str,
    delimiter: str | None = None,
) -> float:
    """
    Calculate the word error rate.

    WER = (word insertions + deletions + substitutions) / (words in the actual sentence)

    Both sentences are split on the delimiter; words are compared as whole
    grapheme sequences.

    Args:
        actual_sentence: Reference sentence
        predict_sentence: Hypothesis sentence
        delimiter: Word separator element (default from settings)

    Returns:
        Word error rate (0.0 for identical sentences, may exceed 1.0)

    Raises:
        MetricError: If the reference sentence is empty
        ConfigurationError: If the delimiter is not exactly one grapheme

    Examples:
        >>> word_error_rate("we can see", "we canon see")
        0.3333333333333333
    """
    delimiter = resolve_grapheme_setting(delimiter, "word_delimiter")

    actual = as_graphemes(actual_sentence)
    predicted = as_graphemes(predict_sentence)
    if len(actual) == 0:
        raise MetricError(metric="word_error_rate")

    actual_words = actual.split(delimiter)
    predicted_words = predicted.split(delimiter)

    distance = levenshtein_distance(actual_words, predicted_words, 1)
    return distance / len(actual_words)


def word_accuracy(
    actual_sentence: Graphemes | str,
    predict_sentence: Graphemes | str,
    delimiter: str | None = None,
) -> float:
    """
    Calculate the word accuracy, 1 - word error rate.

    Raises:
        MetricError: If the reference sentence is empty
    """
    return 1.0 - word_error_rate(actual_sentence, predict_sentence, delimiter)


def character_error_rate(
    actual_sentence: Graphemes | str,
    predict_sentence: Graphemes | str,
) -> float:
    """
    Calculate the character error rate over grapheme clusters.

    CER = (grapheme insertions + deletions + substitutions) / (graphemes in the actual sentence)

    Raises:
        MetricError: If the reference sentence is empty
    """
    actual = as_graphemes(actual_sentence)
    predicted = as_graphemes(predict_sentence)
    if len(actual) == 0:
        raise MetricError(metric="character_error_rate")

    return levenshtein_distance(actual, predicted, 1) / len(actual)
