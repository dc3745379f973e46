"""
Edit-distance engine.

Wagner-Fischer dynamic programming over any pair of comparable sequences,
with unit insertion/deletion cost and a configurable substitution cost.
"""

from textcompare.core.sequence import ComparableSequence, as_sequence, resolve_substitution_cost


def levenshtein_matrix(
    seq1: ComparableSequence | str,
    seq2: ComparableSequence | str,
    sub_cost: int | None = None,
) -> list[list[int]]:
    """
    Build the full edit-distance cost matrix.

    Rows index ``seq1`` and columns index ``seq2``; cell ``[i][j]`` is the
    distance between the first ``i`` elements of ``seq1`` and the first ``j``
    elements of ``seq2``.

    Args:
        seq1: First sequence (text is split into graphemes)
        seq2: Second sequence (text is split into graphemes)
        sub_cost: Cost of substituting an element (default from settings)

    Returns:
        A (len(seq1) + 1) x (len(seq2) + 1) matrix of costs

    Raises:
        ConfigurationError: If sub_cost is negative
    """
    seq1 = as_sequence(seq1)
    seq2 = as_sequence(seq2)
    sub_cost = resolve_substitution_cost(sub_cost)

    num_rows = len(seq1) + 1
    num_cols = len(seq2) + 1
    matrix = [[0] * num_cols for _ in range(num_rows)]

    # seq1 -> row, seq2 -> column
    for row in range(1, num_rows):
        matrix[row][0] = row
    for col in range(1, num_cols):
        matrix[0][col] = col

    for row in range(1, num_rows):
        element = seq1[row - 1]
        for col in range(1, num_cols):
            substitution = 0 if element == seq2[col - 1] else sub_cost
            matrix[row][col] = min(
                matrix[row - 1][col] + 1,
                matrix[row][col - 1] + 1,
                matrix[row - 1][col - 1] + substitution,
            )

    return matrix


def levenshtein_distance(
    seq1: ComparableSequence | str,
    seq2: ComparableSequence | str,
    sub_cost: int | None = None,
) -> int:
    """
    Calculate the Levenshtein distance between two sequences.

    Substituting an element by an equal element is free. Python integers do
    not overflow, so long inputs and large substitution costs are exact.

    Args:
        seq1: First sequence (text is split into graphemes)
        seq2: Second sequence (text is split into graphemes)
        sub_cost: Cost of substituting an element (default from settings)

    Returns:
        Minimum total edit cost

    Examples:
        >>> levenshtein_distance("kitten", "sitting", 1)
        3
        >>> levenshtein_distance(["hello", "world"], ["bye", "bye"], 1)
        2
    """
    return levenshtein_matrix(seq1, seq2, sub_cost)[-1][-1]
