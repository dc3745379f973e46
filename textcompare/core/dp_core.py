"""
Core Dynamic Programming alignment algorithm.

Builds the edit-distance matrix together with a backtrace of the
predecessor chosen for every cell, and recovers the optimal alignment path.

When several predecessors give the same cost the choice is fixed:
insertion (from the left) first, then deletion (from above), then the
diagonal. Reconstructed alignments depend on this order.
"""

from dataclasses import dataclass

from textcompare._logging import log_alignment_complete
from textcompare.core.sequence import ComparableSequence, as_sequence, resolve_substitution_cost
from textcompare.exceptions import AlignmentError

Coordinate = tuple[int, int]


@dataclass
class DPCell:
    """A cell in the DP matrix."""
    cost: int  # Accumulated cost to reach this cell
    parent: Coordinate | None  # Previous cell for backtracking


def build_dp_matrix(
    seq1: ComparableSequence | str,
    seq2: ComparableSequence | str,
    sub_cost: int | None = None,
) -> list[list[DPCell]]:
    """
    Fill the DP matrix with costs and backtrace links.

    Args:
        seq1: First sequence (rows)
        seq2: Second sequence (columns)
        sub_cost: Cost of substituting an element (default from settings)

    Returns:
        (len(seq1) + 1) x (len(seq2) + 1) grid of DPCell
    """
    seq1 = as_sequence(seq1)
    seq2 = as_sequence(seq2)
    sub_cost = resolve_substitution_cost(sub_cost)

    num_rows = len(seq1) + 1
    num_cols = len(seq2) + 1

    dp = [[DPCell(cost=0, parent=None) for _ in range(num_cols)] for _ in range(num_rows)]

    # Borders: pure deletions down column 0, pure insertions along row 0
    for row in range(1, num_rows):
        dp[row][0] = DPCell(cost=row, parent=(row - 1, 0))
    for col in range(1, num_cols):
        dp[0][col] = DPCell(cost=col, parent=(0, col - 1))

    for row in range(1, num_rows):
        element = seq1[row - 1]
        for col in range(1, num_cols):
            substitution = 0 if element == seq2[col - 1] else sub_cost
            candidates = (
                (dp[row][col - 1].cost + 1, (row, col - 1)),
                (dp[row - 1][col].cost + 1, (row - 1, col)),
                (dp[row - 1][col - 1].cost + substitution, (row - 1, col - 1)),
            )

            best_cost, best_parent = candidates[0]
            for cost, parent in candidates[1:]:
                # Strictly cheaper only, so earlier candidates win ties
                if cost < best_cost:
                    best_cost, best_parent = cost, parent

            dp[row][col] = DPCell(cost=best_cost, parent=best_parent)

    return dp


def backtrack(dp: list[list[DPCell]]) -> list[Coordinate]:
    """
    Follow backtrace links from the terminal cell to the origin.

    Args:
        dp: Matrix returned by build_dp_matrix

    Returns:
        Path of coordinates from (0, 0) to (len1, len2)

    Raises:
        AlignmentError: If a non-origin cell has no predecessor
    """
    current: Coordinate = (len(dp) - 1, len(dp[0]) - 1)
    path = [current]

    while current != (0, 0):
        parent = dp[current[0]][current[1]].parent
        if parent is None:
            raise AlignmentError("Backtrace ended before reaching the origin", current=current)
        path.append(parent)
        current = parent

    path.reverse()
    return path


def solve_alignment(
    seq1: ComparableSequence | str,
    seq2: ComparableSequence | str,
    sub_cost: int | None = None,
) -> tuple[list[list[DPCell]], list[Coordinate]]:
    """Build the DP matrix and backtrack it; returns (matrix, ascending path)."""
    dp = build_dp_matrix(seq1, seq2, sub_cost)
    path = backtrack(dp)
    log_alignment_complete(len(dp) - 1, len(dp[0]) - 1, len(path))
    return dp, path


def alignment_path(
    seq1: ComparableSequence | str,
    seq2: ComparableSequence | str,
    sub_cost: int | None = None,
) -> list[Coordinate]:
    """
    Find one optimal alignment path between two sequences.

    Each step of the path advances the row, the column, or both by one:
    a row-only step deletes an element of ``seq1``, a column-only step
    inserts an element of ``seq2``, a diagonal step matches or substitutes.

    Args:
        seq1: First sequence (text is split into graphemes)
        seq2: Second sequence (text is split into graphemes)
        sub_cost: Cost of substituting an element (default from settings)

    Returns:
        Ascending list of (row, col) coordinates from (0, 0) to (len1, len2)

    Examples:
        >>> alignment_path("ab", "ba", 1)
        [(0, 0), (1, 0), (2, 1), (2, 2)]
    """
    _, path = solve_alignment(seq1, seq2, sub_cost)
    return path
