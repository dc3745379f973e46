"""
Alignment-string reconstruction.

Turns an alignment path into two parallel, equal-length sequences with a
placeholder on whichever side consumed nothing at a step.
"""

from typing import Any, Iterator

from textcompare.config import get_settings
from textcompare.core.dp_core import Coordinate, solve_alignment
from textcompare.core.sequence import (
    ComparableSequence,
    as_sequence,
    resolve_grapheme_setting,
    resolve_substitution_cost,
)
from textcompare.exceptions import AlignmentError
from textcompare.models import AlignmentResult, EditKind, EditOperation, Graphemes


def _walk(
    seq1: ComparableSequence,
    seq2: ComparableSequence,
    path: list[Coordinate],
) -> Iterator[tuple[EditKind, Any, Any, Coordinate]]:
    """
    Yield (kind, element1, element2, cell) for each step of an ascending path.

    The element on the side that consumed nothing is None; use ``kind`` to tell
    a gap from an element that is itself None.

    Raises:
        AlignmentError: If a step is not a diagonal, row-only or column-only move
    """
    for previous, current in zip(path, path[1:]):
        d_row = current[0] - previous[0]
        d_col = current[1] - previous[1]

        if d_row == 1 and d_col == 1:
            element1 = seq1[current[0] - 1]
            element2 = seq2[current[1] - 1]
            kind = EditKind.MATCH if element1 == element2 else EditKind.SUBSTITUTION
            yield kind, element1, element2, current
        elif d_row == 0 and d_col == 1:
            yield EditKind.INSERTION, None, seq2[current[1] - 1], current
        elif d_row == 1 and d_col == 0:
            yield EditKind.DELETION, seq1[current[0] - 1], None, current
        else:
            raise AlignmentError(
                "Alignment step is neither a match, an insertion nor a deletion",
                previous=previous,
                current=current,
            )


def _is_grapheme_input(seq1: Any, seq2: Any) -> bool:
    return isinstance(seq1, (str, Graphemes)) and isinstance(seq2, (str, Graphemes))


def _resolve_placeholder(placeholder: Any, graphemes: bool) -> Any:
    # A gap inside a grapheme sequence must itself be one grapheme
    if graphemes:
        return resolve_grapheme_setting(placeholder, "placeholder")
    if placeholder is None:
        return get_settings().placeholder
    return placeholder


def alignment_strings(
    seq1: ComparableSequence | str,
    seq2: ComparableSequence | str,
    sub_cost: int | None = None,
    placeholder: Any = None,
) -> tuple[Any, Any]:
    """
    Align two sequences element by element.

    Grapheme input (text or Graphemes) produces a pair of Graphemes; any
    other sequence type produces a pair of lists.

    Args:
        seq1: First sequence (text is split into graphemes)
        seq2: Second sequence (text is split into graphemes)
        sub_cost: Cost of substituting an element (default from settings)
        placeholder: Element written opposite insertions and deletions
            (default from settings)

    Returns:
        Tuple of two equal-length sequences in left-to-right order

    Raises:
        AlignmentError: If the alignment path contains an impossible step
        ConfigurationError: If grapheme input is given a placeholder that is not
            exactly one grapheme

    Examples:
        >>> top, bottom = alignment_strings("ab", "ba", 1, "-")
        >>> str(top), str(bottom)
        ('ab-', '-ba')
    """
    graphemes_out = _is_grapheme_input(seq1, seq2)
    placeholder = _resolve_placeholder(placeholder, graphemes_out)
    seq1 = as_sequence(seq1)
    seq2 = as_sequence(seq2)

    _, path = solve_alignment(seq1, seq2, sub_cost)

    top = []
    bottom = []
    for kind, element1, element2, _ in _walk(seq1, seq2, path):
        top.append(placeholder if kind == EditKind.INSERTION else element1)
        bottom.append(placeholder if kind == EditKind.DELETION else element2)

    if graphemes_out:
        return Graphemes.from_elements(top), Graphemes.from_elements(bottom)
    return top, bottom


def edit_operations(
    seq1: ComparableSequence | str,
    seq2: ComparableSequence | str,
    sub_cost: int | None = None,
) -> list[EditOperation]:
    """
    List the steps of an optimal alignment.

    Args:
        seq1: First sequence (text is split into graphemes)
        seq2: Second sequence (text is split into graphemes)
        sub_cost: Cost of substituting an element (default from settings)

    Returns:
        EditOperation for every step, in left-to-right order
    """
    seq1 = as_sequence(seq1)
    seq2 = as_sequence(seq2)
    _, path = solve_alignment(seq1, seq2, sub_cost)
    return _to_operations(seq1, seq2, path)


def _to_operations(
    seq1: ComparableSequence,
    seq2: ComparableSequence,
    path: list[Coordinate],
) -> list[EditOperation]:
    return [
        EditOperation(
            kind=kind,
            source=None if kind == EditKind.INSERTION else str(element1),
            target=None if kind == EditKind.DELETION else str(element2),
            row=cell[0],
            col=cell[1],
        )
        for kind, element1, element2, cell in _walk(seq1, seq2, path)
    ]


def align(
    seq1: ComparableSequence | str,
    seq2: ComparableSequence | str,
    sub_cost: int | None = None,
    placeholder: str | None = None,
) -> AlignmentResult:
    """
    Align two sequences and collect the distance and per-step operations.

    Args:
        seq1: First sequence (text is split into graphemes)
        seq2: Second sequence (text is split into graphemes)
        sub_cost: Cost of substituting an element (default from settings)
        placeholder: Text written opposite insertions and deletions
            (default from settings)

    Returns:
        AlignmentResult with both aligned rows rendered as text

    Examples:
        >>> result = align("intention", "execution", 1, "*")
        >>> result.distance
        5
    """
    placeholder = _resolve_placeholder(placeholder, _is_grapheme_input(seq1, seq2))
    sub_cost = resolve_substitution_cost(sub_cost)
    seq1 = as_sequence(seq1)
    seq2 = as_sequence(seq2)

    dp, path = solve_alignment(seq1, seq2, sub_cost)
    operations = _to_operations(seq1, seq2, path)

    return AlignmentResult(
        top=[placeholder if op.kind == EditKind.INSERTION else op.source for op in operations],
        bottom=[placeholder if op.kind == EditKind.DELETION else op.target for op in operations],
        placeholder=placeholder,
        distance=dp[-1][-1].cost,
        substitution_cost=sub_cost,
        operations=operations,
        path=path,
    )
