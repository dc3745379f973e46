"""
Grapheme sequence data model.
"""

from typing import Iterable, Iterator, overload

import regex

# Extended grapheme cluster
_GRAPHEME_RE = regex.compile(r"\X")


class Graphemes:
    """
    An ordered sequence of grapheme clusters.

    Text is split on extended grapheme cluster boundaries so that a
    user-perceived character (a CJK ideograph, a letter with combining
    marks, an emoji sequence) is always one element.

    Equality and hashing use the full contents, so Graphemes can be used as
    dictionary words and compared element-wise by the distance engine.

    Example:
        >>> word = Graphemes("café")
        >>> len(word)
        4
        >>> str(word[1:3])
        'af'
    """

    __slots__ = ("_graphemes",)

    def __init__(self, text: str = "") -> None:
        self._graphemes: list[str] = _GRAPHEME_RE.findall(text)

    @classmethod
    def from_elements(cls, elements: Iterable) -> "Graphemes":
        """
        Build a sequence from already-split elements.

        Args:
            elements: Elements to store as-is (no further splitting)

        Returns:
            New Graphemes holding the elements in order
        """
        graphemes = cls()
        graphemes._graphemes = list(elements)
        return graphemes

    def __len__(self) -> int:
        return len(self._graphemes)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> "Graphemes": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Graphemes.from_elements(self._graphemes[index])
        return self._graphemes[index]

    def __setitem__(self, index: int, grapheme: str) -> None:
        self._graphemes[index] = grapheme

    def __iter__(self) -> Iterator[str]:
        return iter(self._graphemes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graphemes):
            return NotImplemented
        return self._graphemes == other._graphemes

    def __hash__(self) -> int:
        return hash(tuple(self._graphemes))

    def __add__(self, other: "Graphemes") -> "Graphemes":
        if not isinstance(other, Graphemes):
            return NotImplemented
        return Graphemes.from_elements(self._graphemes + other._graphemes)

    def __str__(self) -> str:
        return "".join(str(g) for g in self._graphemes)

    def __repr__(self) -> str:
        return f"Graphemes({str(self)!r})"

    def push(self, grapheme) -> None:
        """Append a single element."""
        self._graphemes.append(grapheme)

    def append(self, other: "Graphemes | str") -> None:
        """
        Append every element of another sequence in place.

        Args:
            other: Graphemes, or text that is split into graphemes first
        """
        if isinstance(other, str):
            other = Graphemes(other)
        self._graphemes.extend(other)

    def slice(self, start: int, end: int) -> "Graphemes":
        """Return a new sequence with the elements in ``[start, end)``."""
        return Graphemes.from_elements(self._graphemes[start:end])

    def split(self, delimiter: str = " ") -> list["Graphemes"]:
        """
        Split on a delimiter element.

        Delimiters are consumed. Like ``str.split(sep)``, adjacent delimiters
        produce empty pieces and the result always has at least one piece.

        Args:
            delimiter: Element to split on

        Returns:
            List of Graphemes pieces
        """
        pieces = [Graphemes()]
        for grapheme in self._graphemes:
            if grapheme == delimiter:
                pieces.append(Graphemes())
            else:
                pieces[-1].push(grapheme)
        return pieces

    def reverse(self) -> None:
        """Reverse the sequence in place."""
        self._graphemes.reverse()

    def copy(self) -> "Graphemes":
        """Return a shallow copy."""
        return Graphemes.from_elements(self._graphemes)

    def to_list(self) -> list[str]:
        """Return the elements as a new list."""
        return list(self._graphemes)
