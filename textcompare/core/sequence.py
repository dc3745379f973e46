"""
Sequence capabilities required by the comparison engines.

The distance, alignment and segmentation code only needs length and indexed
read access plus element equality, so any list, tuple or Graphemes works.
Plain strings are split into grapheme clusters first.
"""

from typing import Any, Protocol, Sequence, runtime_checkable

from textcompare.config import get_settings
from textcompare.exceptions import ConfigurationError
from textcompare.models import Graphemes


@runtime_checkable
class ComparableSequence(Protocol):
    """Anything with a length and integer indexing whose elements support ``==``."""

    def __len__(self) -> int: ...

    def __getitem__(self, index: int) -> Any: ...


def as_sequence(value: "ComparableSequence | str") -> ComparableSequence:
    """
    Coerce text into a grapheme sequence; pass other sequences through.

    Args:
        value: Text or an already indexable sequence

    Returns:
        Graphemes for text, the value itself otherwise
    """
    if isinstance(value, str):
        return Graphemes(value)
    return value


def as_graphemes(value: "Graphemes | str | Sequence[str]") -> Graphemes:
    """Return value as Graphemes, splitting text and copying other sequences."""
    if isinstance(value, Graphemes):
        return value
    if isinstance(value, str):
        return Graphemes(value)
    return Graphemes.from_elements(value)


def resolve_substitution_cost(sub_cost: int | None) -> int:
    """
    Validate a substitution cost, falling back to the configured default.

    Raises:
        ConfigurationError: If the cost is negative or not an integer
    """
    if sub_cost is None:
        return get_settings().substitution_cost
    if isinstance(sub_cost, bool) or not isinstance(sub_cost, int):
        raise ConfigurationError(
            f"Substitution cost must be an integer, got {type(sub_cost).__name__}",
            setting_name="substitution_cost",
        )
    if sub_cost < 0:
        raise ConfigurationError(
            f"Substitution cost must be non-negative, got {sub_cost}",
            setting_name="substitution_cost",
        )
    return sub_cost


def resolve_grapheme_setting(value: str | None, setting_name: str) -> str:
    """
    Validate a placeholder or delimiter, falling back to the configured default.

    Args:
        value: Explicit value, or None for the setting of the same name
        setting_name: "placeholder" or "word_delimiter"

    Returns:
        The value, guaranteed to be exactly one grapheme

    Raises:
        ConfigurationError: If the value is empty or spans several graphemes
    """
    if value is None:
        return getattr(get_settings(), setting_name)
    if not isinstance(value, str) or len(Graphemes(value)) != 1:
        raise ConfigurationError(
            f"{setting_name} must be a single grapheme, got {value!r}",
            setting_name=setting_name,
        )
    return value
