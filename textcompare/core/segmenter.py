"""
Max-match dictionary segmentation.

Splits unsegmented text (e.g. Chinese, or English with the spaces removed)
into dictionary words, always taking the longest dictionary word that
starts at the current position.
"""

from typing import Iterable

from textcompare._logging import log_segmentation_complete, log_warning
from textcompare.core.sequence import as_graphemes, resolve_grapheme_setting
from textcompare.models import Graphemes


def build_dictionary(words: Iterable["Graphemes | str"]) -> set[Graphemes]:
    """
    Build a segmentation dictionary from words.

    Args:
        words: Words as text or Graphemes

    Returns:
        Set of Graphemes for membership tests
    """
    return {as_graphemes(word) for word in words}


def max_match(
    sentence: Graphemes | str,
    dictionary: Iterable["Graphemes | str"],
    delimiter: str | None = None,
) -> Graphemes:
    """
    Segment a sentence into dictionary words with greedy longest matching.

    At each position the longest prefix of the remaining text that is a
    dictionary word becomes the next token. When no prefix matches, the
    single next grapheme becomes a token on its own. Tokens are joined with
    one delimiter element, so removing the delimiters gives back the input.

    Args:
        sentence: Text or Graphemes to segment
        dictionary: Known words (text or Graphemes)
        delimiter: Element placed between tokens (default from settings)

    Returns:
        Graphemes with tokens separated by the delimiter

    Raises:
        ConfigurationError: If the delimiter is not exactly one grapheme

    Examples:
        >>> str(max_match("他特别喜欢北京烤鸭", {"他", "特别", "喜欢", "北京烤鸭"}))
        '他 特别 喜欢 北京烤鸭'
        >>> str(max_match("english", {"他"}))
        'e n g l i s h'
    """
    delimiter = resolve_grapheme_setting(delimiter, "word_delimiter")

    sentence = as_graphemes(sentence)
    words = build_dictionary(dictionary)
    if not words:
        log_warning("Empty dictionary, every grapheme becomes its own token")

    # No dictionary word is longer than this, so longer prefixes are skipped
    longest_word = max((len(word) for word in words), default=0)

    result = Graphemes()
    position = 0
    token_count = 0
    fallback_count = 0

    while position < len(sentence):
        remaining = len(sentence) - position
        token_length = 0

        for length in range(min(remaining, longest_word), 0, -1):
            if sentence.slice(position, position + length) in words:
                token_length = length
                break

        if token_length == 0:
            token_length = 1
            fallback_count += 1

        if token_count:
            result.push(delimiter)
        result.append(sentence.slice(position, position + token_length))

        position += token_length
        token_count += 1

    log_segmentation_complete(len(sentence), token_count, fallback_count)
    return result
