"""Tests for word error rate, word accuracy and character error rate."""

import pytest

from textcompare import (
    ConfigurationError,
    Graphemes,
    MetricError,
    character_error_rate,
    max_match,
    word_accuracy,
    word_error_rate,
)


class TestWordErrorRate:
    def test_max_match_prediction(self, sentence_dictionary):
        predicted = max_match("wecanonlyseeashortdistanceahead", sentence_dictionary)
        actual = Graphemes("we can only see a short distance ahead")
        assert word_error_rate(actual, predicted) == 0.625
        assert word_error_rate(actual, actual) == 0.0

    @pytest.mark.parametrize("sentence", ["a", "we can see", "他 特别 喜欢 北京烤鸭"])
    def test_identical_sentences(self, sentence):
        assert word_error_rate(sentence, sentence) == 0.0

    def test_one_substitution(self):
        assert word_error_rate("we can see", "we canon see") == pytest.approx(1 / 3)

    def test_can_exceed_one(self):
        assert word_error_rate("a", "b c d") == 3.0

    def test_empty_prediction(self):
        assert word_error_rate("a b", "") == 1.0

    def test_words_compare_whole_graphemes(self):
        assert word_error_rate("cafe\u0301 au lait", "cafe au lait") == pytest.approx(1 / 3)

    def test_empty_reference_raises(self):
        with pytest.raises(MetricError) as excinfo:
            word_error_rate("", "anything")
        assert excinfo.value.metric == "word_error_rate"
        assert str(excinfo.value) == "undefined rate: empty reference (metric=word_error_rate)"

    def test_custom_delimiter(self):
        assert word_error_rate("他|喜欢", "他|欢", delimiter="|") == 0.5

    def test_multi_grapheme_delimiter_rejected(self):
        with pytest.raises(ConfigurationError) as excinfo:
            word_error_rate("a b", "a b", delimiter="||")
        assert excinfo.value.setting_name == "word_delimiter"


class TestWordAccuracy:
    def test_max_match_prediction(self, sentence_dictionary):
        predicted = max_match("wecanonlyseeashortdistanceahead", sentence_dictionary)
        actual = Graphemes("we can only see a short distance ahead")
        assert word_accuracy(actual, predicted) == 0.375

    def test_identical_sentences(self):
        assert word_accuracy("we can see", "we can see") == 1.0

    def test_empty_reference_raises(self):
        with pytest.raises(MetricError):
            word_accuracy("", "")


class TestCharacterErrorRate:
    def test_kitten_sitting(self):
        assert character_error_rate("kitten", "sitting") == 0.5

    def test_graphemes(self):
        assert character_error_rate("北京烤鸭", "北京") == 0.5

    def test_empty_reference_raises(self):
        with pytest.raises(MetricError) as excinfo:
            character_error_rate("", "a")
        assert excinfo.value.metric == "character_error_rate"
