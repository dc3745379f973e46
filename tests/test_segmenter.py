"""Tests for the max-match segmenter."""

import pytest
from hypothesis import given, settings, strategies as st

from textcompare import ConfigurationError, Graphemes, build_dictionary, configure, max_match


class TestScenarios:
    def test_chinese_sentence(self, chinese_dictionary):
        result = max_match("他特别喜欢北京烤鸭", chinese_dictionary)
        assert str(result) == "他 特别 喜欢 北京烤鸭"

    def test_unknown_words_fall_back_to_graphemes(self, chinese_dictionary):
        assert str(max_match("english", chinese_dictionary)) == "e n g l i s h"

    def test_english_without_spaces(self, sentence_dictionary):
        result = max_match("wecanonlyseeashortdistanceahead", sentence_dictionary)
        assert str(result) == "we canon l y see ash ort distance ahead"

    def test_empty_sentence(self, chinese_dictionary):
        assert max_match("", chinese_dictionary) == Graphemes()

    def test_single_word(self, chinese_dictionary):
        assert str(max_match("特别", chinese_dictionary)) == "特别"


class TestLongestMatch:
    def test_longest_prefix_wins(self):
        assert str(max_match("abcab", {"a", "ab", "abc"})) == "abc ab"

    def test_greedy_not_optimal(self):
        # Longest-first takes "ab" even though "a" + "bc" would cover everything
        assert str(max_match("abc", {"ab", "a", "bc"})) == "ab c"

    def test_combining_marks_are_not_split(self):
        result = max_match("e\u0301cole", {"e\u0301"})
        assert result.to_list() == ["e\u0301", " ", "c", " ", "o", " ", "l", " ", "e"]


class TestInputs:
    def test_graphemes_dictionary(self):
        dictionary = build_dictionary(["北京", Graphemes("烤鸭")])
        assert dictionary == {Graphemes("北京"), Graphemes("烤鸭")}
        assert str(max_match(Graphemes("北京烤鸭"), dictionary)) == "北京 烤鸭"

    def test_custom_delimiter(self, chinese_dictionary):
        assert str(max_match("他喜欢", chinese_dictionary, delimiter="/")) == "他/喜欢"

    def test_delimiter_from_settings(self, chinese_dictionary):
        configure(word_delimiter="|")
        assert str(max_match("他喜欢", chinese_dictionary)) == "他|喜欢"

    @pytest.mark.parametrize("delimiter", ["", "ab", "//"])
    def test_delimiter_must_be_one_grapheme(self, delimiter):
        with pytest.raises(ConfigurationError) as excinfo:
            max_match("ab", {"a"}, delimiter=delimiter)
        assert excinfo.value.setting_name == "word_delimiter"

    def test_empty_dictionary(self):
        assert str(max_match("abc", set())) == "a b c"

    def test_long_unsegmentable_input(self):
        result = max_match("x" * 5000, {"y"})
        assert len(result) == 9999


alphabet = "abc"
chinese_words = ["他", "特别", "喜欢", "北京烤鸭"]
dictionaries = st.sets(st.text(alphabet=alphabet, min_size=1, max_size=4), max_size=8)


class TestProperties:
    @given(text=st.text(alphabet=alphabet, max_size=30), dictionary=dictionaries)
    @settings(max_examples=100)
    def test_content_preserved(self, text, dictionary):
        result = max_match(text, dictionary)
        assert str(result).replace(" ", "") == text

    @given(text=st.text(alphabet=alphabet, max_size=30), dictionary=dictionaries)
    @settings(max_examples=100)
    def test_tokens_are_dictionary_words_or_single_graphemes(self, text, dictionary):
        result = max_match(text, dictionary)
        if not text:
            return
        for token in result.split(" "):
            assert str(token) in dictionary or len(token) == 1

    @given(tokens=st.lists(st.sampled_from(chinese_words), min_size=1, max_size=8))
    @settings(max_examples=50)
    def test_dictionary_sentences_resegment_identically(self, tokens):
        dictionary = set(chinese_words)
        result = max_match("".join(tokens), dictionary)
        assert max_match(str(result).replace(" ", ""), dictionary) == result
