"""Tests for the Graphemes sequence container."""

import pytest

from textcompare import Graphemes


class TestConstruction:
    def test_empty_by_default(self):
        assert len(Graphemes()) == 0
        assert Graphemes() == Graphemes("")

    def test_combining_marks_stay_together(self):
        word = Graphemes("e\u0301cole")
        assert len(word) == 5
        assert word[0] == "e\u0301"

    def test_regional_indicator_pairs(self):
        flags = Graphemes("\U0001F1EB\U0001F1F7\U0001F1E9\U0001F1EA")
        assert len(flags) == 2

    def test_cjk(self):
        assert len(Graphemes("己所不欲勿施于人")) == 8

    def test_from_elements_keeps_elements_unsplit(self):
        words = Graphemes.from_elements(["hello", "world"])
        assert len(words) == 2
        assert words[1] == "world"

    def test_str_round_trip(self):
        text = "naïve 北京 e\u0301"
        assert str(Graphemes(text)) == text


class TestSequenceOperations:
    def test_indexing_and_assignment(self):
        word = Graphemes("book")
        word[1] = "a"
        word[2] = "c"
        assert str(word) == "back"
        assert word[-1] == "k"

    def test_slice_returns_new_graphemes(self):
        word = Graphemes("kitten")
        part = word[1:4]
        assert isinstance(part, Graphemes)
        assert str(part) == "itt"
        assert word.slice(2, 6) == Graphemes("tten")

    def test_slice_does_not_alias(self):
        word = Graphemes("abc")
        part = word.slice(0, 2)
        part[0] = "z"
        assert str(word) == "abc"

    def test_push_and_append(self):
        word = Graphemes("ab")
        word.push("c")
        word.append(Graphemes("de"))
        word.append("f")
        assert str(word) == "abcdef"

    def test_reverse(self):
        word = Graphemes("e\u0301ab")
        word.reverse()
        assert word.to_list() == ["b", "a", "e\u0301"]

    def test_copy_is_independent(self):
        word = Graphemes("ab")
        clone = word.copy()
        clone.push("c")
        assert len(word) == 2
        assert clone != word

    def test_concatenation(self):
        assert Graphemes("ab") + Graphemes("cd") == Graphemes("abcd")


class TestSplit:
    def test_split_on_space(self):
        pieces = Graphemes("we can see").split(" ")
        assert pieces == [Graphemes("we"), Graphemes("can"), Graphemes("see")]

    def test_adjacent_delimiters_give_empty_pieces(self):
        assert Graphemes("a  b").split(" ") == [Graphemes("a"), Graphemes(), Graphemes("b")]

    def test_empty_split_has_one_piece(self):
        assert Graphemes().split(" ") == [Graphemes()]

    def test_custom_delimiter(self):
        assert Graphemes("他|喜欢").split("|") == [Graphemes("他"), Graphemes("喜欢")]


class TestEqualityAndHashing:
    def test_equal_contents_hash_equal(self):
        assert hash(Graphemes("北京")) == hash(Graphemes("北京"))

    def test_usable_in_sets(self):
        words = {Graphemes("we"), Graphemes("we"), Graphemes("see")}
        assert len(words) == 2
        assert Graphemes("see") in words

    def test_not_equal_to_plain_string(self):
        assert Graphemes("ab") != "ab"

    @pytest.mark.parametrize("text", ["", "a", "北京烤鸭"])
    def test_repr(self, text):
        assert repr(Graphemes(text)) == f"Graphemes({text!r})"
