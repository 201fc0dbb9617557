"""Unit tests for transcript normalization."""

import pytest

from dictate.text.normalizer import normalize


@pytest.mark.unit
class TestNormalize:
    """Test cases for normalize()."""

    def test_collapses_whitespace_and_fixes_punctuation_spacing(self):
        assert normalize("a   b ,c") == "a b, c"

    def test_removes_space_before_trailing_punctuation(self):
        assert normalize("hello world .") == "hello world."
        assert normalize("really ?") == "really?"

    @pytest.mark.parametrize("mark", [".", ",", "!", "?", ";", ":"])
    def test_each_punctuation_mark(self, mark):
        assert normalize(f"word {mark}") == f"word{mark}"

    def test_keeps_space_after_punctuation(self):
        assert normalize("Hello , world !") == "Hello, world!"

    def test_tabs_and_newlines_are_whitespace(self):
        assert normalize("\tline one\n\nline  two \r\n") == "line one line two"

    def test_trims_ends(self):
        assert normalize("   padded   ") == "padded"

    @pytest.mark.parametrize("text", ["", "   ", "\n\t  \n", None])
    def test_blank_input_normalizes_to_empty(self, text):
        assert normalize(text) == ""

    def test_consecutive_punctuation(self):
        assert normalize("wait , . what") == "wait,. what"
        assert normalize("a ,,b") == "a,,b"

    @pytest.mark.parametrize("text", [
        "a   b ,c",
        "hello world .",
        " , leading comma",
        "a ,b ,c ; d :e",
        "x  ,  .  y",
        "already clean, text.",
        "multi\n\nline ! text ?",
    ])
    def test_idempotent(self, text):
        once = normalize(text)
        assert normalize(once) == once
