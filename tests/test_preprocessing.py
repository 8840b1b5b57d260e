"""Tests for delimiter tokenization."""

import pytest

from nodeseq.errors import InvalidArgument
from nodeseq.preprocessing import check_delimiter, iter_tokens, tokenize


class TestTokenize:
    def test_splits_on_delimiter(self):
        assert tokenize("a.b.txt", ".") == ["a", "b", "txt"]

    def test_consecutive_delimiters_produce_no_empty_tokens(self):
        assert tokenize("a..b...c", ".") == ["a", "b", "c"]

    def test_leading_and_trailing_delimiters_are_dropped(self):
        assert tokenize(".a.b.", ".") == ["a", "b"]

    def test_empty_input_gives_no_tokens(self):
        assert tokenize("", ".") == []

    def test_only_delimiters_gives_no_tokens(self):
        assert tokenize("....", ".") == []

    def test_no_delimiter_gives_single_token(self):
        assert tokenize("filename", ".") == ["filename"]

    def test_delimiter_is_matched_literally(self):
        """Pattern metacharacters in the delimiter have no special meaning."""
        assert tokenize("a|b|c", "|") == ["a", "b", "c"]
        assert tokenize("a.b*c", "*") == ["a.b", "c"]
        assert tokenize(r"dir\file\name", "\\") == ["dir", "file", "name"]

    def test_multi_character_delimiter_is_a_substring(self):
        assert tokenize("a--b-c----d", "--") == ["a", "b-c", "d"]

    def test_space_delimiter(self):
        assert tokenize("Another  way to", " ") == ["Another", "way", "to"]

    def test_iter_tokens_is_lazy(self):
        tokens = iter_tokens("x_y_z", "_")
        assert next(tokens) == "x"
        assert list(tokens) == ["y", "z"]


class TestTokenizeArguments:
    def test_missing_input(self):
        with pytest.raises(InvalidArgument, match="input == None"):
            tokenize(None, ".")

    def test_missing_delimiter(self):
        with pytest.raises(InvalidArgument, match="delimiter == None"):
            tokenize("a.b", None)

    def test_empty_delimiter(self):
        with pytest.raises(InvalidArgument, match="must not be empty"):
            tokenize("a.b", "")

    def test_non_string_input(self):
        with pytest.raises(InvalidArgument, match="must be str"):
            tokenize(b"a.b", ".")

    def test_iter_tokens_fails_on_call_not_on_iteration(self):
        with pytest.raises(InvalidArgument):
            iter_tokens(None, ".")

    def test_invalid_argument_is_a_value_error(self):
        with pytest.raises(ValueError):
            check_delimiter("")
