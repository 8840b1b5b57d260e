from collections.abc import Iterator
from functools import lru_cache

import regex as re

from nodeseq.errors import InvalidArgument


@lru_cache(maxsize=64)
def _delimiter_pattern(delimiter: str):
    # The delimiter is an opaque string, never a pattern
    return re.compile(re.escape(delimiter))


def check_delimiter(delimiter: str) -> None:
    """Raise InvalidArgument unless `delimiter` is a non-empty string."""
    if delimiter is None:
        raise InvalidArgument("delimiter == None")
    if not isinstance(delimiter, str):
        raise InvalidArgument(f"delimiter must be str, got {type(delimiter).__name__}")
    if not delimiter:
        raise InvalidArgument("delimiter must not be empty")


def _check_arguments(text: str, delimiter: str) -> None:
    if text is None:
        raise InvalidArgument("input == None")
    if not isinstance(text, str):
        raise InvalidArgument(f"input must be str, got {type(text).__name__}")
    check_delimiter(delimiter)


def iter_tokens(text: str, delimiter: str) -> Iterator[str]:
    """
    Split `text` on every literal occurrence of `delimiter`.

    - Consecutive, leading and trailing delimiters produce no empty tokens.
    - Returns an iterator of tokens (use list(iter_tokens(...)) to materialize).

    Args:
        text: The string to split
        delimiter: Non-empty separator, matched literally

    Raises:
        InvalidArgument: If either argument is missing, not a string, or the delimiter is empty
    """
    _check_arguments(text, delimiter)
    return _iter_tokens(text, delimiter)


def _iter_tokens(text: str, delimiter: str) -> Iterator[str]:
    for fragment in _delimiter_pattern(delimiter).splititer(text):
        if fragment:  # Skip empty strings
            yield fragment


def tokenize(text: str, delimiter: str) -> list[str]:
    """Split `text` by `delimiter` into a list of non-empty tokens."""
    return list(iter_tokens(text, delimiter))
