"""
Exceptions raised by node sequences.

Every error is raised at the failing call, before the sequence is touched.
"""

from __future__ import annotations

from typing import Optional


class NodeSequenceError(Exception):
    """Base class for all node sequence errors."""


class InvalidArgument(NodeSequenceError, ValueError):
    """A required string is missing, or a range is given backwards."""

    def __init__(self, message: str, start: Optional[int] = None, end: Optional[int] = None):
        self.start = start
        self.end = end
        super().__init__(message)


class IndexOutOfRange(NodeSequenceError, IndexError):
    """An index cannot be resolved against the current sequence size."""

    def __init__(
        self,
        message: str,
        index: Optional[int] = None,
        lower: Optional[int] = None,
        upper: Optional[int] = None,
    ):
        self.index = index
        self.lower = lower
        self.upper = upper
        super().__init__(message)

    @classmethod
    def for_index(cls, index: int, size: int) -> IndexOutOfRange:
        lower, upper = -size, size - 1
        return cls(
            f"Element at {index} does not exist, index range: {lower} <= x <= {upper}",
            index=index,
            lower=lower,
            upper=upper,
        )


class EmptySequenceError(IndexOutOfRange):
    """An operation needs at least one token but the sequence is empty."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation}() on an empty sequence, use insert_first(text) or insert_last(text) instead")
