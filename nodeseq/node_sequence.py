"""
Mutable, delimiter-joined token sequence for rebuilding filenames.

A NodeSequence splits a string into nodes by a delimiter and lets callers
insert, merge, replace and remove nodes, then join them back together.
Negative indices address nodes from the end (-1 is the last node) and are
resolved against the size at the time of each call.
"""

import logging
import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from nodeseq.delimiters import DEFAULT_DELIMITER
from nodeseq.errors import EmptySequenceError, IndexOutOfRange, InvalidArgument
from nodeseq.linked_list import DoublyLinkedList, ListNode, NodeCursor
from nodeseq.preprocessing import check_delimiter, tokenize

logger = logging.getLogger(__name__)


class NodeSequence:
    """
    An ordered, mutable list of string nodes plus the delimiter that joins them.

    Every editing method tokenizes its text argument with the sequence's
    delimiter, mutates the sequence in place and returns ``self`` so calls
    can be chained:

        >>> seq = NodeSequence("org.myname.project.no1180.zip")
        >>> str(seq.replace_first("com").merge_at("_new", -2).set_extension("tar.gz"))
        'com.myname.project.no1180_new.tar.gz'

    Each call runs under an instance lock. Use ``locked()`` to make a chain of
    calls atomic with respect to other threads.
    """

    def __init__(self, text: str, delimiter: str = DEFAULT_DELIMITER):
        """
        Args:
            text: The string to split into nodes. Leading, trailing and repeated
                delimiters produce no nodes.
            delimiter: Non-empty separator, matched literally.

        Raises:
            InvalidArgument: If `text` or `delimiter` is missing.
        """
        self._setup(tokenize(text, delimiter), delimiter)

    def _setup(self, tokens: Iterable[str], delimiter: str) -> None:
        self._delimiter = delimiter
        self._nodes = DoublyLinkedList(tokens)
        self._lock = threading.RLock()

    @classmethod
    def from_tokens(cls, tokens: Iterable[str], delimiter: str = DEFAULT_DELIMITER) -> "NodeSequence":
        """Build a sequence from already split tokens, kept verbatim (empty strings included)."""
        check_delimiter(delimiter)
        if tokens is None:
            raise InvalidArgument("tokens == None")
        tokens = list(tokens)
        for token in tokens:
            if not isinstance(token, str):
                raise InvalidArgument(f"tokens must be str, got {type(token).__name__}")
        seq = cls.__new__(cls)
        seq._setup(tokens, delimiter)
        return seq

    def copy(self) -> "NodeSequence":
        """Return an independent sequence with the same delimiter and nodes."""
        return NodeSequence.from_tokens(self.tokens(), self._delimiter)

    @contextmanager
    def locked(self) -> Iterator["NodeSequence"]:
        """Hold the instance lock for the duration of a block of calls."""
        with self._lock:
            yield self

    # ------------------------------------------------------------------
    # Index resolution
    # ------------------------------------------------------------------

    def resolve(self, index: int) -> int:
        """
        Turn a possibly negative index into an absolute position.

        For a sequence of size 5, resolve(-1) == 4, resolve(-5) == 0 and
        resolve(3) == 3. The result is only valid until the next mutation.

        Raises:
            IndexOutOfRange: If the sequence is empty or `index` is outside [-size, size - 1].
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidArgument(f"index must be int, got {type(index).__name__}")
        with self._lock:
            size = self._nodes.size
            if size <= 0:
                raise IndexOutOfRange(
                    "size = 0, use insert_first(text) or insert_last(text) instead",
                    index=index,
                    lower=0,
                    upper=-1,
                )
            if index < -size or index > size - 1:
                raise IndexOutOfRange.for_index(index, size)
            return index if index >= 0 else size + index

    def _node_at(self, index: int) -> ListNode:
        return self._nodes.node_at(self.resolve(index))

    def _edge(self, operation: str, last: bool) -> ListNode:
        node = self._nodes.tail if last else self._nodes.head
        if node is None:
            raise EmptySequenceError(operation)
        return node

    def _tokenize(self, text: str) -> list[str]:
        return tokenize(text, self._delimiter)

    def _edited(self, operation: str) -> "NodeSequence":
        logger.debug("%s -> %d nodes", operation, self._nodes.size)
        return self

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def insert_at(self, text: str, index: int) -> "NodeSequence":
        """
        Insert the nodes of `text` so the first of them lands at `index`.

            a.b.txt  insert_at("new", 0)  ->  new.a.b.txt
            a.b.txt  insert_at("tmp", -1) ->  a.b.tmp.txt
        """
        tokens = self._tokenize(text)
        with self._lock:
            self._nodes.insert_all_before(self._node_at(index), tokens)
            return self._edited("insert_at")

    def insert_first(self, text: str) -> "NodeSequence":
        """Insert the nodes of `text` before the first node. Works on an empty sequence."""
        tokens = self._tokenize(text)
        with self._lock:
            for token in reversed(tokens):
                self._nodes.appendleft(token)
            return self._edited("insert_first")

    def insert_last(self, text: str) -> "NodeSequence":
        """Append the nodes of `text` after the last node. Works on an empty sequence."""
        tokens = self._tokenize(text)
        with self._lock:
            self._nodes.extend(tokens)
            return self._edited("insert_last")

    # ------------------------------------------------------------------
    # Merging (append-style) and fusing (prepend-style)
    # ------------------------------------------------------------------

    def _merge_into(self, node: ListNode, tokens: list[str]) -> None:
        # First fragment glues onto the right of the node, the rest follow it
        node.token = node.token + (tokens[0] if tokens else "")
        self._nodes.insert_all_after(node, tokens[1:])

    def _fuse_into(self, node: ListNode, tokens: list[str]) -> None:
        # Last fragment glues onto the left of the node, the rest precede it
        node.token = (tokens[-1] if tokens else "") + node.token
        self._nodes.insert_all_before(node, tokens[:-1])

    def merge_at(self, text: str, index: int) -> "NodeSequence":
        """
        Append `text` to the node at `index`.

        The first fragment of `text` is concatenated onto the node; any further
        fragments become new nodes right after it.

            a.b.txt  merge_at("_new", 0)     ->  a_new.b.txt
            a.b.txt  merge_at("_x.y", -2)    ->  a.b_x.y.txt
        """
        tokens = self._tokenize(text)
        with self._lock:
            self._merge_into(self._node_at(index), tokens)
            return self._edited("merge_at")

    def merge_first(self, text: str) -> "NodeSequence":
        tokens = self._tokenize(text)
        with self._lock:
            self._merge_into(self._edge("merge_first", last=False), tokens)
            return self._edited("merge_first")

    def merge_last(self, text: str) -> "NodeSequence":
        tokens = self._tokenize(text)
        with self._lock:
            self._merge_into(self._edge("merge_last", last=True), tokens)
            return self._edited("merge_last")

    def fuse_at(self, text: str, index: int) -> "NodeSequence":
        """
        Prepend `text` to the node at `index`.

        The last fragment of `text` is concatenated in front of the node; the
        fragments before it become new nodes right before it.

            192.168.1.3.log  fuse_at("5", 3)       ->  192.168.1.53.log
            a.b.txt          fuse_at("x.y_", -1)   ->  a.b.x.y_txt
        """
        tokens = self._tokenize(text)
        with self._lock:
            self._fuse_into(self._node_at(index), tokens)
            return self._edited("fuse_at")

    def fuse_first(self, text: str) -> "NodeSequence":
        tokens = self._tokenize(text)
        with self._lock:
            self._fuse_into(self._edge("fuse_first", last=False), tokens)
            return self._edited("fuse_first")

    def fuse_last(self, text: str) -> "NodeSequence":
        tokens = self._tokenize(text)
        with self._lock:
            self._fuse_into(self._edge("fuse_last", last=True), tokens)
            return self._edited("fuse_last")

    # ------------------------------------------------------------------
    # Replacement
    # ------------------------------------------------------------------

    def _replace(self, node: ListNode, tokens: list[str]) -> None:
        self._nodes.insert_all_before(node, tokens)
        self._nodes.remove_node(node)

    def replace_at(self, text: str, index: int) -> "NodeSequence":
        """Replace the node at `index` with the nodes of `text`."""
        tokens = self._tokenize(text)
        with self._lock:
            self._replace(self._node_at(index), tokens)
            return self._edited("replace_at")

    def replace_first(self, text: str) -> "NodeSequence":
        tokens = self._tokenize(text)
        with self._lock:
            self._replace(self._edge("replace_first", last=False), tokens)
            return self._edited("replace_first")

    def replace_last(self, text: str) -> "NodeSequence":
        return self._replace_last(text, "replace_last")

    def set_extension(self, text: str) -> "NodeSequence":
        """
        Replace the last node, the extension for "." delimited filenames.

            a.b.txt  set_extension("zip")     ->  a.b.zip
            a.b.txt  set_extension(".tar.gz") ->  a.b.tar.gz
        """
        return self._replace_last(text, "set_extension")

    def _replace_last(self, text: str, operation: str) -> "NodeSequence":
        tokens = self._tokenize(text)
        with self._lock:
            self._replace(self._edge(operation, last=True), tokens)
            return self._edited(operation)

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------

    def remove_at(self, index: int) -> "NodeSequence":
        with self._lock:
            self._nodes.remove_node(self._node_at(index))
            return self._edited("remove_at")

    def remove_range(self, from_index: int, to_index: int) -> "NodeSequence":
        """
        Remove every node from `from_index` to `to_index`, both inclusive.

        Raises:
            IndexOutOfRange: If either index cannot be resolved.
            InvalidArgument: If the resolved start lies after the resolved end.
        """
        with self._lock:
            start = self.resolve(from_index)
            end = self.resolve(to_index)
            if start > end:
                raise InvalidArgument(f"Start({start}) > End({end})", start=start, end=end)
            node = self._nodes.node_at(start)
            for _ in range(end - start + 1):
                following = node.next
                self._nodes.remove_node(node)
                node = following
            return self._edited("remove_range")

    def remove_first(self) -> "NodeSequence":
        with self._lock:
            self._nodes.remove_node(self._edge("remove_first", last=False))
            return self._edited("remove_first")

    def remove_last(self) -> "NodeSequence":
        with self._lock:
            self._nodes.remove_node(self._edge("remove_last", last=True))
            return self._edited("remove_last")

    def prune_empty(self) -> "NodeSequence":
        """Remove every empty node, keeping the order of the rest."""
        with self._lock:
            node = self._nodes.head
            while node:
                following = node.next
                if not node.token:
                    self._nodes.remove_node(node)
                node = following
            return self._edited("prune_empty")

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def at(self, index: int) -> str:
        """Return the node at `index`; negative indices count from the end."""
        with self._lock:
            return self._node_at(index).token

    def first(self) -> str:
        with self._lock:
            return self._edge("first", last=False).token

    def last(self) -> str:
        with self._lock:
            return self._edge("last", last=True).token

    def extension(self) -> str:
        """Return the last node. Usually this is the extension of a "." delimited filename."""
        with self._lock:
            return self._edge("extension", last=True).token

    @property
    def delimiter(self) -> str:
        return self._delimiter

    def size(self) -> int:
        return self._nodes.size

    def tokens(self) -> list[str]:
        """Return a snapshot list of the current nodes."""
        with self._lock:
            return self._nodes.to_list()

    def iterate(self) -> NodeCursor:
        """
        Return a live forward cursor over the nodes.

        The cursor sees mutations made while it is being consumed, and
        ``cursor.remove()`` drops the node it returned last. It does not take
        the instance lock; wrap the traversal in ``locked()`` when sharing the
        sequence between threads.
        """
        return NodeCursor(self._nodes)

    def to_node_list_string(self) -> str:
        """Return the raw nodes for debugging, e.g. "[a, b, txt]"."""
        with self._lock:
            return "[" + ", ".join(self._nodes.to_list()) + "]"

    def serialize(self) -> str:
        """Join the nodes with the delimiter."""
        with self._lock:
            return self._delimiter.join(self._nodes.to_list())

    def __str__(self):
        return self.serialize()

    def __repr__(self):
        return f"NodeSequence({self.to_node_list_string()}, delimiter={self._delimiter!r})"

    def __len__(self):
        return self._nodes.size

    def __iter__(self):
        return self.iterate()

    def __eq__(self, other):
        if not isinstance(other, NodeSequence):
            return NotImplemented
        return self._delimiter == other._delimiter and self.tokens() == other.tokens()

    __hash__ = None
