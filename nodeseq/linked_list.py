from collections.abc import Iterable, Iterator


class ListNode:
    """Node for doubly linked list representation of a delimited string."""

    def __init__(self, token: str):
        self.token = token
        self.prev: ListNode | None = None
        self.next: ListNode | None = None
        self.linked = True

    def __repr__(self):
        return f"Node({self.token!r})"

    def __eq__(self, other):
        if not isinstance(other, ListNode):
            return False
        return self is other

    def __hash__(self):
        return hash(id(self))


class DoublyLinkedList:
    """Doubly linked list for in-place token sequence modifications."""

    def __init__(self, tokens: Iterable[str] = ()):
        self.head: ListNode | None = None
        self.tail: ListNode | None = None
        self.size = 0

        # Build the linked list from token sequence
        for token in tokens:
            self.append(token)

    def __len__(self) -> int:
        return self.size

    def append(self, token: str) -> ListNode:
        """Add a token to the end of the list and return the new node."""
        new_node = ListNode(token)
        if self.head is None:
            self.head = self.tail = new_node
        else:
            new_node.prev = self.tail
            self.tail.next = new_node
            self.tail = new_node
        self.size += 1
        return new_node

    def appendleft(self, token: str) -> ListNode:
        """Add a token to the front of the list and return the new node."""
        if self.head is None:
            return self.append(token)
        return self.insert_before(self.head, token)

    def extend(self, tokens: Iterable[str]) -> None:
        for token in tokens:
            self.append(token)

    def remove_node(self, node: ListNode) -> None:
        """Remove a node from the list in O(1) time.

        The node keeps its ``next`` pointer so a cursor standing on it can
        still step forward.
        """
        if node.prev:
            node.prev.next = node.next
        else:
            self.head = node.next

        if node.next:
            node.next.prev = node.prev
        else:
            self.tail = node.prev

        node.linked = False
        self.size -= 1

    def insert_after(self, node: ListNode, token: str) -> ListNode:
        """Insert a new token after the given node and return the new node."""
        new_node = ListNode(token)
        new_node.next = node.next
        new_node.prev = node

        if node.next:
            node.next.prev = new_node
        else:
            self.tail = new_node

        node.next = new_node
        self.size += 1
        return new_node

    def insert_before(self, node: ListNode, token: str) -> ListNode:
        """Insert a new token before the given node and return the new node."""
        new_node = ListNode(token)
        new_node.prev = node.prev
        new_node.next = node

        if node.prev:
            node.prev.next = new_node
        else:
            self.head = new_node

        node.prev = new_node
        self.size += 1
        return new_node

    def insert_all_before(self, node: ListNode, tokens: list[str]) -> None:
        for token in tokens:
            self.insert_before(node, token)

    def insert_all_after(self, node: ListNode, tokens: list[str]) -> None:
        # Walk backwards so the tokens keep their order after `node`
        for token in reversed(tokens):
            self.insert_after(node, token)

    def node_at(self, position: int) -> ListNode:
        """Return the node at a non-negative position, walking from the nearer end."""
        if position < 0 or position >= self.size:
            raise IndexError(position)
        if position <= self.size // 2:
            current = self.head
            for _ in range(position):
                current = current.next
        else:
            current = self.tail
            for _ in range(self.size - 1 - position):
                current = current.prev
        return current

    def to_list(self) -> list[str]:
        """Convert linked list back to regular list for debugging/output."""
        result = []
        current = self.head
        while current:
            result.append(current.token)
            current = current.next
        return result


class NodeCursor(Iterator[str]):
    """
    Forward cursor over a DoublyLinkedList.

    The cursor is not a snapshot: nodes removed or inserted ahead of it are
    seen (or skipped) as the list changes. ``remove()`` drops the node most
    recently returned by ``next()``.
    """

    def __init__(self, dll: DoublyLinkedList):
        self._dll = dll
        self._last: ListNode | None = None
        self._started = False

    def _upcoming(self) -> ListNode | None:
        if not self._started:
            return self._dll.head
        if self._last.linked:
            return self._last.next
        # The last node was unlinked; resume at the first live node after it
        node = self._last.next
        while node is not None and not node.linked:
            node = node.next
        return node

    def __iter__(self) -> "NodeCursor":
        return self

    def __next__(self) -> str:
        node = self._upcoming()
        if node is None:
            raise StopIteration
        self._started = True
        self._last = node
        return node.token

    def remove(self) -> None:
        """Remove the token last returned by the cursor from the list."""
        if self._last is None or not self._last.linked:
            raise RuntimeError("remove() called before next() or twice for the same token")
        self._dll.remove_node(self._last)
