"""Tests for the doubly linked list backing a node sequence."""

import pytest

from nodeseq.linked_list import DoublyLinkedList, NodeCursor


def assert_links(dll: DoublyLinkedList):
    """Walk both directions and check they agree with size."""
    forward = dll.to_list()
    backward = []
    node = dll.tail
    while node:
        backward.append(node.token)
        node = node.prev
    assert forward == list(reversed(backward))
    assert len(forward) == dll.size


class TestDoublyLinkedList:
    def test_build_from_tokens(self):
        dll = DoublyLinkedList(["a", "b", "c"])
        assert dll.to_list() == ["a", "b", "c"]
        assert len(dll) == 3
        assert_links(dll)

    def test_empty(self):
        dll = DoublyLinkedList()
        assert dll.head is None and dll.tail is None
        assert dll.to_list() == []

    def test_appendleft(self):
        dll = DoublyLinkedList(["b"])
        dll.appendleft("a")
        assert dll.to_list() == ["a", "b"]
        assert_links(dll)

    def test_appendleft_on_empty(self):
        dll = DoublyLinkedList()
        dll.appendleft("a")
        assert dll.head is dll.tail
        assert dll.to_list() == ["a"]

    def test_insert_all_before_keeps_order(self):
        dll = DoublyLinkedList(["a", "d"])
        dll.insert_all_before(dll.tail, ["b", "c"])
        assert dll.to_list() == ["a", "b", "c", "d"]
        assert_links(dll)

    def test_insert_all_after_keeps_order(self):
        dll = DoublyLinkedList(["a", "d"])
        dll.insert_all_after(dll.head, ["b", "c"])
        assert dll.to_list() == ["a", "b", "c", "d"]
        assert_links(dll)

    def test_insert_after_tail_moves_tail(self):
        dll = DoublyLinkedList(["a"])
        node = dll.insert_after(dll.tail, "b")
        assert dll.tail is node
        assert_links(dll)

    def test_remove_head_middle_and_tail(self):
        dll = DoublyLinkedList(["a", "b", "c", "d"])
        dll.remove_node(dll.head)
        dll.remove_node(dll.node_at(1))
        dll.remove_node(dll.tail)
        assert dll.to_list() == ["b"]
        assert_links(dll)

    def test_node_at_from_both_ends(self):
        dll = DoublyLinkedList(list("abcdefg"))
        assert [dll.node_at(i).token for i in range(7)] == list("abcdefg")

    def test_node_at_out_of_range(self):
        dll = DoublyLinkedList(["a"])
        with pytest.raises(IndexError):
            dll.node_at(1)
        with pytest.raises(IndexError):
            dll.node_at(-1)


class TestNodeCursor:
    def test_walks_forward(self):
        assert list(NodeCursor(DoublyLinkedList(["a", "b", "c"]))) == ["a", "b", "c"]

    def test_remove_current(self):
        dll = DoublyLinkedList(["a", "b", "c"])
        cursor = NodeCursor(dll)
        for token in cursor:
            if token == "b":
                cursor.remove()
        assert dll.to_list() == ["a", "c"]

    def test_remove_every_node(self):
        dll = DoublyLinkedList(["a", "b", "c"])
        cursor = NodeCursor(dll)
        seen = []
        for token in cursor:
            seen.append(token)
            cursor.remove()
        assert seen == ["a", "b", "c"]
        assert dll.to_list() == []
        assert dll.head is None and dll.tail is None

    def test_remove_twice_fails(self):
        cursor = NodeCursor(DoublyLinkedList(["a", "b"]))
        next(cursor)
        cursor.remove()
        with pytest.raises(RuntimeError):
            cursor.remove()

    def test_remove_before_next_fails(self):
        with pytest.raises(RuntimeError):
            NodeCursor(DoublyLinkedList(["a"])).remove()

    def test_sees_nodes_appended_during_traversal(self):
        dll = DoublyLinkedList(["a"])
        cursor = NodeCursor(dll)
        assert next(cursor) == "a"
        dll.append("b")
        assert list(cursor) == ["b"]

    def test_skips_nodes_removed_ahead(self):
        dll = DoublyLinkedList(["a", "b", "c"])
        cursor = NodeCursor(dll)
        assert next(cursor) == "a"
        dll.remove_node(dll.node_at(1))
        assert list(cursor) == ["c"]
