"""Singly linked lists: a managed list class and node-chain helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any
    next: ListNode | None = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


class LinkedList:
    """A singly linked list that tracks its head, tail and length."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: ListNode | None = None
        self._tail: ListNode | None = None
        self._size = 0
        for value in values:
            self.add_at_tail(value)

    @property
    def head(self) -> ListNode | None:
        return self._head

    def _node_at(self, index: int) -> ListNode:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def get(self, index: int) -> Any:
        """Return the value at ``index``; raise IndexError if out of range."""
        if not 0 <= index < self._size:
            raise IndexError("linked list index out of range")
        return self._node_at(index).val

    def add_at_head(self, val: Any) -> None:
        self._head = ListNode(val, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def add_at_tail(self, val: Any) -> None:
        node = ListNode(val)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def add_at_index(self, index: int, val: Any) -> None:
        """Insert before position ``index``; indices past the end are ignored."""
        if not 0 <= index <= self._size:
            return
        if index == 0:
            self.add_at_head(val)
        elif index == self._size:
            self.add_at_tail(val)
        else:
            prev = self._node_at(index - 1)
            prev.next = ListNode(val, prev.next)
            self._size += 1

    def delete_at_index(self, index: int) -> None:
        """Remove the node at ``index``; out-of-range indices are ignored."""
        if not 0 <= index < self._size:
            return
        if index == 0:
            self._head = self._head.next
            if self._head is None:
                self._tail = None
        else:
            prev = self._node_at(index - 1)
            removed = prev.next
            prev.next = removed.next
            if removed is self._tail:
                self._tail = prev
        self._size -= 1

    def reverse(self) -> None:
        """Reverse the list in place."""
        self._tail = self._head
        self._head = reverse_iterative(self._head)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.val for node in _nodes(self._head))

    def __contains__(self, key: object) -> bool:
        return contains(self._head, key)

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


def from_iterable(values: Iterable[Any]) -> ListNode | None:
    """Build a node chain holding ``values`` in order."""
    dummy = ListNode(None)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_list(head: ListNode | None) -> list[Any]:
    """Return the values of a node chain as a list."""
    return [node.val for node in _nodes(head)]


def insert_at_head(head: ListNode | None, val: Any) -> ListNode:
    """Prepend ``val`` and return the new head."""
    return ListNode(val, head)


def insert_at_tail(head: ListNode | None, val: Any) -> ListNode:
    """Append ``val`` and return the head."""
    node = ListNode(val)
    if head is None:
        return node
    last = head
    while last.next is not None:
        last = last.next
    last.next = node
    return head


def delete_value(head: ListNode | None, value: Any) -> ListNode | None:
    """Remove the first node holding ``value`` and return the head.

    Raises ValueError if no node holds ``value``.
    """
    if head is None:
        raise ValueError(f"{value!r} not in list")
    if head.val == value:
        return head.next
    prev = head
    while prev.next is not None:
        if prev.next.val == value:
            prev.next = prev.next.next
            return head
        prev = prev.next
    raise ValueError(f"{value!r} not in list")


def contains(head: ListNode | None, key: Any) -> bool:
    """Return True if some node holds ``key``."""
    return any(node.val == key for node in _nodes(head))


def reverse_iterative(head: ListNode | None) -> ListNode | None:
    """Reverse a node chain in place and return its new head."""
    prev = None
    current = head
    while current is not None:
        current.next, prev, current = prev, current, current.next
    return prev


def reverse_recursive(head: ListNode | None) -> ListNode | None:
    """Reverse a node chain recursively and return its new head."""
    if head is None or head.next is None:
        return head
    new_head = reverse_recursive(head.next)
    head.next.next = head
    head.next = None
    return new_head


def reverse_k(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse every group of ``k`` nodes, including a shorter final group."""
    if k < 1:
        raise ValueError("group size must be at least 1")
    new_head = None
    prev_group_tail = None
    node = head
    while node is not None:
        group_head = node
        prev = None
        for _ in range(k):
            if node is None:
                break
            node.next, prev, node = prev, node, node.next
        if prev_group_tail is None:
            new_head = prev
        else:
            prev_group_tail.next = prev
        prev_group_tail = group_head
    return new_head