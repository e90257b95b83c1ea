"""Singly linked list with a sentinel head node."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from itertools import pairwise
from typing import Iterable, Iterator, Optional

NAME_LIMIT = 63
"""Longest list name kept; longer names are cut to this many characters."""


@dataclass(eq=False)
class Node:
    """One link of a :class:`LinkedList`."""

    data: int
    next: Optional["Node"] = None


class LinkedList:
    """A named singly linked list of integers."""

    def __init__(self, name: str = "") -> None:
        self.name = name[:NAME_LIMIT]
        self._head = Node(0)
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({self.name!r}, {list(self)!r})"

    def _nodes(self) -> Iterator[Node]:
        node = self._head.next
        while node is not None:
            yield node
            node = node.next

    def _find(self, index: int) -> Optional[Node]:
        """Return the node at ``index``, where -1 is the sentinel head."""
        if index < -1:
            return None
        node: Optional[Node] = self._head
        position = -1
        while node is not None:
            if position == index:
                return node
            node = node.next
            position += 1
        return None

    def _last(self) -> Node:
        node = self._head
        while node.next is not None:
            node = node.next
        return node

    def _extend(self, values: Iterable[int]) -> None:
        tail = self._last()
        for value in values:
            tail.next = Node(value)
            tail = tail.next
            self._length += 1

    def node_at(self, index: int) -> Node:
        """Return the node at position ``index`` counted from zero."""
        node = self._find(index) if index >= 0 else None
        if node is None:
            raise IndexError(f"no node at index {index}")
        return node

    def push_front(self, data: int) -> None:
        """Insert ``data`` before the first element."""
        self._head.next = Node(data, self._head.next)
        self._length += 1

    def push_back(self, data: int) -> None:
        """Append ``data`` after the last element."""
        self._last().next = Node(data)
        self._length += 1

    def insert(self, index: int, data: int) -> None:
        """Insert ``data`` so that it ends up at position ``index``."""
        before = self._find(index - 1)
        if before is None:
            raise IndexError("index error")
        before.next = Node(data, before.next)
        self._length += 1

    def pop_front(self) -> int:
        """Remove and return the first element."""
        first = self._head.next
        if first is None:
            raise IndexError("pop from empty list")
        self._head.next = first.next
        self._length -= 1
        return first.data

    def pop_back(self) -> int:
        """Remove and return the last element."""
        if self._head.next is None:
            raise IndexError("pop from empty list")
        before = self._head
        while before.next.next is not None:
            before = before.next
        last = before.next
        before.next = None
        self._length -= 1
        return last.data

    def delete(self, index: int) -> int:
        """Remove and return the element at ``index``."""
        before = self._find(index - 1)
        if before is None:
            raise IndexError(f"position {index} is invalid")
        target = before.next
        if target is None:
            raise IndexError(f"no node at index {index}")
        before.next = target.next
        self._length -= 1
        return target.data

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes."""
        node = self._head.next
        self._head.next = None
        while node is not None:
            following = node.next
            node.next = self._head.next
            self._head.next = node
            node = following

    def adjacent_max(self) -> Optional[tuple[Node, int]]:
        """Find the adjacent pair with the largest sum.

        Returns the first node of that pair and the sum, or ``None`` when the
        list holds fewer than two elements. On ties the earliest pair wins.
        """
        best: Optional[tuple[Node, int]] = None
        for left, right in pairwise(self._nodes()):
            total = left.data + right.data
            if best is None or total > best[1]:
                best = (left, total)
        return best

    def render(self) -> str:
        """Return the one-line textual form of the list."""
        items = "".join(f"-[{value}]" for value in self)
        return f"{{LIST-{self.name}:{self._length}}}{items}"


def merge_sorted(first: LinkedList, second: LinkedList) -> LinkedList:
    """Merge two ascending lists into a new unnamed list.

    Equal values are taken from ``first`` before ``second``.
    """
    merged = LinkedList("")
    merged._extend(heapq.merge(first, second))
    return merged