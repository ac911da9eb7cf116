"""Running medians of a stream of integers."""

from __future__ import annotations

import heapq
from typing import Optional


class _Node:
    __slots__ = ("val", "next", "prev")

    def __init__(self, val: int) -> None:
        self.val = val
        self.next: Optional[_Node] = None
        self.prev: Optional[_Node] = None

    def insert_after(self, node: _Node) -> None:
        following = self.next
        self.next = node
        node.prev = self
        if following is not None:
            node.next = following
            following.prev = node

    def insert_before(self, node: _Node) -> None:
        preceding = self.prev
        self.prev = node
        node.next = self
        if preceding is not None:
            node.prev = preceding
            preceding.next = node


class LinkedMedianFinder:
    """Keep the numbers in a sorted doubly linked list with a median pointer."""

    def __init__(self) -> None:
        self._median: Optional[_Node] = None
        self._count = 0
        self._moved_left = False

    def add_num(self, num: int) -> None:
        node = _Node(num)
        self._count += 1
        median = self._median
        if median is None:
            self._median = node
            return
        even = self._count % 2 == 0
        if num >= median.val:
            cursor = median.next
            if cursor is None:
                median.insert_after(node)
            else:
                while cursor.val <= num and cursor.next is not None:
                    cursor = cursor.next
                if cursor.val <= num:
                    cursor.insert_after(node)
                else:
                    cursor.insert_before(node)
            if even or self._moved_left:
                self._median = median.next
            self._moved_left = False
        else:
            cursor = median.prev
            if cursor is None:
                median.insert_before(node)
            else:
                while cursor.val >= num and cursor.prev is not None:
                    cursor = cursor.prev
                if cursor.val <= num:
                    cursor.insert_after(node)
                else:
                    cursor.insert_before(node)
            if even or not self._moved_left:
                self._median = median.prev
            self._moved_left = True

    def find_median(self) -> float:
        median = self._median
        if median is None:
            raise ValueError("no numbers have been added")
        if self._count % 2 == 1:
            return float(median.val)
        neighbour = median.next if self._moved_left else median.prev
        return (median.val + neighbour.val) / 2.0


class HeapMedianFinder:
    """Keep the lower half in a max-heap and the upper half in a min-heap."""

    def __init__(self) -> None:
        self._lower: list[int] = []  # negated values
        self._upper: list[int] = []

    def add_num(self, num: int) -> None:
        if not self._lower or num <= -self._lower[0]:
            heapq.heappush(self._lower, -num)
            if len(self._upper) + 1 < len(self._lower):
                heapq.heappush(self._upper, -heapq.heappop(self._lower))
        else:
            heapq.heappush(self._upper, num)
            if len(self._upper) > len(self._lower):
                heapq.heappush(self._lower, -heapq.heappop(self._upper))

    def find_median(self) -> float:
        """Return the median, or 0.0 before any number has been added."""
        if not self._lower:
            return 0.0
        if len(self._lower) == len(self._upper):
            return (-self._lower[0] + self._upper[0]) / 2.0
        return float(-self._lower[0])