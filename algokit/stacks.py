"""Stacks, a queue built from two stacks and a sliding request counter."""

from __future__ import annotations

from collections import deque

_EMPTY_MIN = 2**63 - 1
_WINDOW_MS = 3000


class MinStack:
    """A stack whose minimum is found by scanning its elements.

    ``pop`` on an empty stack does nothing; ``top`` and ``get_min`` give 0.
    """

    def __init__(self) -> None:
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, x: int) -> None:
        self._items.append(x)

    def pop(self) -> None:
        if self._items:
            self._items.pop()

    def top(self) -> int:
        return self._items[-1] if self._items else 0

    def get_min(self) -> int:
        return min(self._items) if self._items else 0


class FastMinStack:
    """A stack that tracks its minimum in constant time per operation."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._minimums: list[int] = []

    def push(self, x: int) -> None:
        self._items.append(x)
        if x <= self.min():
            self._minimums.append(x)

    def pop(self) -> None:
        value = self.top()
        self._items.pop()
        if self._minimums and value == self._minimums[-1]:
            self._minimums.pop()

    def top(self) -> int:
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def min(self) -> int:
        """Return the smallest element, or the largest 64-bit integer if empty."""
        return self._minimums[-1] if self._minimums else _EMPTY_MIN


class TwoStackQueue:
    """A FIFO queue made of an input and an output stack."""

    def __init__(self) -> None:
        self._incoming: list[int] = []
        self._outgoing: list[int] = []

    def append_tail(self, value: int) -> None:
        self._incoming.append(value)

    def delete_head(self) -> int:
        """Remove and return the oldest value, or -1 when the queue is empty."""
        if not self._outgoing:
            if not self._incoming:
                return -1
            while self._incoming:
                self._outgoing.append(self._incoming.pop())
        return self._outgoing.pop()


class RecentCounter:
    """Count the requests seen in the last 3000 milliseconds, inclusive."""

    def __init__(self) -> None:
        self._requests: deque[int] = deque()

    def ping(self, t: int) -> int:
        """Record a request at time ``t`` (increasing) and count those in [t-3000, t]."""
        self._requests.append(t)
        start = t - _WINDOW_MS
        while self._requests[0] < start:
            self._requests.popleft()
        return len(self._requests)