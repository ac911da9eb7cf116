"""Singly linked lists and the classic operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: Optional[ListNode] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional[ListNode]:
        """Build a list holding ``values`` in order; ``None`` when empty."""
        head: Optional[ListNode] = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def values(self) -> list[int]:
        """Return the values from this node to the end of the list."""
        return [node.val for node in _walk(self)]


def _walk(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _check_position(n: int, length: int) -> None:
    if not 1 <= n <= length:
        raise ValueError(f"position {n} is outside a list of length {length}")


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Merge two sorted lists recursively, reusing their nodes."""
    if list1 is None:
        return list2
    if list2 is None:
        return list1
    if list1.val <= list2.val:
        list1.next = merge_two_lists(list1.next, list2)
        return list1
    list2.next = merge_two_lists(list1, list2.next)
    return list2


def merge_two_lists_iterative(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Merge two sorted lists with a running tail pointer."""
    if list1 is None:
        return list2
    if list2 is None:
        return list1
    anchor = ListNode()
    tail = anchor
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next = list1
            list1 = list1.next
        else:
            tail.next = list2
            list2 = list2.next
        tail = tail.next
    tail.next = list2 if list1 is None else list1
    return anchor.next


def merge_k_lists(lists: Sequence[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge sorted lists by repeatedly taking the smallest current head."""
    heads = {index: node for index, node in enumerate(lists) if node is not None}
    first: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    while heads:
        index = min(heads, key=lambda i: (heads[i].val, i))
        node = heads[index]
        if tail is None:
            first = node
        else:
            tail.next = node
        tail = node
        if node.next is None:
            del heads[index]
        else:
            heads[index] = node.next
    return first


def merge_k_lists_divide(lists: Sequence[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge sorted lists by halving and merging pairwise.

    An empty sequence yields a single fresh node holding 0.
    """
    if not lists:
        return ListNode()
    if len(lists) == 1:
        return lists[0]
    mid = len(lists) // 2
    left = merge_k_lists_divide(lists[:mid])
    right = merge_k_lists_divide(lists[mid:])
    return merge_two_lists(left, right)


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Remove the n-th node from the end, looking nodes up by position."""
    by_index = dict(enumerate(_walk(head)))
    length = len(by_index)
    _check_position(n, length)
    if n == length:
        return head.next
    by_index[length - n - 1].next = by_index.get(length - n + 1)
    return head


def remove_nth_from_end_v2(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Remove the n-th node from the end using a list of the nodes."""
    nodes = list(_walk(head))
    length = len(nodes)
    _check_position(n, length)
    if n == length:
        return head.next
    previous = nodes[length - n - 1]
    previous.next = None if n == 1 else nodes[length - n + 1]
    return head


def remove_nth_from_end_v3(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Remove the n-th node from the end with the help of a dummy head."""
    dummy = ListNode(0, head)
    nodes = list(_walk(dummy))
    _check_position(n, len(nodes) - 1)
    previous = nodes[-n - 1]
    previous.next = previous.next.next
    return dummy.next


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse every full run of k nodes; a short tail keeps its order."""
    if k < 1:
        raise ValueError(f"group size must be positive, got {k}")
    nodes = list(_walk(head))
    if not nodes:
        return head
    full = len(nodes) - len(nodes) % k
    ordered: list[ListNode] = []
    for start in range(0, full, k):
        ordered.extend(reversed(nodes[start:start + k]))
    ordered.extend(nodes[full:])
    for node, following in zip(ordered, ordered[1:]):
        node.next = following
    ordered[-1].next = None
    return ordered[0]


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or ``None``."""
    if head_a is None or head_b is None:
        return None
    first, second = head_a, head_b
    switched = False
    while first is not second:
        first = first.next
        if first is None:
            if switched:
                return None
            first = head_b
            switched = True
        second = second.next
        if second is None:
            second = head_a
    return first


def get_kth_from_end(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Return the k-th node counted from the end (the tail is the first).

    A k larger than the list yields the head; k of 0 yields ``None``.
    """
    if k < 0:
        raise ValueError(f"position must not be negative, got {k}")
    nodes = list(_walk(head))
    index = max(len(nodes) - k, 0)
    return nodes[index] if index < len(nodes) else None


def get_kth_from_end_v2(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Return the k-th node from the end with a trailing pointer."""
    behind = head
    for step, _ in enumerate(_walk(head), start=1):
        if step > k:
            behind = behind.next
    return behind