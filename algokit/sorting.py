"""Classic comparison sorts that order a list in place and return it."""

from __future__ import annotations

from collections.abc import MutableSequence


def bubble_sort(arr: MutableSequence[int]) -> MutableSequence[int]:
    """Sort ``arr`` in place by repeatedly swapping adjacent pairs."""
    length = len(arr)
    for done in range(length - 1):
        for j in range(length - done - 1):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
    return arr


def select_sort(arr: MutableSequence[int]) -> MutableSequence[int]:
    """Sort ``arr`` in place by moving the smallest remaining item forward."""
    length = len(arr)
    for i in range(length):
        smallest = min(range(i, length), key=arr.__getitem__)
        arr[i], arr[smallest] = arr[smallest], arr[i]
    return arr


def insert_sort(arr: MutableSequence[int]) -> MutableSequence[int]:
    """Sort ``arr`` in place by sinking each item into the sorted prefix."""
    for i in range(1, len(arr)):
        for j in range(i, 0, -1):
            if arr[j] < arr[j - 1]:
                arr[j], arr[j - 1] = arr[j - 1], arr[j]
    return arr


def _partition(arr: MutableSequence[int], left: int, right: int) -> int:
    start, end = left, right
    pivot = arr[left]
    while start < end:
        while pivot <= arr[end] and start < end:
            end -= 1
        while pivot >= arr[start] and start < end:
            start += 1
        arr[start], arr[end] = arr[end], arr[start]
    arr[left] = arr[start]
    arr[start] = pivot
    return end


def quick_sort(arr: MutableSequence[int]) -> MutableSequence[int]:
    """Sort ``arr`` in place by partitioning around the first item of each range."""
    pending = [(0, len(arr) - 1)]
    while pending:
        left, right = pending.pop()
        if left > right:
            continue
        split = _partition(arr, left, right)
        pending.append((split + 1, right))
        pending.append((left, split - 1))
    return arr


def _merge(arr: MutableSequence[int], left: int, mid: int, right: int) -> None:
    merged: list[int] = []
    i, j = left, mid + 1
    while i <= mid and j <= right:
        if arr[i] < arr[j]:
            merged.append(arr[i])
            i += 1
        else:
            merged.append(arr[j])
            j += 1
    merged.extend(arr[i:mid + 1])
    merged.extend(arr[j:right + 1])
    arr[left:right + 1] = merged


def _divide(arr: MutableSequence[int], left: int, right: int) -> None:
    if left < right:
        mid = (left + right) // 2
        _divide(arr, left, mid)
        _divide(arr, mid + 1, right)
        _merge(arr, left, mid, right)


def merge_sort(arr: MutableSequence[int]) -> MutableSequence[int]:
    """Sort ``arr`` in place by splitting it in halves and merging them."""
    _divide(arr, 0, len(arr) - 1)
    return arr