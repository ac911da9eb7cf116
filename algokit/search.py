"""Binary searches, peak finding and medians of sorted arrays."""

from __future__ import annotations

import heapq
from collections.abc import Callable, Sequence
from itertools import islice


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums`` or where it would go."""
    if not nums:
        raise ValueError("cannot search an empty sequence")
    left, right = 0, len(nums) - 1
    while left < right:
        mid = left + (right - left) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return left if nums[left] >= target else left + 1


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in sorted ``nums``, or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of the first interior peak, 0 for one element, else -1."""
    if len(nums) == 1:
        return 0
    for index in range(1, len(nums) - 1):
        if nums[index - 1] < nums[index] > nums[index + 1]:
            return index
    return -1


def find_peaks(mountain: Sequence[int]) -> list[int]:
    """Return the indices of all interior peaks."""
    return [
        index
        for index in range(1, len(mountain) - 1)
        if mountain[index - 1] < mountain[index] > mountain[index + 1]
    ]


def find_indices(
    nums: Sequence[int], index_difference: int, value_difference: int
) -> list[int]:
    """Return the first pair of indices far enough apart in position and value.

    Gives ``[-1, -1]`` when no such pair exists.
    """
    if index_difference < 0:
        raise ValueError(f"index difference must not be negative, got {index_difference}")
    length = len(nums)
    for left in range(length - index_difference):
        for right in range(left + index_difference, length):
            if abs(nums[left] - nums[right]) >= value_difference:
                return [left, right]
    return [-1, -1]


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the values of two sorted sequences."""
    total = len(nums1) + len(nums2)
    if total == 0:
        raise ValueError("both sequences are empty")
    middle = list(
        islice(heapq.merge(nums1, nums2), (total - 1) // 2, total // 2 + 1)
    )
    return sum(middle) / len(middle)


def first_bad_version(n: int, is_bad_version: Callable[[int], bool]) -> int:
    """Return the first version in 1..n for which ``is_bad_version`` holds."""
    left, right = 1, n
    while left < right:
        mid = left + (right - left) // 2
        if is_bad_version(mid):
            right = mid
        else:
            left = mid + 1
    return left