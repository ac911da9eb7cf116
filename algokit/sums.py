"""Pair and triple sums, sum-of-squares checks and word distances."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Optional

_MAX_INT = 2**63 - 1


def two_sum(nums: Sequence[int], target: int) -> Optional[list[int]]:
    """Return the indices of two numbers adding up to ``target``, or ``None``."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [partner, index]
        seen[value] = index
    return None


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return the distinct triples, in ascending order, that add up to zero."""
    ordered = sorted(nums)
    result: list[list[int]] = []
    for i, first in enumerate(ordered):
        if i > 0 and ordered[i - 1] == first:
            continue
        left, right = i + 1, len(ordered) - 1
        while left < right:
            total = first + ordered[left] + ordered[right]
            if total < 0:
                left += 1
            elif total > 0:
                right -= 1
            else:
                result.append([first, ordered[left], ordered[right]])
                while left < right:
                    if ordered[left] == ordered[left + 1]:
                        left += 1
                    elif ordered[right] == ordered[right - 1]:
                        right -= 1
                    else:
                        left += 1
                        right -= 1
                        break
    return result


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Return the sum of three numbers closest to ``target`` (0 if none)."""
    ordered = sorted(nums)
    best_gap = _MAX_INT
    closest = 0
    for i, first in enumerate(ordered):
        left, right = i + 1, len(ordered) - 1
        while left < right:
            total = first + ordered[left] + ordered[right]
            gap = target - total
            if gap > 0:
                left += 1
            elif gap < 0:
                right -= 1
            else:
                return total
            if abs(gap) < best_gap:
                best_gap = abs(gap)
                closest = total
    return closest


def two_sum_sorted(numbers: Sequence[int], target: int) -> Optional[list[int]]:
    """Return 1-based indices of a pair summing to ``target`` by trying every pair."""
    for i, first in enumerate(numbers):
        for j in range(i + 1, len(numbers)):
            if first + numbers[j] == target:
                return [i + 1, j + 1]
    return None


def two_sum_sorted_v2(numbers: Sequence[int], target: int) -> Optional[list[int]]:
    """Return 1-based indices of a pair summing to ``target`` using a lookup table."""
    positions: dict[int, int] = {}
    for index, value in enumerate(numbers, start=1):
        partner = positions.get(target - value)
        if partner is not None:
            return [partner, index]
        positions[value] = index
    return None


def two_sum_sorted_v3(numbers: Sequence[int], target: int) -> Optional[list[int]]:
    """Return 1-based indices of a pair summing to ``target`` with two pointers."""
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total > target:
            right -= 1
        elif total < target:
            left += 1
        else:
            return [left + 1, right + 1]
    return None


def two_sum_sorted_v4(numbers: Sequence[int], target: int) -> Optional[list[int]]:
    """Return 1-based indices of a pair summing to ``target`` by binary search."""
    for index, first in enumerate(numbers):
        left, right = index + 1, len(numbers) - 1
        while left <= right:
            mid = left + (right - left) // 2
            rest = target - numbers[mid] - first
            if rest > 0:
                left = mid + 1
            elif rest < 0:
                right = mid - 1
            else:
                return [index + 1, mid + 1]
    return None


def judge_square_sum(total: int) -> bool:
    """Tell whether ``total`` is a sum of two squares."""
    if total < 0:
        raise ValueError(f"total must not be negative, got {total}")
    low, high = 0, math.isqrt(total)
    while low <= high:
        value = low * low + high * high
        if value == total:
            return True
        if value < total:
            low += 1
        else:
            high -= 1
    return False


def find_closest(words: Sequence[str], word1: str, word2: str) -> int:
    """Return the smallest distance between occurrences of two words.

    Equal words give 0; a word that never occurs gives the largest 64-bit integer.
    """
    if word1 == word2:
        return 0
    first = [index for index, word in enumerate(words) if word == word1]
    second = [index for index, word in enumerate(words) if word == word2]
    i = j = 0
    best = _MAX_INT
    while i < len(first) and j < len(second):
        distance = second[j] - first[i]
        if distance > 0:
            i += 1
        else:
            j += 1
            distance = -distance
        if distance == 1:
            return 1
        best = min(best, distance)
    return best


def find_closest_v2(words: Sequence[str], word1: str, word2: str) -> int:
    """Return the smallest distance between two words in a single pass."""
    if word1 == word2:
        return 0
    last1 = last2 = -1
    best = _MAX_INT
    for index, word in enumerate(words):
        if word == word1:
            last1 = index
        if word == word2:
            last2 = index
        if last1 >= 0 and last2 >= 0:
            best = min(best, abs(last2 - last1))
    return best