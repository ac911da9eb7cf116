"""Permutations, power sets and Pascal's triangle."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import permutations


def permute(nums: Sequence[int]) -> list[list[int]]:
    """Return every ordering of ``nums``, positions taken in index order."""
    return [list(order) for order in permutations(nums)]


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return the power set, one subset per bit mask from 0 to 2**n - 1."""
    return [
        [value for bit, value in enumerate(nums) if mask >> bit & 1]
        for mask in range(1 << len(nums))
    ]


def subsets_v2(nums: Sequence[int]) -> list[list[int]]:
    """Return the power set in depth-first order."""
    found: list[list[int]] = []
    chosen: list[int] = []

    def extend(start: int) -> None:
        found.append(list(chosen))
        for index in range(start, len(nums)):
            chosen.append(nums[index])
            extend(index + 1)
            chosen.pop()

    extend(0)
    return found


def generate(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    if num_rows < 1:
        raise ValueError(f"number of rows must be positive, got {num_rows}")
    rows = [[1]]
    while len(rows) < num_rows:
        previous = rows[-1]
        inner = [a + b for a, b in zip(previous, previous[1:])]
        rows.append([1, *inner, 1])
    return rows