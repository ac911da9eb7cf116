"""Counting puzzles: collinear points, set bits, digit ones and dice."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Sequence
from math import gcd


def max_points(points: Sequence[Sequence[int]]) -> int:
    """Return the largest number of points lying on one straight line."""
    coords = [(p[0], p[1]) for p in points]
    if len(coords) <= 2:
        return len(coords)
    best = 0
    for i, (x0, y0) in enumerate(coords):
        same = 1
        directions: Counter[tuple[int, int]] = Counter()
        for x, y in coords[i + 1:]:
            dx, dy = x - x0, y - y0
            if dx == 0 and dy == 0:
                same += 1
                continue
            step = gcd(dx, dy)
            dx, dy = dx // step, dy // step
            if dx < 0 or (dx == 0 and dy < 0):
                dx, dy = -dx, -dy
            directions[(dx, dy)] += 1
        best = max(best, same + max(directions.values(), default=0))
    return best


def hamming_weight(n: int) -> int:
    """Count the set bits among the low 32 bits of ``n`` (two's complement)."""
    return bin(n & 0xFFFFFFFF).count("1")


def count_digit_one(n: int) -> int:
    """Count the digit 1 in all integers from 1 to ``n``."""
    total = 0
    factor = 1
    while factor <= n:
        high, rest = divmod(n, factor * 10)
        current, low = divmod(rest, factor)
        if current == 0:
            total += high * factor
        elif current == 1:
            total += high * factor + low + 1
        else:
            total += (high + 1) * factor
        factor *= 10
    return total


def rand10(rand7: Callable[[], int]) -> int:
    """Draw uniformly from 1..10 using a uniform 1..7 source, by rejection."""
    while True:
        value = (rand7() - 1) * 7 + rand7()
        if value <= 40:
            return value % 10 + 1