"""Greedy and counting puzzles over lists of integers."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Sequence
from itertools import cycle


def num_rescue_boats(people: Sequence[int], limit: int) -> int:
    """Return the boats needed when each carries at most two people under ``limit``."""
    weights = sorted(people)
    start, end = 0, len(weights) - 1
    boats = 0
    while start <= end:
        if weights[start] + weights[end] <= limit:
            start += 1
        end -= 1
        boats += 1
    return boats


def find_maximized_capital(
    k: int, w: int, profits: Sequence[int], capital: Sequence[int]
) -> int:
    """Run up to ``k`` affordable projects and return the final capital.

    Among the projects affordable at each step the least profitable is taken.
    """
    if len(profits) != len(capital):
        raise ValueError("profits and capital must have the same length")
    projects = sorted(zip(capital, profits))
    available: list[int] = []
    start = 0
    for _ in range(k):
        while start < len(projects) and projects[start][0] <= w:
            heapq.heappush(available, projects[start][1])
            start += 1
        if not available:
            break
        w += heapq.heappop(available)
    return w


def chalk_replacer(chalk: Sequence[int], k: int) -> int:
    """Return the student who first finds too little chalk, going round the class."""
    if not chalk:
        return 0
    if not any(chalk):
        raise ValueError("no student uses any chalk")
    for index, cost in cycle(enumerate(chalk)):
        if k < cost:
            return index
        k -= cost
    raise AssertionError("unreachable")


def _reduce(chalk: Sequence[int], k: int) -> int:
    total = sum(chalk)
    if total == 0:
        raise ValueError("no chalk is used in a full round")
    return k % total


def chalk_replacer_v2(chalk: Sequence[int], k: int) -> int:
    """Like ``chalk_replacer``, skipping whole rounds first."""
    return chalk_replacer(chalk, _reduce(chalk, k))


def chalk_replacer_v3(chalk: Sequence[int], k: int) -> int:
    """Like ``chalk_replacer_v2``, with a single pass after skipping rounds."""
    k = _reduce(chalk, k)
    for index, cost in enumerate(chalk):
        if k < cost:
            return index
        k -= cost
    return 0


def slowest_key(release_times: Sequence[int], keys_pressed: str) -> str:
    """Return the key held longest; ties go to the alphabetically largest."""
    if not release_times or not keys_pressed:
        raise ValueError("no key presses given")
    duration = release_times[0]
    key = keys_pressed[0]
    previous = release_times[0]
    for release, pressed in zip(release_times[1:], keys_pressed[1:]):
        held = release - previous
        previous = release
        if held > duration or (held == duration and pressed > key):
            duration = held
            key = pressed
    return key


def missing_rolls(rolls: Sequence[int], mean: int, n: int) -> list[int]:
    """Return ``n`` dice values giving the overall ``mean``, or [] if impossible."""
    if n <= 0:
        raise ValueError(f"number of missing rolls must be positive, got {n}")
    missing = mean * (n + len(rolls)) - sum(rolls)
    if missing > 6 * n or missing < n:
        return []
    base, extra = divmod(missing, n)
    return [base + 1] * extra + [base] * (n - extra)


def max_div_score(nums: Sequence[int], divisors: Sequence[int]) -> int:
    """Return the divisor dividing the most numbers, the smallest on ties.

    Zero divisors are skipped; 0 comes back when none remain.
    """
    best_count = 0
    best = 0
    for divisor in divisors:
        if divisor == 0:
            continue
        count = sum(1 for number in nums if number % divisor == 0)
        if count > best_count:
            best_count = count
            best = divisor
        elif count == best_count and (divisor < best or best == 0):
            best = divisor
    return best


def find_winners(matches: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the sorted players with no losses and with exactly one loss."""
    losses: Counter[int] = Counter()
    for winner, loser in matches:
        losses[winner] += 0
        losses[loser] += 1
    undefeated = sorted(player for player, count in losses.items() if count == 0)
    beaten_once = sorted(player for player, count in losses.items() if count == 1)
    return [undefeated, beaten_once]


def the_maximum_achievable_x(num: int, t: int) -> int:
    """Return the largest x that can reach ``num`` in ``t`` paired steps."""
    return num + (t << 1)