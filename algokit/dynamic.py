"""Dynamic programming: stairs, coins, equal partitions and Fibonacci."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

_MODULUS = 1_000_000_007
_UNREACHABLE = 2**31 - 1

# _STAIRS[i] is the number of ways to climb i + 1 steps.
_STAIRS: list[int] = [1, 2]
_FIBONACCI: list[int] = [0, 1]


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` steps one or two at a time, memoised."""
    if n < 1:
        raise ValueError(f"number of steps must be positive, got {n}")
    while len(_STAIRS) < n:
        _STAIRS.append(_STAIRS[-1] + _STAIRS[-2])
    return _STAIRS[n - 1]


def climb_stairs_v2(n: int) -> int:
    """Count the ways with two rolling values; 0 or fewer steps gives 1."""
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return current


def climb_stairs_v3(n: int) -> int:
    """Count the ways with a table of every step count up to ``n``."""
    if n < 1:
        raise ValueError(f"number of steps must be positive, got {n}")
    table = [1, 2]
    while len(table) < n:
        table.append(table[-2] + table[-1])
    return table[n - 1]


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Return the fewest coins making ``amount``, or -1, by memoised search."""
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")

    @lru_cache(maxsize=None)
    def fewest(rest: int) -> int:
        if rest == 0:
            return 0
        if rest < 0:
            return -1
        best = -1
        for coin in coins:
            sub = fewest(rest - coin)
            if sub != -1 and (best == -1 or sub + 1 < best):
                best = sub + 1
        return best

    return fewest(amount)


def coin_change_greedy(coins: Sequence[int], amount: int) -> int:
    """Take as many of each coin as fit, largest first; -1 if something is left.

    This is not always optimal.
    """
    used = 0
    for coin in sorted(coins, reverse=True):
        if amount == 0:
            break
        if coin > amount:
            continue
        taken, amount = divmod(amount, coin)
        used += taken
    return used if amount == 0 else -1


def coin_change_v3(coins: Sequence[int], amount: int) -> int:
    """Return the fewest coins making ``amount``, or -1, bottom up."""
    fewest = [0] + [_UNREACHABLE] * amount
    for total in range(amount + 1):
        for coin in coins:
            if total - coin >= 0:
                fewest[total] = min(fewest[total], 1 + fewest[total - coin])
    return -1 if fewest[amount] == _UNREACHABLE else fewest[amount]


def _half_target(nums: Sequence[int]) -> int | None:
    if len(nums) < 2:
        return None
    total = sum(nums)
    if total % 2 == 1:
        return None
    target = total // 2
    if target < max(nums):
        return None
    return target


def can_partition(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` splits into two halves of equal sum, by listing all subset sums."""
    target = _half_target(nums)
    if target is None:
        return False
    sums = {0}
    for value in nums:
        sums |= {partial + value for partial in sums}
    return target in sums


def can_partition_v2(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` splits into two halves of equal sum, by a 0/1 knapsack."""
    target = _half_target(nums)
    if target is None:
        return False
    reachable = [True] + [False] * target
    for value in nums:
        for total in range(target, value - 1, -1):
            reachable[total] = reachable[total] or reachable[total - value]
    return reachable[target]


def fib(n: int) -> int:
    """Return the n-th Fibonacci number modulo 1e9+7, memoised; n below 2 gives n."""
    if n < 2:
        return n
    while len(_FIBONACCI) <= n:
        _FIBONACCI.append((_FIBONACCI[-1] + _FIBONACCI[-2]) % _MODULUS)
    return _FIBONACCI[n]


def fib2(n: int) -> int:
    """Return the n-th Fibonacci number modulo 1e9+7 iteratively."""
    if n < 2:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, (previous + current) % _MODULUS
    return current