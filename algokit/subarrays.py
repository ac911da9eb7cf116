"""Maximum sums and products of subarrays, runs and trapped water."""

from __future__ import annotations

from collections.abc import Sequence

_MIN_INT32 = -(2**31)
_MAX_INT32 = 2**31 - 1


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _require_values(nums: Sequence[int]) -> None:
    if not nums:
        raise ValueError("the sequence must not be empty")


def max_sub_array(nums: Sequence[int]) -> int:
    """Return the largest subarray sum greedily; an empty input gives -2**31."""
    best = _MIN_INT32
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        if running < 0:
            running = 0
    return best


def max_sub_array_v2(nums: Sequence[int]) -> int:
    """Return the largest subarray sum by trying every start."""
    _require_values(nums)
    best = nums[0]
    for start in range(len(nums)):
        running = 0
        for value in nums[start:]:
            running += value
            best = max(best, running)
    return best


def max_sub_array_v3(nums: Sequence[int]) -> int:
    """Return the largest subarray sum by dynamic programming."""
    _require_values(nums)
    best = ending_here = nums[0]
    for value in nums[1:]:
        ending_here = max(ending_here + value, value)
        best = max(best, ending_here)
    return best


def max_product(nums: Sequence[int]) -> int:
    """Return the largest product of a contiguous subarray by trying every start."""
    _require_values(nums)
    best = nums[0]
    for start in range(len(nums)):
        product = 1
        for value in nums[start:]:
            product *= value
            best = max(best, product)
    return best


def max_product_v2(nums: Sequence[int]) -> int:
    """Return a subarray product found with a shrinking window."""
    _require_values(nums)
    best = nums[0]
    product = 1
    left = 0
    for value in nums:
        product *= value
        best = max(best, product)
        while best > product and left < len(nums):
            product = _trunc_div(product, nums[left])
            left += 1
    return best


def num_subarray_product_less_than_k(nums: Sequence[int], k: int) -> int:
    """Count contiguous subarrays whose product is below ``k``, pair by pair."""
    count = 0
    for start, first in enumerate(nums):
        if first >= k:
            continue
        count += 1
        product = first
        for value in nums[start + 1:]:
            product *= value
            if product >= k:
                break
            count += 1
    return count


def num_subarray_product_less_than_k_v2(nums: Sequence[int], k: int) -> int:
    """Count contiguous subarrays whose product is below ``k`` with a window."""
    if k <= 1:
        return 0
    count = 0
    left = 0
    product = 1
    for right, value in enumerate(nums):
        product *= value
        while product >= k:
            product = _trunc_div(product, nums[left])
            left += 1
        count += right - left + 1
    return count


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers."""
    present = set(nums)
    used: set[int] = set()
    best = 0
    for value in nums:
        if value in used:
            continue
        left = value - 1
        while left in present and left not in used and left > _MIN_INT32:
            used.add(left)
            left -= 1
        right = value + 1
        while right in present and right not in used and right < _MAX_INT32:
            used.add(right)
            right += 1
        best = max(best, right - left - 1)
    return best


def _pools(height: Sequence[int]) -> list[list[int]]:
    """Cut the heights into runs that start at a drop and end past it."""
    pools: list[list[int]] = []
    last = len(height) - 1
    i = 1
    while i < last:
        if height[i] < height[i - 1]:
            wall = height[i - 1]
            pool = [wall]
            while i < last and wall >= height[i]:
                pool.append(height[i])
                i += 1
            pool.append(height[i])
            pools.append(pool)
        i += 1
    return pools


def _pool_volume(pool: Sequence[int]) -> int:
    level = pool[0] if pool[0] < pool[-1] else pool[-1]
    return sum(max(level - depth, 0) for depth in pool[1:-1])


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map holds."""
    if not height:
        return 0
    pools: list[list[int]] = []
    for pool in _pools(height):
        if pool[0] > pool[-1]:
            pools.extend(_pools(pool[::-1]))
        else:
            pools.append(pool)
    return sum(_pool_volume(pool) for pool in pools)