"""Array manipulations that rewrite a list in place."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Move the distinct values of sorted ``nums`` to its front and count them."""
    if len(nums) < 2:
        return len(nums)
    last = 0
    for value in nums[1:]:
        if nums[last] != value:
            last += 1
            nums[last] = value
    return last + 1


def sort_colors(nums: MutableSequence[int]) -> None:
    """Order 0s, 1s and 2s in place by counting; any other value becomes 2."""
    zeros = sum(1 for value in nums if value == 0)
    ones = sum(1 for value in nums if value == 1)
    nums[:] = [0] * zeros + [1] * ones + [2] * (len(nums) - zeros - ones)


def _rotation(nums: Sequence[int], k: int) -> int:
    if not nums:
        raise ValueError("cannot rotate an empty sequence")
    if k < 0:
        raise ValueError(f"rotation must not be negative, got {k}")
    return k % len(nums)


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` places by splicing its two parts."""
    k = _rotation(nums, k)
    split = len(nums) - k
    nums[:] = list(nums[split:]) + list(nums[:split])


def rotate_v2(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` places through a copy."""
    k = _rotation(nums, k)
    original = list(nums)
    length = len(original)
    for index, value in enumerate(original):
        nums[(index + k) % length] = value


def rotate_v3(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` places with three reversals."""
    k = _rotation(nums, k)
    nums.reverse()
    nums[:k] = nums[:k][::-1]
    nums[k:] = nums[k:][::-1]


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end, shifting the rest left in order."""
    left, right = 0, len(nums) - 1
    while left < right:
        if nums[left] == 0:
            nums.insert(right, nums.pop(left))
            right -= 1
        else:
            left += 1


def move_zeroes_v2(nums: MutableSequence[int]) -> None:
    """Move every zero to the end by swapping non-zero values forward."""
    left = 0
    for right, value in enumerate(nums):
        if value != 0:
            if nums[left] == 0:
                nums[left], nums[right] = nums[right], nums[left]
            left += 1


def reverse_string(s: MutableSequence) -> None:
    """Reverse a mutable sequence of characters or bytes in place."""
    half = len(s) // 2
    for i in range(half):
        s[i], s[-i - 1] = s[-i - 1], s[i]


def reverse_string_v2(s: MutableSequence) -> None:
    """Reverse a mutable sequence in place with two converging pointers."""
    left, right = 0, len(s) - 1
    while left < right:
        s[left], s[right] = s[right], s[left]
        left += 1
        right -= 1


def sorted_squares(nums: Sequence[int]) -> list[int]:
    """Return the squares of sorted ``nums`` in non-decreasing order."""
    left, right = 0, len(nums) - 1
    squares: list[int] = []
    while left <= right:
        low = nums[left] * nums[left]
        high = nums[right] * nums[right]
        if high > low:
            squares.append(high)
            right -= 1
        else:
            squares.append(low)
            left += 1
    squares.reverse()
    return squares