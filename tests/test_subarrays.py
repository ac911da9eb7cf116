import pytest

from algokit.subarrays import (
    longest_consecutive,
    max_product,
    max_product_v2,
    max_sub_array,
    max_sub_array_v2,
    max_sub_array_v3,
    num_subarray_product_less_than_k,
    num_subarray_product_less_than_k_v2,
    trap,
)


@pytest.mark.parametrize("func", [max_sub_array, max_sub_array_v2, max_sub_array_v3])
@pytest.mark.parametrize(
    "nums, expected",
    [([-2, 1, -3, 4, -1, 2, 1, -5, 4], 6), ([-1], -1), ([5, 4, -1, 7, 8], 23)],
)
def test_max_sub_array(func, nums, expected):
    assert func(nums) == expected


def test_max_sub_array_greedy_empty():
    assert max_sub_array([]) == -2147483648


@pytest.mark.parametrize("func", [max_sub_array_v2, max_sub_array_v3, max_product])
def test_empty_input_rejected(func):
    with pytest.raises(ValueError):
        func([])


@pytest.mark.parametrize("func", [max_product, max_product_v2])
def test_max_product_source_case(func):
    assert func([2, 3, -2, 4]) == 6


def test_max_product_brute_force():
    assert max_product([-2, 0, -1]) == 0
    assert max_product([-2, 3, -4]) == 24


def test_num_subarray_product_less_than_k_source_case():
    nums = [57, 44, 92, 28, 66, 60, 37, 33, 52, 38, 29, 76, 8, 75, 22]
    assert num_subarray_product_less_than_k(nums, 18) == 1


def test_num_subarray_product_less_than_k_v2_source_input():
    assert num_subarray_product_less_than_k_v2([1000, 100], 18) == 0


@pytest.mark.parametrize(
    "func", [num_subarray_product_less_than_k, num_subarray_product_less_than_k_v2]
)
def test_num_subarray_product_less_than_k(func):
    assert func([10, 5, 2, 6], 100) == 8
    assert func([1, 2, 3], 0) == 0


def test_longest_consecutive_source_case():
    assert longest_consecutive([1, 8, 2, 3, 4, 9, 5, 10]) == 5


def test_longest_consecutive_more():
    assert longest_consecutive([100, 4, 200, 1, 3, 2]) == 4
    assert longest_consecutive([]) == 0


@pytest.mark.parametrize(
    "height, expected",
    [
        ([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1], 6),
        ([4, 2, 3], 1),
        ([5, 2, 1, 2, 1, 5], 14),
        ([], 0),
        ([3], 0),
    ],
)
def test_trap(height, expected):
    assert trap(height) == expected