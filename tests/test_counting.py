import random

import pytest

from algokit.counting import count_digit_one, hamming_weight, max_points, rand10


@pytest.mark.parametrize(
    "points, expected",
    [
        ([[0, 0], [1, 0], [2, 0], [3, 0]], 4),
        ([[1, 1], [3, 2], [5, 3], [4, 1], [2, 3], [1, 4]], 4),
        ([[1, 1], [2, 2], [3, 3]], 3),
        ([], 0),
        ([[5, 5]], 1),
        ([[0, 0], [1, 1]], 2),
        ([[1, 1], [1, 1], [2, 3]], 3),
        ([[0, 0], [0, 1], [0, 2], [1, 0]], 3),
    ],
)
def test_max_points(points, expected):
    assert max_points(points) == expected


@pytest.mark.parametrize(
    "n, expected",
    [(11, 3), (128, 1), (0, 0), (4294967293, 31), (-1, 32), (2**32, 0)],
)
def test_hamming_weight(n, expected):
    assert hamming_weight(n) == expected


@pytest.mark.parametrize(
    "n, expected", [(413, 186), (13, 6), (0, 0), (1, 1), (100, 21), (-5, 0)]
)
def test_count_digit_one(n, expected):
    assert count_digit_one(n) == expected


def test_rand10_each_value_from_four_pairs():
    values = []
    for first in range(1, 8):
        for second in range(1, 8):
            if (first - 1) * 7 + second <= 40:
                draws = iter([first, second])
                values.append(rand10(lambda: next(draws)))
    expected = [value for value in range(1, 11) for _ in range(4)]
    assert sorted(values) == expected


def test_rand10_rejects_high_draws():
    draws = iter([7, 7, 1, 3])
    assert rand10(lambda: next(draws)) == 4


def test_rand10_stays_in_range():
    source = random.Random(7)
    values = {rand10(lambda: source.randint(1, 7)) for _ in range(2000)}
    assert values == set(range(1, 11))