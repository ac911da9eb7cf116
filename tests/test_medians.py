import statistics

import pytest

from algokit.medians import HeapMedianFinder, LinkedMedianFinder


def _feed(finder, numbers):
    for number in numbers:
        finder.add_num(number)
    return finder.find_median()


def test_linked_source_case():
    assert _feed(LinkedMedianFinder(), [6, 10, 2, 6]) == 6.0


def test_heap_source_case():
    assert _feed(HeapMedianFinder(), [-1, -2]) == -1.5


@pytest.mark.parametrize(
    "numbers",
    [[6, 10, 2, 6], [1, 2], [1, 2, 3], [5, 3], [5, 3, 4], [2, 1, 3], [7]],
)
def test_linked_matches_statistics(numbers):
    assert _feed(LinkedMedianFinder(), numbers) == statistics.median(numbers)


@pytest.mark.parametrize(
    "numbers",
    [
        [6, 10, 2, 6],
        [-1, -2, -3, -4, -5],
        [6, 10, 2, 6, 5, 0, 6, 3, 1, 0, 0],
        [3, 3, 3, 3],
        [9, 1, 8, 2, 7, 3],
    ],
)
def test_heap_matches_statistics(numbers):
    assert _feed(HeapMedianFinder(), numbers) == statistics.median(numbers)


def test_heap_median_after_each_step():
    finder = HeapMedianFinder()
    seen = []
    for number in [4, 9, 1, 7, 7, 2]:
        finder.add_num(number)
        seen.append(number)
        assert finder.find_median() == statistics.median(seen)


def test_heap_empty_median_is_zero():
    assert HeapMedianFinder().find_median() == 0.0


def test_linked_empty_raises():
    with pytest.raises(ValueError):
        LinkedMedianFinder().find_median()