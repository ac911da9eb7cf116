import pytest

from algokit.stacks import FastMinStack, MinStack, RecentCounter, TwoStackQueue


def test_min_stack_push_top_min():
    stack = MinStack()
    for value in (5, 2, 8):
        stack.push(value)
    assert stack.top() == 8
    assert stack.get_min() == 2
    assert len(stack) == 3


def test_min_stack_pop_restores_previous_min():
    stack = MinStack()
    stack.push(5)
    stack.push(2)
    stack.pop()
    assert stack.get_min() == 5
    assert stack.top() == 5


def test_min_stack_empty_defaults():
    stack = MinStack()
    stack.pop()
    assert len(stack) == 0
    assert stack.top() == 0
    assert stack.get_min() == 0


def test_fast_min_stack_tracks_minimum():
    stack = FastMinStack()
    for value in (-2, 0, -3):
        stack.push(value)
    assert stack.min() == -3
    stack.pop()
    assert stack.top() == 0
    assert stack.min() == -2


def test_fast_min_stack_duplicate_minimum():
    stack = FastMinStack()
    stack.push(1)
    stack.push(1)
    stack.pop()
    assert stack.min() == 1


def test_fast_min_stack_matches_scanning_stack():
    fast, slow = FastMinStack(), MinStack()
    for value in (7, 3, 9, 3, 1, 4):
        fast.push(value)
        slow.push(value)
        assert fast.min() == slow.get_min()
    for _ in range(5):
        fast.pop()
        slow.pop()
        assert fast.min() == slow.get_min()
        assert fast.top() == slow.top()


def test_fast_min_stack_empty_pop_raises():
    with pytest.raises(IndexError):
        FastMinStack().pop()


def test_fast_min_stack_empty_top_raises():
    with pytest.raises(IndexError):
        FastMinStack().top()


def test_queue_is_fifo():
    queue = TwoStackQueue()
    for value in (10, 20, 30):
        queue.append_tail(value)
    assert queue.delete_head() == 10
    queue.append_tail(40)
    assert [queue.delete_head() for _ in range(3)] == [20, 30, 40]


def test_queue_empty_returns_minus_one():
    queue = TwoStackQueue()
    assert queue.delete_head() == -1
    queue.append_tail(7)
    queue.delete_head()
    assert queue.delete_head() == -1


def test_recent_counter_window():
    counter = RecentCounter()
    assert [counter.ping(t) for t in (1, 100, 3001, 3002)] == [1, 2, 3, 3]


def test_recent_counter_drops_old_requests():
    counter = RecentCounter()
    counter.ping(1)
    counter.ping(2)
    assert counter.ping(10000) == 1