import pytest

from algokit.seq_stack import SeqStack

DATA = [1, 2, 3, 4, 5]


def filled():
    stack = SeqStack(len(DATA), len(DATA))
    for value in DATA:
        stack.push(value)
    return stack


def test_new_stack_is_empty():
    stack = SeqStack(5, 5)
    assert stack.is_empty() is True
    assert len(stack) == 0


def test_peek_returns_last_pushed():
    stack = filled()
    assert stack.peek() == DATA[-1]
    assert len(stack) == len(DATA)


def test_pop_is_lifo():
    stack = filled()
    assert [stack.pop() for _ in range(len(DATA))] == list(reversed(DATA))
    assert stack.is_empty() is True


def test_empty_pop_and_peek_raise():
    stack = SeqStack(2, 2)
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()


def test_push_beyond_capacity_grows_by_increment():
    stack = SeqStack(2, 3)
    for value in range(3):
        stack.push(value)
    assert stack.capacity == 2 + 3
    assert len(stack) == 3
    assert stack.peek() == 2


def test_push_without_increment_overflows():
    stack = SeqStack(1, 0)
    stack.push(1)
    with pytest.raises(OverflowError):
        stack.push(2)


def test_clear_non_empty_resets_capacity():
    stack = filled()
    stack.clear()
    assert stack.is_empty() is True
    assert stack.capacity == 0
    stack.push(7)
    assert stack.capacity == stack.increment
    assert stack.pop() == 7


def test_clear_empty_keeps_capacity():
    stack = SeqStack(4, 2)
    stack.clear()
    assert stack.capacity == 4