import pytest

from dsakit.stack import (
    Stack,
    StackOverflowError,
    StackUnderflowError,
    is_operator,
    precedence,
)


def test_push_pop_is_lifo():
    stack = Stack(10)
    for item in "abc":
        stack.push(item)
    assert [stack.pop() for _ in range(3)] == ["c", "b", "a"]
    assert stack.is_empty()


def test_iteration_goes_top_to_bottom():
    stack = Stack(5)
    for item in [1, 2, 3]:
        stack.push(item)
    assert list(stack) == [3, 2, 1]
    assert len(stack) == 3


def test_peek_does_not_remove():
    stack = Stack(3)
    stack.push("x")
    assert stack.peek() == "x"
    assert len(stack) == 1


def test_push_on_full_stack_raises():
    stack = Stack(2)
    stack.push(1)
    stack.push(2)
    assert stack.is_full()
    with pytest.raises(StackOverflowError):
        stack.push(3)
    assert list(stack) == [2, 1]


def test_pop_and_peek_on_empty_raise():
    stack = Stack(1)
    with pytest.raises(StackUnderflowError):
        stack.pop()
    with pytest.raises(StackUnderflowError):
        stack.peek()


def test_unbounded_stack_never_full():
    stack = Stack()
    for item in range(100):
        stack.push(item)
    assert not stack.is_full()
    assert len(stack) == 100


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Stack(-1)


@pytest.mark.parametrize("char", ["+", "-", "*", "/", "^"])
def test_operators_recognised(char):
    assert is_operator(char) is True


@pytest.mark.parametrize("char", ["a", "(", ")", "1", "%"])
def test_non_operators(char):
    assert is_operator(char) is False


@pytest.mark.parametrize(
    "op,expected",
    [("+", 1), ("-", 1), ("*", 2), ("/", 2), ("^", 3), ("(", -1), ("a", -1)],
)
def test_precedence_values(op, expected):
    assert precedence(op) == expected