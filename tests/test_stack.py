import pytest

from dsbasics.stack import EmptyStackError, Stack


def test_new_stack_is_empty():
    stack = Stack()
    assert stack.is_empty() is True
    assert len(stack) == 0


def test_pop_order_is_reverse_of_push():
    stack = Stack()
    for value in (1, 2, 3, 4, 5):
        stack.push(value)
    assert stack.pop() == 5
    assert stack.pop() == 4
    rest = []
    while not stack.is_empty():
        rest.append(stack.pop())
    assert rest == [3, 2, 1]


def test_hundreds_come_out_reversed():
    stack = Stack()
    pushed = list(range(0, 1001, 100))
    for value in pushed:
        stack.push(value)
    popped = []
    while not stack.is_empty():
        popped.append(stack.pop())
    assert popped == pushed[::-1]


def test_peek_does_not_remove():
    stack = Stack()
    stack.push(7)
    stack.push(9)
    assert stack.peek() == 9
    assert stack.peek() == 9
    assert len(stack) == 2


def test_pop_empty_raises():
    stack = Stack()
    with pytest.raises(EmptyStackError):
        stack.pop()


def test_peek_empty_raises():
    stack = Stack()
    with pytest.raises(EmptyStackError):
        stack.peek()


def test_empty_error_is_index_error():
    stack = Stack()
    with pytest.raises(IndexError):
        stack.pop()


def test_clear_empties_stack():
    stack = Stack()
    for value in (1, 2, 3):
        stack.push(value)
    stack.clear()
    assert stack.is_empty() is True
    with pytest.raises(EmptyStackError):
        stack.pop()


def test_iteration_is_top_to_bottom_and_non_destructive():
    stack = Stack()
    for value in (1, 2, 3):
        stack.push(value)
    assert list(stack) == [3, 2, 1]
    assert len(stack) == 3