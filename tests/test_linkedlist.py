import pytest

from dsbasics.linkedlist import LinkedList, ListNode


def build(values):
    lst = LinkedList()
    for v in values:
        lst.append(v)
    return lst


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []


def test_append_keeps_order():
    lst = build([100, 50, 100, 20, 45, 75])
    assert list(lst) == [100, 50, 100, 20, 45, 75]
    assert len(lst) == 6


def test_set_values():
    lst = build([100, 50, 100, 20, 45, 75])
    lst[0] = 40
    lst[1] = 30
    lst[4] = 40
    assert list(lst) == [40, 30, 100, 20, 40, 75]


def test_set_out_of_range():
    lst = build([1, 2])
    with pytest.raises(IndexError):
        lst[2] = 9
    assert list(lst) == [1, 2]


def test_get_values_and_failure():
    lst = build([40, 30, 100, 20, 40, 75])
    assert lst[0] == 40
    assert lst[2] == 100
    with pytest.raises(IndexError):
        lst[6]


def test_negative_index():
    lst = build([1, 2, 3])
    assert lst[-1] == 3
    assert lst[-3] == 1
    with pytest.raises(IndexError):
        lst[-4]


def test_remove_sequence():
    lst = build([40, 30, 100, 20, 40, 75])
    del lst[2]
    assert list(lst) == [40, 30, 20, 40, 75]
    del lst[2]
    assert list(lst) == [40, 30, 40, 75]
    for _ in range(4):
        del lst[0]
    assert list(lst) == []
    assert len(lst) == 0
    with pytest.raises(IndexError):
        del lst[0]


def test_remove_tail_then_append():
    lst = build([1, 2, 3])
    del lst[2]
    lst.append(4)
    assert list(lst) == [1, 2, 4]


def test_insert_sequence():
    lst = build([10, 20])
    lst.insert(1, 40)
    assert list(lst) == [10, 40, 20]
    lst.insert(0, 5)
    assert list(lst) == [5, 10, 40, 20]
    lst.insert(0, 50)
    assert list(lst) == [50, 5, 10, 40, 20]
    assert len(lst) == 5


def test_insert_at_end_appends():
    lst = LinkedList()
    for i, v in enumerate([5, 25, 45, 55, 75]):
        lst.insert(i, v)
    assert list(lst) == [5, 25, 45, 55, 75]
    lst.append(1)
    assert lst[-1] == 1


def test_insert_out_of_range():
    lst = build([1])
    with pytest.raises(IndexError):
        lst.insert(2, 9)
    with pytest.raises(IndexError):
        lst.insert(-1, 9)
    assert list(lst) == [1]


def test_search_finds_first_node():
    lst = build([7, 8, 7])
    node = lst.search(7)
    assert isinstance(node, ListNode)
    assert node.data == 7
    assert node.next is not None and node.next.data == 8
    assert lst.search(99) is None


def test_clear_then_reuse():
    lst = build([1, 2, 3])
    lst.clear()
    assert len(lst) == 0
    assert list(lst) == []
    lst.append(10)
    assert list(lst) == [10]


def test_equality_with_list_and_list():
    assert build([1, 2]) == [1, 2]
    assert build([1, 2]) == build([1, 2])
    assert not (build([1, 2]) == [2, 1])


def test_matches_python_list_under_mixed_operations():
    lst = LinkedList()
    ref = []
    ops = [("a", 3), ("i", 0, 1), ("i", 2, 9), ("d", 1), ("a", 4), ("i", 1, 6), ("d", -1)]
    for op in ops:
        if op[0] == "a":
            lst.append(op[1])
            ref.append(op[1])
        elif op[0] == "i":
            lst.insert(op[1], op[2])
            ref.insert(op[1], op[2])
        else:
            del lst[op[1]]
            del ref[op[1]]
        assert list(lst) == ref
        assert len(lst) == len(ref)