import pytest
from hypothesis import given, strategies as st

from pushswap.linked_list import LinkedList, Node


def test_iteration_keeps_order():
    values = [4, -2, 9, 0]
    assert list(LinkedList(values)) == values


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_add_front_puts_value_first():
    lst = LinkedList([1, 2])
    node = lst.add_front(7)
    assert list(lst) == [7, 1, 2]
    assert lst.head is node


def test_add_back_puts_value_last():
    lst = LinkedList([1, 2])
    node = lst.add_back(7)
    assert list(lst) == [1, 2, 7]
    assert lst.last() is node


def test_add_back_on_empty_sets_head():
    lst = LinkedList()
    node = lst.add_back(5)
    assert lst.head is node
    assert list(lst) == [5]


def test_last_returns_node_with_last_value():
    lst = LinkedList([3, 8, 11])
    tail = lst.last()
    assert isinstance(tail, Node)
    assert tail.content == 11
    assert tail.next is None


@given(st.lists(st.integers()))
def test_len_matches_input(values):
    assert len(LinkedList(values)) == len(values)


def test_apply_replaces_values():
    values = [1, -3, 5]
    lst = LinkedList(values)
    lst.apply(lambda x: -x)
    assert list(lst) == [-v for v in values]


def test_apply_with_none_result_keeps_values():
    values = [1, 2, 3]
    seen = []
    lst = LinkedList(values)
    lst.apply(seen.append)
    assert seen == values
    assert list(lst) == values


def test_delete_front_returns_and_reports_value():
    seen = []
    lst = LinkedList([10, 20])
    assert lst.delete_front(seen.append) == 10
    assert seen == [10]
    assert list(lst) == [20]


def test_delete_front_on_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().delete_front()


def test_clear_visits_in_order_and_empties():
    values = [5, 6, 7]
    seen = []
    lst = LinkedList(values)
    lst.clear(seen.append)
    assert seen == values
    assert len(lst) == 0
    assert lst.head is None