import pytest
from hypothesis import given, strategies as st

from miniprintf.linkedlist import LinkedList, Node


def test_empty_list():
    items = LinkedList()
    assert len(items) == 0
    assert list(items) == []
    assert items.last() is None
    assert items.head is None


def test_build_from_items_keeps_order():
    items = LinkedList(["a", "b", "c"])
    assert list(items) == ["a", "b", "c"]
    assert len(items) == 3


def test_push_front_becomes_head():
    items = LinkedList([2, 3])
    node = items.push_front(1)
    assert items.head is node
    assert list(items) == [1, 2, 3]


def test_push_back_on_empty_sets_head():
    items = LinkedList()
    node = items.push_back("only")
    assert items.head is node
    assert items.last() is node


def test_push_back_appends():
    items = LinkedList(["x"])
    items.push_back("y")
    assert list(items) == ["x", "y"]
    assert items.last().content == "y"


def test_last_has_no_next():
    items = LinkedList(range(5))
    tail = items.last()
    assert tail.next is None
    assert tail.content == 4


def test_node_chain():
    tail = Node("second")
    head = Node("first", tail)
    assert head.next is tail
    assert tail.next is None


def test_clear_calls_delete_in_order():
    deleted = []
    items = LinkedList(["a", "b", "c"])
    items.clear(deleted.append)
    assert deleted == ["a", "b", "c"]
    assert len(items) == 0
    assert items.head is None


def test_clear_without_delete_empties():
    items = LinkedList([1, 2])
    items.clear()
    assert list(items) == []


def test_for_each_visits_every_content():
    seen = []
    LinkedList([3, 1, 2]).for_each(seen.append)
    assert seen == [3, 1, 2]


def test_map_builds_new_list():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda value: value * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]
    assert mapped.head is not original.head


def test_map_empty_list_is_empty():
    assert len(LinkedList().map(str)) == 0


def test_map_propagates_errors():
    def boom(value):
        raise RuntimeError(value)

    with pytest.raises(RuntimeError):
        LinkedList([1]).map(boom)


@given(st.lists(st.integers()))
def test_round_trip_and_length(values):
    items = LinkedList(values)
    assert list(items) == values
    assert len(items) == len(values)


@given(st.lists(st.integers()), st.integers())
def test_push_front_then_back(values, extra):
    items = LinkedList(values)
    items.push_front(extra)
    items.push_back(extra)
    assert list(items) == [extra] + values + [extra]
    assert len(items) == len(values) + 2