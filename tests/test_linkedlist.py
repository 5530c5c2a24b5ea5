import pytest

from sigtalk.linkedlist import LinkedList, Node


def test_empty_list():
    items = LinkedList()
    assert len(items) == 0
    assert list(items) == []
    assert items.last() is None
    assert items.head is None


def test_init_from_iterable_keeps_order():
    items = LinkedList(["a", "b", "c"])
    assert list(items) == ["a", "b", "c"]
    assert len(items) == 3


def test_add_front_prepends():
    items = LinkedList([2, 3])
    node = items.add_front(1)
    assert items.head is node
    assert list(items) == [1, 2, 3]
    assert len(items) == 3


def test_add_front_on_empty_sets_last():
    items = LinkedList()
    node = items.add_front("x")
    assert items.last() is node
    assert node.next is None


def test_add_back_appends():
    items = LinkedList([1])
    node = items.add_back(2)
    assert items.last() is node
    assert list(items) == [1, 2]


def test_last_returns_tail_node():
    items = LinkedList(["first", "second"])
    last = items.last()
    assert isinstance(last, Node)
    assert last.content == "second"
    assert last.next is None


def test_none_content_is_kept():
    items = LinkedList()
    items.add_back(None)
    assert len(items) == 1
    assert list(items) == [None]


def test_clear_calls_delete_in_order():
    deleted = []
    items = LinkedList([1, 2, 3])
    items.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(items) == 0
    assert items.last() is None


def test_clear_without_delete_empties():
    items = LinkedList(["a"])
    items.clear()
    assert list(items) == []


def test_list_usable_after_clear():
    items = LinkedList([1, 2])
    items.clear()
    items.add_back(9)
    assert list(items) == [9]
    assert items.last().content == 9


def test_iterate_visits_each_content():
    seen = []
    items = LinkedList(["x", "y"])
    items.iterate(seen.append)
    assert seen == ["x", "y"]


def test_map_builds_new_list():
    items = LinkedList([1, 2, 3])
    doubled = items.map(lambda value: value * 2)
    assert list(doubled) == [2, 4, 6]
    assert list(items) == [1, 2, 3]
    assert doubled is not items


def test_map_failure_deletes_partial_results():
    deleted = []

    def f(value):
        if value == 3:
            raise RuntimeError("boom")
        return value * 10

    items = LinkedList([1, 2, 3])
    with pytest.raises(RuntimeError):
        items.map(f, deleted.append)
    assert deleted == [10, 20]


def test_nodes_are_linked():
    items = LinkedList(["a", "b"])
    assert items.head.content == "a"
    assert items.head.next is items.last()