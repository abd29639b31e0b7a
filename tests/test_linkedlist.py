import pytest

from cellshell.linkedlist import LinkedList, Node


def test_construct_round_trip():
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_push_front_order():
    lst = LinkedList([2, 3])
    node = lst.push_front(1)
    assert lst.head is node
    assert list(lst) == [1, 2, 3]


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    node = lst.push_front("only")
    assert lst.last() is node
    assert len(lst) == 1


def test_push_back_order():
    lst = LinkedList()
    lst.push_back("x")
    node = lst.push_back("y")
    assert lst.last() is node
    assert list(lst) == ["x", "y"]


def test_last_returns_final_node():
    lst = LinkedList([1, 2, 3])
    last = lst.last()
    assert isinstance(last, Node)
    assert last.content == 3
    assert last.next is None


def test_nodes_are_linked():
    lst = LinkedList(["p", "q"])
    assert lst.head.content == "p"
    assert lst.head.next is lst.last()


def test_for_each_visits_in_order():
    lst = LinkedList([5, 6, 7])
    seen = []
    lst.for_each(seen.append)
    assert seen == [5, 6, 7]


def test_map_builds_new_list():
    lst = LinkedList(["a", "b"])
    mapped = lst.map(str.upper)
    assert list(mapped) == ["A", "B"]
    assert list(lst) == ["a", "b"]
    assert mapped.head is not lst.head


def test_map_error_propagates_and_keeps_original():
    lst = LinkedList([1, 0, 2])
    with pytest.raises(ZeroDivisionError):
        lst.map(lambda v: 1 // v)
    assert list(lst) == [1, 0, 2]


def test_clear_releases_each_content():
    lst = LinkedList(["a", "b", "c"])
    released = []
    lst.clear(released.append)
    assert released == ["a", "b", "c"]
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_clear_without_release_then_reuse():
    lst = LinkedList([1, 2])
    lst.clear()
    lst.push_back(9)
    assert list(lst) == [9]
    assert lst.head is lst.last()