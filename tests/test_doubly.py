from hypothesis import given
from hypothesis import strategies as st

from chainlists.doubly import DoublyLinkedList, DoublyNode


def _check_links(lst):
    forward = list(lst)
    assert list(reversed(lst)) == forward[::-1]
    assert len(lst) == len(forward)
    if lst:
        assert lst.head.prev is None
        assert lst.tail.next is None
    else:
        assert lst.head is None and lst.tail is None


def test_empty_list():
    lst = DoublyLinkedList()
    assert not lst
    assert lst.search(1) is None
    assert lst.delete(1) == 0
    _check_links(lst)


def test_insert_head_and_tail():
    lst = DoublyLinkedList()
    lst.insert_tail(2)
    lst.insert_head(1)
    lst.insert_tail(3)
    assert list(lst) == [1, 2, 3]
    assert list(reversed(lst)) == [3, 2, 1]
    assert lst.head.next.prev is lst.head
    _check_links(lst)


def test_insert_returns_node():
    lst = DoublyLinkedList()
    node = lst.insert_head("a")
    assert isinstance(node, DoublyNode)
    assert lst.head is node and lst.tail is node


def test_search():
    lst = DoublyLinkedList(["a", "b", "c"])
    node = lst.search("b")
    assert node.data == "b"
    assert node.prev.data == "a"
    assert node.next.data == "c"
    assert lst.search("z") is None


def test_delete_head_middle_tail():
    lst = DoublyLinkedList([1, 2, 3, 4, 5])
    assert lst.delete(1) == 1
    assert lst.delete(3) == 1
    assert lst.delete(5) == 1
    assert list(lst) == [2, 4]
    _check_links(lst)


def test_delete_all_matches():
    lst = DoublyLinkedList(["x", "y", "x", "x"])
    assert lst.delete("x") == 3
    assert list(lst) == ["y"]
    assert lst.head is lst.tail
    _check_links(lst)


def test_delete_only_element():
    lst = DoublyLinkedList([10])
    assert lst.delete(10) == 1
    _check_links(lst)
    assert not lst


def test_clear():
    lst = DoublyLinkedList([1, 2])
    lst.clear()
    _check_links(lst)
    lst.clear()
    assert len(lst) == 0


@given(st.lists(st.integers()))
def test_round_trip(values):
    lst = DoublyLinkedList(values)
    assert list(lst) == values
    _check_links(lst)


@given(st.lists(st.integers(min_value=0, max_value=3)), st.integers(min_value=0, max_value=3))
def test_delete_invariant(values, target):
    lst = DoublyLinkedList(values)
    assert lst.delete(target) == values.count(target)
    assert target not in list(lst)
    _check_links(lst)