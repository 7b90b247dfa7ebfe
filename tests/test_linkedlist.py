import pytest
from hypothesis import given
from hypothesis import strategies as st

from libft.linkedlist import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_init_from_items_keeps_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_prepends():
    lst = LinkedList(["b"])
    node = lst.push_front("a")
    assert list(lst) == ["a", "b"]
    assert lst.head is node
    assert node.next.content == "b"


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    node = lst.push_front(1)
    assert lst.last() is node
    assert len(lst) == 1


def test_push_back_appends():
    lst = LinkedList([1])
    node = lst.push_back(2)
    assert list(lst) == [1, 2]
    assert lst.last() is node
    assert node.next is None


def test_last_returns_final_node():
    lst = LinkedList([1, 2, 3])
    last = lst.last()
    assert isinstance(last, Node)
    assert last.content == 3


def test_pop_front_calls_delete_and_returns():
    deleted = []
    lst = LinkedList(["x", "y"])
    assert lst.pop_front(deleted.append) == "x"
    assert deleted == ["x"]
    assert list(lst) == ["y"]


def test_pop_front_last_element_clears_tail():
    lst = LinkedList(["only"])
    assert lst.pop_front() == "only"
    assert lst.last() is None
    assert len(lst) == 0
    lst.push_back("again")
    assert list(lst) == ["again"]


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_clear_deletes_in_order():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None


def test_for_each_visits_all():
    seen = []
    LinkedList(["a", "b"]).for_each(seen.append)
    assert seen == ["a", "b"]


def test_map_builds_new_list():
    original = LinkedList(["a", "b"])
    mapped = original.map(str.upper)
    assert list(mapped) == ["A", "B"]
    assert list(original) == ["a", "b"]


def test_map_empty():
    assert list(LinkedList().map(str.upper)) == []


def test_map_failure_deletes_produced_contents():
    deleted = []

    def f(value):
        if value == "boom":
            raise ValueError(value)
        return value.upper()

    lst = LinkedList(["a", "b", "boom", "c"])
    with pytest.raises(ValueError):
        lst.map(f, deleted.append)
    assert deleted == ["A", "B"]
    assert list(lst) == ["a", "b", "boom", "c"]


@given(st.lists(st.integers()))
def test_length_matches_items(items):
    lst = LinkedList(items)
    assert len(lst) == len(items)
    assert list(lst) == items


@given(st.lists(st.integers()), st.lists(st.integers()))
def test_push_front_and_back(front, back):
    lst = LinkedList()
    for item in back:
        lst.push_back(item)
    for item in front:
        lst.push_front(item)
    assert list(lst) == list(reversed(front)) + back
    if front or back:
        assert lst.last().content == (back[-1] if back else front[0])


@given(st.lists(st.integers()))
def test_map_identity_round_trip(items):
    lst = LinkedList(items)
    assert list(lst.map(lambda x: x)) == items