import pytest

from linked_list import LinkedList, Pointer


def test_empty_list():
    ll: LinkedList[int] = LinkedList()
    assert len(ll) == 0
    assert ll.head.is_null()
    assert ll.tail.is_null()
    assert list(ll) == []


def test_pointer_repr():
    assert repr(Pointer.null()) == "p-"
    assert repr(Pointer(3)) == "p3"


def test_push_front_twice():
    ll: LinkedList[int] = LinkedList()
    first = ll.push_front(3)
    second = ll.push_front(2)

    assert list(ll) == [2, 3]
    assert ll.head == second
    assert ll.tail == first


def test_push_back_twice():
    ll: LinkedList[int] = LinkedList()
    ll.push_back(3)
    ll.push_back(4)

    assert list(ll) == [3, 4]
    assert ll.head == Pointer(0)
    assert ll.tail == Pointer(1)


def test_insert_before_and_after():
    ll: LinkedList[int] = LinkedList()
    p3 = ll.push_back(3)
    p5 = ll.push_back(5)
    ll.insert_before(p5, 4)
    ll.insert_after(p5, 6)
    ll.insert_before(p3, 2)

    assert list(ll) == [2, 3, 4, 5, 6]
    assert ll[ll.head] == 2
    assert ll[ll.tail] == 6


def test_remove_tail_updates_tail_and_frees_slot():
    ll: LinkedList[int] = LinkedList()
    p3 = ll.push_back(3)
    p5 = ll.push_back(5)

    assert ll.remove(p5) == 5
    assert ll.tail == p3
    assert list(ll) == [3]
    assert len(ll) == 1

    # The freed slot is handed out again
    assert ll.push_back(7) == p5
    assert list(ll) == [3, 7]


def test_remove_middle_and_head():
    ll: LinkedList[str] = LinkedList()
    a = ll.push_back("a")
    b = ll.push_back("b")
    ll.push_back("c")

    ll.remove(b)
    assert list(ll) == ["a", "c"]
    ll.remove(a)
    assert list(ll) == ["c"]
    assert ll.head == ll.tail


def test_drain_consumes_in_order():
    ll: LinkedList[int] = LinkedList()
    p = ll.push_back(3)
    ll.push_back(5)
    ll.insert_after(p, 4)

    assert list(ll.drain()) == [3, 4, 5]
    assert len(ll) == 0
    assert ll.head.is_null() and ll.tail.is_null()


def test_null_pointer_dereference_raises():
    ll: LinkedList[int] = LinkedList()
    with pytest.raises(IndexError):
        ll[Pointer.null()]
