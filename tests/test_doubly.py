import io

import pytest

from chainlists.doubly import DoublyLinkedList
from chainlists.errors import EmptyListError, IntegrityError


def test_basic_operations():
    dll = DoublyLinkedList()
    dll.append(1)
    dll.append(2)
    assert len(dll) == 2
    assert dll.search(2) == 1
    dll.delete(2)
    assert len(dll) == 1
    assert dll.to_list() == [1]


def test_validation_passes_for_built_list():
    dll = DoublyLinkedList()
    dll.append(1)
    dll.append(2)
    dll.append(3)
    dll.validate()
    assert dll.to_list() == [1, 2, 3]
    assert dll.tail.value == 3


def test_search_empty_raises():
    with pytest.raises(ValueError):
        DoublyLinkedList().search(1)


def test_delete_empty_raises():
    with pytest.raises(EmptyListError):
        DoublyLinkedList().delete(1)


def test_from_iterable_none_raises():
    with pytest.raises(TypeError):
        DoublyLinkedList().from_iterable(None)


def test_prepend_append_insert_and_str():
    dll = DoublyLinkedList()
    dll.append(1)
    dll.append(2)
    dll.prepend(0)
    assert str(dll) == "0 <-> 1 <-> 2"
    dll.insert(1.5, 2)
    assert str(dll) == "0 <-> 1 <-> 1.5 <-> 2"
    dll.delete(1.5)
    assert dll.to_list() == [0, 1, 2]
    dll.validate()


def test_insert_at_ends_and_out_of_bounds():
    dll = DoublyLinkedList([1, 2])
    dll.insert(0, 0)
    dll.insert(3, 3)
    assert dll.to_list() == [0, 1, 2, 3]
    with pytest.raises(IndexError):
        dll.insert(9, 5)
    with pytest.raises(IndexError):
        dll.insert(9, -1)


def test_shift_and_pop_return_values():
    dll = DoublyLinkedList([1, 2, 3])
    assert dll.pop() == 3
    assert dll.shift() == 1
    assert dll.to_list() == [2]
    assert dll.pop() == 2
    assert dll.is_empty()
    assert dll.head is None and dll.tail is None
    with pytest.raises(EmptyListError):
        dll.pop()
    with pytest.raises(EmptyListError):
        dll.shift()


def test_delete_head_tail_middle_and_missing():
    dll = DoublyLinkedList([1, 2, 3, 4])
    dll.delete(1)
    dll.delete(4)
    assert dll.to_list() == [2, 3]
    dll.append(5)
    dll.delete(3)
    assert dll.to_list() == [2, 5]
    with pytest.raises(ValueError):
        dll.delete(42)
    dll.validate()


def test_delete_at():
    dll = DoublyLinkedList(["a", "b", "c", "d"])
    assert dll.delete_at(2) == "c"
    assert dll.delete_at(0) == "a"
    assert dll.delete_at(1) == "d"
    assert dll.to_list() == ["b"]
    with pytest.raises(IndexError):
        dll.delete_at(1)
    dll.validate()


def test_get():
    dll = DoublyLinkedList([10, 20, 30])
    assert dll.get(0) == 10
    assert dll.get(2) == 30
    with pytest.raises(IndexError):
        dll.get(3)
    with pytest.raises(IndexError):
        dll.get(-1)


def test_reverse():
    dll = DoublyLinkedList([1, 2, 3, 4])
    dll.reverse()
    assert dll.to_list() == [4, 3, 2, 1]
    assert list(reversed(dll)) == [1, 2, 3, 4]
    dll.validate()
    with pytest.raises(EmptyListError):
        DoublyLinkedList().reverse()


def test_unique_keeps_first_occurrence():
    dll = DoublyLinkedList([5, 1, 5, 2, 1, 2])
    dll.unique()
    assert dll.to_list() == [5, 1, 2]
    assert len(dll) == 3
    assert dll.tail.value == 2
    dll.validate()
    with pytest.raises(EmptyListError):
        DoublyLinkedList().unique()


def test_merge():
    first = DoublyLinkedList([1, 2])
    first.merge(DoublyLinkedList([3, 4]))
    assert first.to_list() == [1, 2, 3, 4]
    with pytest.raises(TypeError):
        first.merge(None)


def test_sort():
    dll = DoublyLinkedList([5, 3, 4, 1, 2])
    dll.sort()
    assert dll.to_list() == [1, 2, 3, 4, 5]
    words = DoublyLinkedList(["pear", "apple", "fig"])
    words.sort()
    assert words.to_list() == ["apple", "fig", "pear"]


def test_sort_errors():
    with pytest.raises(TypeError, match="mismatched"):
        DoublyLinkedList([1, 2.5]).sort()
    with pytest.raises(TypeError, match="unsupported"):
        DoublyLinkedList([[1], [0]]).sort()


def test_contains_and_iteration():
    dll = DoublyLinkedList([1, 2, 3])
    assert 2 in dll
    assert 7 not in dll
    assert list(dll) == [1, 2, 3]


def test_clear_and_is_empty():
    dll = DoublyLinkedList([1])
    assert not dll.is_empty()
    dll.clear()
    assert dll.is_empty()
    assert len(dll) == 0


def test_print_and_print_reverse():
    dll = DoublyLinkedList([1, 2, 3])
    out = io.StringIO()
    dll.print(out)
    dll.print_reverse(out)
    assert out.getvalue() == "1 <-> 2 <-> 3\n3 <-> 2 <-> 1\n"
    assert dll.format_reverse() == "3 <-> 2 <-> 1"


def test_validate_detects_broken_link():
    dll = DoublyLinkedList([1, 2, 3])
    dll.head.next.next.prev = None
    with pytest.raises(IntegrityError, match="bidirectional"):
        dll.validate()


def test_validate_detects_wrong_tail():
    dll = DoublyLinkedList([1, 2, 3])
    dll.tail = dll.head.next
    dll.tail.next = None
    dll.tail = dll.head
    with pytest.raises(IntegrityError):
        dll.validate()


def test_validate_detects_dangling_tail_on_empty():
    dll = DoublyLinkedList([1])
    dll.head = None
    with pytest.raises(IntegrityError, match="tail"):
        dll.validate()