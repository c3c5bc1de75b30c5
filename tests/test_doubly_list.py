import pytest

from dsakit.doubly_list import DoublyLinkedList


def test_empty_both_ways():
    dll = DoublyLinkedList()
    assert (list(dll), list(reversed(dll)), len(dll)) == ([], [], 0)


def test_front_and_end_insertions():
    dll = DoublyLinkedList()
    dll.insert_end(2)
    dll.insert_front(1)
    dll.insert_end(3)
    assert list(dll) == [1, 2, 3]
    assert list(reversed(dll)) == [3, 2, 1]


@pytest.mark.parametrize("items", [[7], [1, 2, 3, 4]])
def test_reversed_mirrors_forward(items):
    dll = DoublyLinkedList(items)
    assert list(dll) == items
    assert list(reversed(dll)) == items[::-1]


@pytest.mark.parametrize(
    "before, step, result, remaining",
    [
        ([1, 2, 3], ("insert_after", 9, 1), None, [1, 9, 2, 3]),
        ([1, 2, 3], ("insert_after", 8, 3), None, [1, 2, 3, 8]),
        ([5, 5], ("insert_after", 6, 5), None, [5, 6, 5]),
        ([1, 2], ("insert_before", 0, 1), None, [0, 1, 2]),
        ([1, 2, 3], ("insert_before", 7, 3), None, [1, 2, 7, 3]),
        ([1, 2, 3], ("delete_front",), 1, [2, 3]),
        ([1, 2, 3], ("delete_end",), 3, [1, 2]),
        ([2], ("delete_end",), 2, []),
    ],
)
def test_doubly_edit(before, step, result, remaining):
    action, *params = step
    dll = DoublyLinkedList(before)
    assert getattr(dll, action)(*params) == result
    assert list(dll) == remaining
    assert list(reversed(dll)) == remaining[::-1]
    assert len(dll) == len(remaining)


@pytest.mark.parametrize(
    "before, step, problem",
    [
        ([1, 2], ("insert_after", 9, 4), ValueError),
        ([], ("insert_after", 9, 4), ValueError),
        ([1, 2], ("insert_before", 9, 4), ValueError),
        ([], ("insert_before", 9, 4), ValueError),
        ([], ("delete_front",), IndexError),
        ([], ("delete_end",), IndexError),
    ],
)
def test_doubly_failure(before, step, problem):
    action, *params = step
    dll = DoublyLinkedList(before)
    with pytest.raises(problem):
        getattr(dll, action)(*params)
    assert list(dll) == before


def test_inserts_at_key_move_the_ends():
    dll = DoublyLinkedList([1, 2, 3])
    dll.insert_after(8, 3)
    dll.insert_before(0, 1)
    assert [dll.delete_end(), dll.delete_front()] == [8, 0]
    assert list(dll) == [1, 2, 3]


def test_links_stay_consistent_after_mixed_edits():
    dll = DoublyLinkedList([1, 2, 3])
    dll.delete_front()
    dll.insert_before(4, 3)
    dll.delete_end()
    dll.insert_front(5)
    assert list(dll) == [5, 2, 4]
    assert list(reversed(dll)) == [4, 2, 5]
    assert len(dll) == 3