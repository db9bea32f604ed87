import pytest

from dsakit.singly import SinglyLinkedList

SOURCE_VALUES = [10, 12, 13, 13, 13, 15, 15, 16, 9]


def test_iteration_keeps_order():
    lst = SinglyLinkedList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_empty_list():
    lst = SinglyLinkedList()
    assert list(lst) == []
    assert len(lst) == 0


def test_push_front_and_back():
    lst = SinglyLinkedList([10])
    lst.push_front(12)
    lst.push_back(113)
    assert list(lst) == [12, 10, 113]
    assert len(lst) == 3


def test_insert_at_worked_example():
    lst = SinglyLinkedList([10, 12, 13, 15, 16])
    lst.insert_at(2, 11)
    lst.insert_at(1, 9)
    lst.insert_at(8, 17)
    assert list(lst) == [9, 10, 11, 12, 13, 15, 16, 17]
    assert len(lst) == 8


def test_insert_into_empty_list():
    lst = SinglyLinkedList()
    lst.insert_at(1, 5)
    lst.push_back(6)
    assert list(lst) == [5, 6]


@pytest.mark.parametrize("position", [0, -1, 5])
def test_insert_at_out_of_range(position):
    lst = SinglyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        lst.insert_at(position, 99)
    assert list(lst) == [1, 2, 3]


@pytest.mark.parametrize("position", [1, 4, 9])
def test_delete_at_returns_value(position):
    lst = SinglyLinkedList(SOURCE_VALUES)
    removed = lst.delete_at(position)
    assert removed == SOURCE_VALUES[position - 1]
    expected = SOURCE_VALUES[: position - 1] + SOURCE_VALUES[position:]
    assert list(lst) == expected
    assert len(lst) == len(expected)


def test_delete_last_then_append_uses_new_tail():
    lst = SinglyLinkedList([1, 2, 3])
    lst.delete_at(3)
    lst.push_back(4)
    assert list(lst) == [1, 2, 4]


def test_delete_from_empty_raises():
    with pytest.raises(IndexError):
        SinglyLinkedList().delete_at(1)


def test_delete_out_of_range_raises():
    lst = SinglyLinkedList([1, 2])
    with pytest.raises(IndexError):
        lst.delete_at(3)


def test_remove_first_occurrence():
    lst = SinglyLinkedList(SOURCE_VALUES)
    assert lst.remove(13) is True
    expected = list(SOURCE_VALUES)
    expected.remove(13)
    assert list(lst) == expected


def test_remove_head_and_missing():
    lst = SinglyLinkedList([10, 12])
    assert lst.remove(10) is True
    assert lst.remove(42) is False
    assert list(lst) == [12]


def test_dedupe_sorted_source_example():
    lst = SinglyLinkedList(SOURCE_VALUES)
    lst.dedupe_sorted()
    assert list(lst) == [10, 12, 13, 15, 16, 9]
    assert len(lst) == 6


def test_dedupe_sorted_keeps_tail():
    lst = SinglyLinkedList([1, 1, 2, 2])
    lst.dedupe_sorted()
    lst.push_back(3)
    assert list(lst) == [1, 2, 3]


@pytest.mark.parametrize("values", [[3, 1, 3, 2, 1, 3], [5, 5, 5], [], [1, 2, 3]])
def test_dedupe_keeps_first_occurrences(values):
    lst = SinglyLinkedList(values)
    lst.dedupe()
    assert list(lst) == list(dict.fromkeys(values))
    assert len(lst) == len(set(values))


@pytest.mark.parametrize("values", [SOURCE_VALUES, [5, 4, 3, 2, 1], [1], [], [2, 2, 1]])
def test_sort_matches_sorted(values):
    lst = SinglyLinkedList(values)
    lst.sort()
    assert list(lst) == sorted(values)


def test_from_middle_source_example():
    lst = SinglyLinkedList(SOURCE_VALUES)
    assert lst.from_middle() == [13, 13, 15, 15, 16, 9]


def test_from_middle_short_lists():
    assert SinglyLinkedList().from_middle() == []
    assert SinglyLinkedList([7]).from_middle() == [7]