import pytest

from dsakit.sorting import (
    bubble_sort,
    bucket_sort,
    counting_sort,
    insertion_sort,
    merge,
    merge_sort,
    push_zeros_to_end,
    quick_sort,
    radix_sort,
    selection_sort,
)

SAMPLES = [
    [10, 2, 3, 20, 5, 6],
    [77, 33, 44, 11, 88, 22, 66, 65],
    [0, 1, 1, 0, 1, 2, 1, 2, 0, 0, 0, 1],
    [10, 5, 30, 3, 99],
    [1, 3, 2, 3, 4, 1, 6, 4, 3, 20, 11],
    [789, 123, 456, 0, 999],
    [2, 4, 1, 6, 3, 8, 5, 7],
    [10, 3, 2, 2, 11, 24],
    [],
    [7],
]


@pytest.mark.parametrize("sample", SAMPLES)
def test_sorts_match_builtin(sample):
    expected = sorted(sample)
    assert bubble_sort(sample) == expected
    assert selection_sort(sample) == expected
    assert insertion_sort(sample) == expected
    assert merge_sort(sample) == expected
    assert quick_sort(sample) == expected
    assert counting_sort(sample) == expected
    assert radix_sort(sample) == expected
    assert bucket_sort(sample) == expected


def test_input_is_not_modified():
    data = [5, 3, 9, 1]
    assert bubble_sort(data) == [1, 3, 5, 9]
    assert selection_sort(data) == [1, 3, 5, 9]
    assert insertion_sort(data) == [1, 3, 5, 9]
    assert merge_sort(data) == [1, 3, 5, 9]
    assert quick_sort(data) == [1, 3, 5, 9]
    assert counting_sort(data) == [1, 3, 5, 9]
    assert radix_sort(data) == [1, 3, 5, 9]
    assert bucket_sort(data) == [1, 3, 5, 9]
    assert data == [5, 3, 9, 1]


def test_comparison_sorts_handle_negatives_and_strings():
    numbers = [3, -1, 0, -7, 2]
    words = ["pear", "apple", "fig"]
    expected_numbers = [-7, -1, 0, 2, 3]
    expected_words = ["apple", "fig", "pear"]
    assert bubble_sort(numbers) == expected_numbers
    assert selection_sort(numbers) == expected_numbers
    assert insertion_sort(numbers) == expected_numbers
    assert merge_sort(numbers) == expected_numbers
    assert quick_sort(numbers) == expected_numbers
    assert bubble_sort(words) == expected_words
    assert selection_sort(words) == expected_words
    assert insertion_sort(words) == expected_words
    assert merge_sort(words) == expected_words
    assert quick_sort(words) == expected_words


def test_comparison_sorts_accept_iterables():
    assert bubble_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert selection_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert insertion_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert merge_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert quick_sort(iter([3, 1, 2])) == [1, 2, 3]


def test_integer_sorts_reject_negatives():
    with pytest.raises(ValueError):
        counting_sort([3, -1, 2])
    with pytest.raises(ValueError):
        radix_sort([3, -1, 2])
    with pytest.raises(ValueError):
        bucket_sort([3, -1, 2])


@pytest.mark.parametrize("sort", [merge_sort, insertion_sort, bubble_sort])
def test_stable_sorts_keep_tie_order(sort):
    class Key:
        def __init__(self, key, tag):
            self.key = key
            self.tag = tag

        def __lt__(self, other):
            return self.key < other.key

        def __gt__(self, other):
            return self.key > other.key

        def __le__(self, other):
            return self.key <= other.key

    data = [Key(2, "a"), Key(1, "b"), Key(2, "c"), Key(1, "d")]
    result = sort(data)
    assert [k.tag for k in result] == [k.tag for k in sorted(data, key=lambda k: k.key)]


def test_merge_combines_sorted_lists():
    left, right = [1, 4, 9], [2, 3, 10]
    assert merge(left, right) == sorted(left + right)


def test_merge_with_empty_side():
    assert merge([], [1, 2]) == [1, 2]
    assert merge([1, 2], []) == [1, 2]


def test_push_zeros_to_end_sample():
    data = [10, 0, 3, 0, 0, 0, 4, 7, 0, 5, 6]
    result = push_zeros_to_end(data)
    nonzero = [x for x in data if x != 0]
    assert result[: len(nonzero)] == nonzero
    assert result[len(nonzero):] == [0] * data.count(0)


def test_push_zeros_to_end_without_zeros():
    assert push_zeros_to_end([3, 1, 2]) == [3, 1, 2]