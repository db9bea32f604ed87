import itertools

import pytest

from dsakit.problems import (
    advantages,
    can_defeat_dragons,
    can_reduce_to_one,
    candies_to_eat,
    find_triple,
    helpful_maths,
    max_barrel_amount,
    median_of_three,
    meeting_distance,
    min_coins_to_take,
    running_medians,
    tree_distance_squared,
    wealthy_count,
)


def test_advantages_example():
    assert advantages([4, 7, 3, 5]) == [-3, 2, -4, -2]


def test_advantages_tied_maximum_gives_zero():
    assert advantages([5, 5]) == [0, 0]


def test_advantages_keeps_length_and_one_nonnegative():
    result = advantages([9, 1, 4, 6])
    assert len(result) == 4
    assert sum(1 for r in result if r >= 0) == 1


def test_advantages_needs_two():
    with pytest.raises(ValueError):
        advantages([3])


def test_wealthy_count_example():
    assert wealthy_count([5, 1, 2, 1], 3) == 2


def test_wealthy_count_extremes():
    assert wealthy_count([4, 5, 6], 4) == 3
    assert wealthy_count([4, 5, 6], 7) == 0


def test_max_barrel_example():
    assert max_barrel_amount([5, 5, 5, 5], 1) == 10


def test_max_barrel_bounds():
    assert max_barrel_amount([1, 3, 2], 0) == 3
    assert max_barrel_amount([1, 3, 2], 2) == sum([1, 3, 2])


@pytest.mark.parametrize("pours", [-1, 3])
def test_max_barrel_rejects_bad_pours(pours):
    with pytest.raises(ValueError):
        max_barrel_amount([1, 3, 2], pours)


def test_dragons():
    assert can_defeat_dragons(2, [(1, 99), (100, 0)]) is True
    assert can_defeat_dragons(10, [(100, 100)]) is False


def test_dragon_of_equal_strength_wins():
    assert can_defeat_dragons(5, [(5, 1)]) is False


def test_no_dragons():
    assert can_defeat_dragons(1, []) is True


def test_median_of_three_any_order():
    for perm in itertools.permutations((1, 2, 3)):
        assert median_of_three(*perm) == 2


def test_tree_distance_example():
    assert tree_distance_squared([1, 2, 3]) == 26


def test_tree_distance_order_independent():
    assert tree_distance_squared([3, 1, 2]) == tree_distance_squared([1, 2, 3])


def test_helpful_maths():
    assert helpful_maths("3+2+1") == "1+2+3"
    assert helpful_maths("2") == "2"


def test_helpful_maths_empty():
    with pytest.raises(ValueError):
        helpful_maths("+")


def test_running_medians_example():
    assert running_medians([5, 15, 1, 3]) == [5, 10, 5, 4]


def test_running_medians_shape():
    numbers = [7, 2, 9, 4, 4]
    result = running_medians(numbers)
    assert len(result) == len(numbers)
    assert result[0] == numbers[0]
    assert running_medians([]) == []


def test_meeting_distance():
    assert meeting_distance(7, 1, 4) == 6
    assert meeting_distance(3, 3, 3) == 0


def test_candies_to_eat():
    assert candies_to_eat([1, 2, 3, 4, 5]) == 10
    assert candies_to_eat([4, 4, 4]) == 0


def test_candies_to_eat_empty():
    with pytest.raises(ValueError):
        candies_to_eat([])


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 2], True),
        ([5, 5, 5, 5], True),
        ([1, 2, 4], False),
        ([1, 3, 4, 4], False),
        ([100], True),
    ],
)
def test_can_reduce_to_one(values, expected):
    assert can_reduce_to_one(values) is expected


def test_find_triple():
    assert find_triple([1, 1, 1]) == 1
    assert find_triple([2, 2, 3, 3, 4, 2, 2]) == 2
    assert find_triple([1, 2, 3]) is None


def test_find_triple_picks_smallest():
    assert find_triple([4, 4, 4, 1, 1, 1]) == 1


def test_min_coins_examples():
    assert min_coins_to_take([3, 3]) == 2
    assert min_coins_to_take([2, 1, 2]) == 2


def test_min_coins_single():
    assert min_coins_to_take([7]) == 1


def test_min_coins_takes_strict_majority():
    coins = [4, 1, 1, 8, 2, 3]
    count = min_coins_to_take(coins)
    taken = sorted(coins, reverse=True)[:count]
    assert 2 * sum(taken) > sum(coins)
    assert 1 <= count <= len(coins)