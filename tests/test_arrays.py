import itertools

import pytest

from algodrills.arrays import (
    binary_search,
    candy,
    contains_duplicate,
    max_profit,
    max_subarray,
    min_operations,
    next_permutation,
    plus_one,
    shuffle,
    subarray_sum,
    total_fruit,
    two_sum,
    two_sum_sorted,
    ways_to_make_fair,
)


# max_profit

def test_max_profit_decreasing_prices_gives_zero():
    assert max_profit([9, 7, 4, 2, 1]) == 0


def test_max_profit_is_max_minus_min_when_sorted_ascending():
    prices = [1, 3, 4, 8, 12]
    assert max_profit(prices) == prices[-1] - prices[0]


def test_max_profit_example_buys_at_low_sells_at_high():
    prices = [5, 1, 3, 4, 10, 8, 7]
    assert max_profit(prices) == 10 - 1


def test_max_profit_empty_raises():
    with pytest.raises(ValueError):
        max_profit([])


# candy

def test_candy_constant_ratings_give_one_each():
    ratings = [2, 2, 2, 2]
    assert candy(ratings) == len(ratings)


def test_candy_valley():
    assert candy([1, 0, 2]) == 5


def test_candy_source_example_and_reverse_agree():
    ratings = [1, 6, 10, 8, 7, 3, 2]
    assert candy(ratings) == 18
    assert candy(list(reversed(ratings))) == candy(ratings)


def test_candy_does_not_modify_input():
    ratings = [1, 6, 10, 8, 7, 3, 2]
    candy(ratings)
    assert ratings == [1, 6, 10, 8, 7, 3, 2]


def test_candy_at_least_one_per_child():
    ratings = [3, 1, 4, 1, 5, 9, 2, 6]
    assert candy(ratings) >= len(ratings)


def test_candy_empty_raises():
    with pytest.raises(ValueError):
        candy([])


# shuffle

def test_shuffle_interleaves_halves():
    nums = [1, 4, 5, 6, 7, 12, 32, 30]
    result = shuffle(nums, 4)
    assert result[0::2] == nums[:4]
    assert result[1::2] == nums[4:]


def test_shuffle_wrong_length_raises():
    with pytest.raises(ValueError):
        shuffle([1, 2, 3], 2)


# min_operations

def test_min_operations_first_element_matches():
    assert min_operations([5, 1, 1], 5) == 1


def test_min_operations_whole_array():
    nums = [1, 2, 3]
    assert min_operations(nums, sum(nums)) == len(nums)


def test_min_operations_example():
    assert min_operations([1, 1, 4, 2, 3], 5) == 2


@pytest.mark.parametrize(
    "nums, x",
    [([5, 6, 7, 8, 9], 4), ([1, 2], 10)],
)
def test_min_operations_impossible(nums, x):
    assert min_operations(nums, x) == -1


def test_min_operations_empty_raises():
    with pytest.raises(ValueError):
        min_operations([], 1)


# ways_to_make_fair

def test_ways_to_make_fair_single_element():
    assert ways_to_make_fair([42]) == 1


def test_ways_to_make_fair_equal_odd_length_every_index():
    nums = [1, 1, 1, 1, 1]
    assert ways_to_make_fair(nums) == len(nums)


def test_ways_to_make_fair_equal_even_length_none():
    assert ways_to_make_fair([3, 3, 3, 3]) == 0


def test_ways_to_make_fair_empty_raises():
    with pytest.raises(ValueError):
        ways_to_make_fair([])


# two_sum_sorted

def test_two_sum_sorted_positions_hit_target():
    numbers = [3, 4, 7, 9, 10, 11, 13, 17, 18, 20]
    i, j = two_sum_sorted(numbers, 19)
    assert i < j
    assert numbers[i - 1] + numbers[j - 1] == 19


def test_two_sum_sorted_missing_pair_meets_in_middle():
    i, j = two_sum_sorted([1, 2, 3], 100)
    assert i == j


# two_sum

def test_two_sum_finds_pair():
    nums = [2, 4, 11, 3]
    later, earlier = two_sum(nums, 6)
    assert earlier < later
    assert nums[later] + nums[earlier] == 6


def test_two_sum_with_duplicates():
    nums = [3, 3]
    assert two_sum(nums, 6) == [1, 0]


def test_two_sum_no_pair():
    assert two_sum([1, 2, 3], 100) == []


# contains_duplicate

@pytest.mark.parametrize(
    "nums, expected",
    [([1, 2, 3, 4], False), ([1, 2, 3, 1], True), ([], False)],
)
def test_contains_duplicate(nums, expected):
    assert contains_duplicate(nums) is expected


# next_permutation

def test_next_permutation_walks_lexicographic_order():
    perms = [list(p) for p in itertools.permutations([1, 2, 3, 4])]
    current = list(perms[0])
    for expected in perms[1:]:
        next_permutation(current)
        assert current == expected
    next_permutation(current)
    assert current == perms[0]


def test_next_permutation_with_duplicates():
    perms = [list(p) for p in sorted(set(itertools.permutations([1, 1, 2, 2])))]
    current = list(perms[0])
    for expected in perms[1:]:
        next_permutation(current)
        assert current == expected
    next_permutation(current)
    assert current == perms[0]


# max_subarray

def test_max_subarray_all_negative_is_max_element():
    nums = [-3, -1, -2]
    assert max_subarray(nums) == max(nums)


def test_max_subarray_all_non_negative_is_total():
    nums = [1, 0, 4, 2]
    assert max_subarray(nums) == sum(nums)


def test_max_subarray_example():
    assert max_subarray([-1, 2, 4, -3, 5, 2, -5, 2]) == 10


def test_max_subarray_empty_raises():
    with pytest.raises(ValueError):
        max_subarray([])


# subarray_sum

def test_subarray_sum_whole_array_counts():
    arr = [3, 2, 1, 4, 3, 3, 1, 2, 5, 2]
    assert subarray_sum(arr, sum(arr)) >= 1


def test_subarray_sum_unreachable_is_zero():
    arr = [1, 2, 3]
    assert subarray_sum(arr, sum(arr) + 1) == 0


def test_subarray_sum_single_element_matches():
    assert subarray_sum([7], 7) == 1


# plus_one

@pytest.mark.parametrize("digits", [[1, 2, 3], [9, 9], [1, 2, 3, 3, 9, 9, 9, 9], [0]])
def test_plus_one_adds_one(digits):
    result = plus_one(digits)
    as_int = int("".join(map(str, digits)))
    assert int("".join(map(str, result))) == as_int + 1
    assert all(0 <= d <= 9 for d in result)


def test_plus_one_does_not_modify_input():
    digits = [9, 9]
    plus_one(digits)
    assert digits == [9, 9]


def test_plus_one_empty_raises():
    with pytest.raises(ValueError):
        plus_one([])


# binary_search

def test_binary_search_single_missing():
    assert binary_search([1], 9) == -1


def test_binary_search_finds_every_value():
    nums = [-5, -1, 0, 3, 8, 13, 21]
    for value in nums:
        assert nums[binary_search(nums, value)] == value


def test_binary_search_missing_and_empty():
    assert binary_search([1, 3, 5], 4) == -1
    assert binary_search([], 4) == -1


# total_fruit

def test_total_fruit_two_kinds_takes_everything():
    fruits = [1, 2, 1, 2, 2]
    assert total_fruit(fruits) == len(fruits)


def test_total_fruit_example():
    assert total_fruit([1, 2, 3, 2, 2]) == 4


def test_total_fruit_empty():
    assert total_fruit([]) == 0


def test_total_fruit_all_distinct_is_two():
    assert total_fruit([1, 2, 3, 4, 5]) == len([1, 2])