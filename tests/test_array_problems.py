import pytest

from algodrills.array_problems import (
    NumArray,
    contains_duplicate,
    contains_nearby_duplicate,
    find_disappeared_numbers,
    find_duplicate,
    find_max_consecutive_ones,
    find_poisoned_duration,
    intersect,
    intersection,
    judge_square_sum,
    majority_element,
    max_profit,
    missing_number,
    move_zeroes,
    pascal_row,
    plus_one,
    remove_duplicates,
    remove_element,
    reverse_string,
    search_insert,
    single_number,
    third_max,
    two_sum,
    unique_occurrences,
)


def _as_int(digits):
    return int("".join(map(str, digits)))


def test_pascal_row_known_value():
    assert pascal_row(4) == [1, 4, 6, 4, 1]


@pytest.mark.parametrize("index", range(0, 12))
def test_pascal_row_invariants(index):
    row = pascal_row(index)
    assert len(row) == index + 1
    assert row == row[::-1]
    assert sum(row) == 2**index
    assert row[0] == row[-1] == 1


def test_pascal_row_negative():
    with pytest.raises(ValueError):
        pascal_row(-1)


def test_unique_occurrences():
    assert unique_occurrences([1, 2, 2, 1, 1, 3])
    assert not unique_occurrences([1, 2])


def test_max_profit_values():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5
    assert max_profit([7, 6, 4, 3, 1]) == 0


def test_max_profit_never_negative_and_bounded():
    prices = [3, 8, 2, 9, 1]
    profit = max_profit(prices)
    assert 0 <= profit <= max(prices) - min(prices)


def test_single_number():
    assert single_number([4, 1, 2, 1, 2]) == 4
    assert single_number([2, 2, 1]) == 1


def test_majority_element():
    assert majority_element([2, 2, 1, 1, 1, 2, 2]) == 2
    assert majority_element([3, 2, 3]) == 3


def test_majority_element_absent():
    assert majority_element([1, 2, 3, 4]) == -1


def test_two_sum_finds_pair():
    nums = [2, 7, 11, 15]
    i, j = two_sum(nums, 9)
    assert i < j
    assert nums[i] + nums[j] == 9


def test_two_sum_no_pair():
    assert two_sum([1, 2, 3], 100) == []


def test_contains_duplicate():
    assert contains_duplicate([1, 2, 3, 1])
    assert not contains_duplicate([1, 2, 3, 4])


def test_contains_nearby_duplicate():
    assert contains_nearby_duplicate([1, 2, 3, 1], 3)
    assert contains_nearby_duplicate([1, 0, 1, 1], 1)
    assert not contains_nearby_duplicate([1, 2, 3, 1, 2, 3], 2)
    assert not contains_nearby_duplicate([1, 1], 0)


@pytest.mark.parametrize("nums", [[3, 0, 1], [0, 1], [9, 6, 4, 2, 3, 5, 7, 0, 1], [0]])
def test_missing_number(nums):
    result = missing_number(nums)
    assert result not in nums
    assert 0 <= result <= len(nums)


def test_missing_number_leaves_input_alone():
    nums = [3, 0, 1]
    missing_number(nums)
    assert nums == [3, 0, 1]


def test_remove_duplicates():
    nums = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
    original = list(nums)
    k = remove_duplicates(nums)
    assert nums[:k] == sorted(set(original))
    assert len(nums) == len(original)


def test_remove_duplicates_empty():
    nums = []
    assert remove_duplicates(nums) == 0


def test_remove_element():
    nums = [0, 1, 2, 2, 3, 0, 4, 2]
    original = list(nums)
    k = remove_element(nums, 2)
    assert k == len(original) - original.count(2)
    assert 2 not in nums[:k]
    assert sorted(nums[:k]) == sorted(v for v in original if v != 2)


def test_move_zeroes():
    nums = [0, 1, 0, 3, 12]
    move_zeroes(nums)
    assert nums == [1, 3, 12, 0, 0]


def test_find_duplicate():
    assert find_duplicate([1, 3, 4, 2, 2]) == 2
    assert find_duplicate([3, 1, 3, 4, 2]) == 3


def test_find_duplicate_absent():
    assert find_duplicate([1, 2, 3]) == 0


def test_num_array_ranges():
    nums = [-2, 0, 3, -5, 2, -1]
    ranges = NumArray(nums)
    for index, value in enumerate(nums):
        assert ranges.sum_range(index, index) == value
    assert ranges.sum_range(0, len(nums) - 1) == sum(nums)
    assert ranges.sum_range(0, 2) + ranges.sum_range(3, 5) == ranges.sum_range(0, 5)


def test_num_array_out_of_bounds():
    ranges = NumArray([1, 2, 3])
    with pytest.raises(IndexError):
        ranges.sum_range(0, 3)
    with pytest.raises(IndexError):
        ranges.sum_range(2, 1)


def test_reverse_string():
    chars = list("hello")
    reverse_string(chars)
    assert chars == list("olleh")
    reverse_string(chars)
    assert chars == list("hello")


def test_intersection():
    assert intersection([1, 2, 2, 1], [2, 2]) == [2]
    assert sorted(intersection([4, 9, 5], [9, 4, 9, 8, 4])) == [4, 9]


def test_intersect():
    assert intersect([1, 2, 2, 1], [2, 2]) == [2, 2]
    assert intersect([4, 9, 5], [9, 4, 9, 8, 4]) == [4, 9]


@pytest.mark.parametrize("target", [5, 2, 7, 0, 6])
def test_search_insert_position(target):
    nums = [1, 3, 5, 6]
    index = search_insert(nums, target)
    assert all(value < target for value in nums[:index])
    assert all(value >= target for value in nums[index:])


def test_third_max():
    assert third_max([3, 2, 1]) == 1
    assert third_max([1, 2]) == 2
    assert third_max([2, 2, 3, 1]) == 1


def test_third_max_empty():
    with pytest.raises(ValueError):
        third_max([])


def test_find_disappeared_numbers():
    nums = [4, 3, 2, 7, 8, 2, 3, 1]
    missing = find_disappeared_numbers(nums)
    assert missing == sorted(missing)
    assert set(missing).isdisjoint(nums)
    assert set(missing) | set(nums) == set(range(1, len(nums) + 1))


def test_find_disappeared_numbers_rejects_out_of_range():
    with pytest.raises(ValueError):
        find_disappeared_numbers([1, 5])


def test_find_max_consecutive_ones():
    ones = [1, 1, 1, 1]
    assert find_max_consecutive_ones(ones + [0] + [1, 1]) == len(ones)
    assert find_max_consecutive_ones([1, 0] + ones) == len(ones)


def test_poisoned_duration():
    duration = 2
    spaced = [1, 10, 20]
    assert find_poisoned_duration(spaced, duration) == duration * len(spaced)
    assert find_poisoned_duration([5, 5, 5], duration) == duration
    assert find_poisoned_duration([], duration) == duration


@pytest.mark.parametrize("a,b", [(0, 0), (1, 2), (3, 4), (10, 7)])
def test_judge_square_sum_accepts_sums(a, b):
    assert judge_square_sum(a * a + b * b)


def test_judge_square_sum_rejects():
    assert not judge_square_sum(3)
    assert not judge_square_sum(7)


def test_judge_square_sum_negative():
    with pytest.raises(ValueError):
        judge_square_sum(-1)


@pytest.mark.parametrize("digits", [[1, 2, 3], [4, 3, 2, 1], [9], [9, 9], [1, 9, 9], [0]])
def test_plus_one_adds_one(digits):
    original = list(digits)
    assert _as_int(plus_one(digits)) == _as_int(original) + 1
    assert digits == original


def test_plus_one_empty():
    with pytest.raises(ValueError):
        plus_one([])