"""Classic array exercises: counting, searching and in-place rearrangement."""

from __future__ import annotations

import heapq
import math
from bisect import bisect_left
from collections import Counter
from collections.abc import Iterable, MutableSequence, Sequence
from itertools import accumulate, groupby, pairwise


def pascal_row(row_index: int) -> list[int]:
    """Return row ``row_index`` (counted from 0) of Pascal's triangle."""
    if row_index < 0:
        raise ValueError(f"row index must not be negative, got {row_index}")
    row = [1]
    for _ in range(row_index):
        row = [1, *(a + b for a, b in pairwise(row)), 1]
    return row


def unique_occurrences(values: Iterable[int]) -> bool:
    """Tell whether every distinct value occurs a different number of times."""
    counts = Counter(values)
    return len(set(counts.values())) == len(counts)


def max_profit(prices: Iterable[int]) -> int:
    """Best profit from one buy followed by one later sell, or 0."""
    best = 0
    lowest = math.inf
    for price in prices:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return int(best)


def single_number(nums: Sequence[int]) -> int:
    """Return the value that occurs exactly once, else the first value."""
    for value, count in Counter(nums).items():
        if count == 1:
            return value
    return nums[0]


def majority_element(nums: Sequence[int]) -> int:
    """Return the value occurring more than half the time, or -1 if none does."""
    half = len(nums) // 2
    for value, count in Counter(nums).items():
        if count > half:
            return value
    return -1


def two_sum(nums: Iterable[int], target: int) -> list[int]:
    """Indices of two values adding up to ``target``, or an empty list."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return [seen[complement], index]
        seen[value] = index
    return []


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Tell whether any value appears more than once."""
    return len(set(nums)) != len(nums)


def contains_nearby_duplicate(nums: Iterable[int], k: int) -> bool:
    """Tell whether two equal values sit at most ``k`` positions apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        previous = last_seen.get(value)
        if previous is not None and index - previous <= k:
            return True
        last_seen[value] = index
    return False


def missing_number(nums: Iterable[int]) -> int:
    """Return the one number of 0..n absent from ``nums``."""
    ordered = sorted(nums)
    for expected, value in enumerate(ordered):
        if value != expected:
            return expected
    return len(ordered)


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted sequence in place so its first k items are distinct; return k."""
    unique = [key for key, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Move every item other than ``val`` to the front in place; return their count."""
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move all zeros to the end in place, keeping the other values in order."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def find_duplicate(nums: Iterable[int]) -> int:
    """Return a value occurring at least twice, or 0 if there is none."""
    for value, count in Counter(nums).items():
        if count >= 2:
            return value
    return 0


class NumArray:
    """Answers sums over inclusive index ranges of a fixed list."""

    def __init__(self, nums: Iterable[int]) -> None:
        self._prefix = [0, *accumulate(nums)]

    def sum_range(self, left: int, right: int) -> int:
        """Sum of the items from ``left`` to ``right``, both included."""
        if not 0 <= left <= right < len(self._prefix) - 1:
            raise IndexError(f"range [{left}, {right}] is out of bounds")
        return self._prefix[right + 1] - self._prefix[left]


def reverse_string(chars: MutableSequence[str]) -> None:
    """Reverse a sequence of characters in place."""
    chars.reverse()


def intersection(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Distinct values found in both inputs, in order of first appearance in ``nums1``."""
    other = set(nums2)
    return list(dict.fromkeys(value for value in nums1 if value in other))


def intersect(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Common values, each as often as it appears in both inputs, in sorted order."""
    return sorted((Counter(nums1) & Counter(nums2)).elements())


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a sorted sequence, or where it would be inserted."""
    return bisect_left(nums, target)


def third_max(nums: Iterable[int]) -> int:
    """The third largest distinct value, or the largest if there are fewer than three."""
    top = heapq.nlargest(3, set(nums))
    if not top:
        raise ValueError("third_max() needs at least one value")
    return top[2] if len(top) == 3 else top[0]


def find_disappeared_numbers(nums: Sequence[int]) -> list[int]:
    """Numbers of 1..n, n being the length, that do not appear in ``nums``."""
    size = len(nums)
    present = set(nums)
    if any(not 1 <= value <= size for value in present):
        raise ValueError(f"every value must lie between 1 and {size}")
    return [number for number in range(1, size + 1) if number not in present]


def find_max_consecutive_ones(nums: Iterable[int]) -> int:
    """Length of the longest run of ones."""
    return max(
        (sum(1 for _ in run) for value, run in groupby(nums) if value == 1),
        default=0,
    )


def find_poisoned_duration(time_series: Sequence[int], duration: int) -> int:
    """Total time poisoned when each attack poisons for ``duration`` and resets the timer."""
    return duration + sum(min(duration, b - a) for a, b in pairwise(time_series))


def judge_square_sum(c: int) -> bool:
    """Tell whether ``c`` is a sum of two squares of non-negative integers."""
    if c < 0:
        raise ValueError(f"c must not be negative, got {c}")
    low, high = 0, math.isqrt(c)
    while low <= high:
        total = low * low + high * high
        if total == c:
            return True
        if total < c:
            low += 1
        else:
            high -= 1
    return False


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as a list of decimal digits."""
    if not digits:
        raise ValueError("plus_one() needs at least one digit")
    head = list(digits)
    trailing_nines = 0
    while head and head[-1] == 9:
        head.pop()
        trailing_nines += 1
    if head:
        head[-1] += 1
    else:
        head = [1]
    return head + [0] * trailing_nines