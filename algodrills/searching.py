"""Binary-search and two-pointer exercises over sorted and rotated sequences."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from collections.abc import Callable, Iterable, Sequence
from itertools import accumulate, takewhile


def _smallest_satisfying(low: int, high: int, predicate: Callable[[int], bool]) -> int:
    """Smallest value in ``low..high`` for which a monotonic predicate holds, or -1."""
    candidates = range(low, high + 1)
    index = bisect_left(candidates, True, key=predicate)
    return candidates[index] if index < len(candidates) else -1


def _fits_in_groups(items: Sequence[int], limit: int, groups: int) -> bool:
    """Whether items, kept in order, split into at most ``groups`` runs each summing to at most ``limit``."""
    used = 1
    load = 0
    for item in items:
        if load + item <= limit:
            load += item
        else:
            used += 1
            if used > groups or item > limit:
                return False
            load = item
        if used > groups:
            return False
    return True


def ship_within_days(weights: Sequence[int], days: int) -> int:
    """Least ship capacity that carries all packages, in order, within ``days`` days; -1 if none."""
    return _smallest_satisfying(
        0, sum(weights), lambda capacity: _fits_in_groups(weights, capacity, days)
    )


def allocate_books(pages: Sequence[int], students: int) -> int:
    """Least possible maximum of pages any student reads when books go out in order; -1 if impossible."""
    return _smallest_satisfying(
        0, sum(pages), lambda limit: _fits_in_groups(pages, limit, students)
    )


def distribute_candies(candies: int, num_people: int) -> list[int]:
    """Hand out 1, 2, 3, ... candies round the circle until they run out."""
    if num_people <= 0:
        raise ValueError(f"num_people must be positive, got {num_people}")
    shares = [0] * num_people
    handed = 0
    candy = 1
    while candy <= candies:
        shares[handed % num_people] += candy
        candies -= candy
        candy += 1
        handed += 1
    if candies > 0:
        shares[handed % num_people] += candies
    return shares


def smallest_divisor(nums: Sequence[int], threshold: int) -> int:
    """Smallest divisor whose rounded-up quotients sum to at most ``threshold``; 0 if none."""

    def within(divisor: int) -> bool:
        return sum(-(-value // divisor) for value in nums) <= threshold

    found = _smallest_satisfying(1, sum(nums), within)
    return 0 if found == -1 else found


def count_negatives(grid: Iterable[Iterable[int]]) -> int:
    """Number of negative entries in a matrix."""
    return sum(1 for row in grid for value in row if value < 0)


def find_kth_positive(arr: Iterable[int], k: int) -> int:
    """The k-th positive integer missing from a strictly increasing sequence of positives."""
    candidate = 1
    for value in arr:
        gap = value - candidate
        if gap >= k:
            return candidate + k - 1
        k -= gap
        candidate = value + 1
    return candidate + k - 1


def pivot_index(nums: Sequence[int]) -> int:
    """Index where a rotated ascending sequence restarts.

    For a sequence that is not rotated this is its last index.
    """
    low, high = 0, len(nums) - 1
    while low < high:
        mid = (low + high) // 2
        if nums[mid] >= nums[0]:
            low = mid + 1
        else:
            high = mid
    return low


def find_min(nums: Sequence[int]) -> int:
    """Smallest value of a rotated ascending sequence of distinct values."""
    if not nums:
        raise ValueError("find_min() needs at least one value")
    low, high = 0, len(nums) - 1
    while low < high:
        mid = (low + high) // 2
        if nums[mid] > nums[high]:
            low = mid + 1
        else:
            high = mid
    return nums[low]


def special_array(nums: Iterable[int]) -> int:
    """The x for which exactly x values are at least x, or -1 if there is none."""
    ordered = sorted(nums)
    low, high = 0, len(ordered)
    while low <= high:
        mid = (low + high) // 2
        count = len(ordered) - bisect_left(ordered, mid)
        if count == mid:
            return mid
        if count > mid:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def find_peak_element(nums: Sequence[int]) -> int:
    """Index of some element larger than both its neighbours."""
    size = len(nums)
    if size == 0:
        raise ValueError("find_peak_element() needs at least one value")
    if size == 1 or nums[0] > nums[1]:
        return 0
    if nums[-1] > nums[-2]:
        return size - 1
    low, high = 1, size - 2
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] > nums[mid - 1] and nums[mid] > nums[mid + 1]:
            return mid
        if nums[mid] < nums[mid - 1]:
            high = mid - 1
        else:
            low = mid + 1
    return low


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Length of the shortest contiguous run summing to at least ``target``, or 0."""
    best = math.inf
    start = 0
    total = 0
    for end, value in enumerate(nums, start=1):
        total += value
        while start < end and total >= target:
            best = min(best, end - start)
            total -= nums[start]
            start += 1
    return 0 if best == math.inf else int(best)


def answer_queries(nums: Iterable[int], queries: Iterable[int]) -> list[int]:
    """For each query, how many of the smallest values fit in a sum no larger than it."""
    prefix = list(accumulate(sorted(nums)))
    return [
        sum(1 for _ in takewhile(lambda running, q=query: running <= q, prefix))
        for query in queries
    ]


def maximum_count(nums: Iterable[int]) -> int:
    """The larger of the number of positive and the number of negative values."""
    positive = negative = 0
    for value in nums:
        if value > 0:
            positive += 1
        elif value < 0:
            negative += 1
    return max(positive, negative)


def get_common(nums1: Iterable[int], nums2: Iterable[int]) -> int:
    """Smallest value present in both inputs, or -1."""
    return min(set(nums1).intersection(nums2), default=-1)


def count_pairs(nums: Iterable[int], target: int) -> int:
    """Number of index pairs whose values sum to less than ``target``."""
    ordered = sorted(nums)
    result = 0
    left, right = 0, len(ordered) - 1
    while left < right:
        if ordered[left] + ordered[right] < target:
            result += right - left
            left += 1
        else:
            right -= 1
    return result


def _search_between(nums: Sequence[int], target: int, low: int, high: int) -> int:
    index = bisect_left(nums, target, low, max(low, high + 1))
    return index if index <= high and nums[index] == target else -1


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated ascending sequence of distinct values, or -1."""
    if not nums:
        raise ValueError("search_rotated() needs at least one value")
    pivot = pivot_index(nums)
    last = len(nums) - 1
    if nums[pivot] <= target <= nums[last]:
        return _search_between(nums, target, pivot, last)
    return _search_between(nums, target, 0, pivot - 1)


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """First and last index of ``target`` in a sorted sequence, or [-1, -1]."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return [-1, -1]
    return [first, bisect_right(nums, target) - 1]


def is_perfect_square(num: int) -> bool:
    """Tell whether ``num`` is the square of a positive integer."""
    return num > 0 and math.isqrt(num) ** 2 == num


def guess_number(n: int, guess: Callable[[int], int]) -> int:
    """Find the picked number in 1..n using ``guess``.

    ``guess(x)`` answers -1 if x is too high, 1 if too low and 0 if right.
    Returns -1 when the answers never settle on a number.
    """
    low, high = 1, n
    while low <= high:
        mid = (low + high) // 2
        answer = guess(mid)
        if answer == 0:
            return mid
        if answer == 1:
            low = mid + 1
        elif answer == -1:
            high = mid - 1
        else:
            raise ValueError(f"guess() must answer -1, 0 or 1, got {answer!r}")
    return -1


def binary_search(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in an ascending sequence, or -1."""
    index = bisect_left(nums, target)
    return index if index < len(nums) and nums[index] == target else -1


def search_rotated_with_duplicates(nums: Iterable[int], target: int) -> bool:
    """Tell whether ``target`` occurs in a rotated sequence that may hold duplicates."""
    return target in set(nums)


def peak_index_in_mountain_array(arr: Sequence[int]) -> int:
    """Index of the summit of a sequence that strictly rises and then strictly falls."""
    if not arr:
        raise ValueError("peak_index_in_mountain_array() needs at least one value")
    low, high = 0, len(arr) - 1
    while low < high:
        mid = (low + high) // 2
        if arr[mid + 1] > arr[mid]:
            low = mid + 1
        else:
            high = mid
    return low