"""Routines over lists of integers: searching, counting and in-place rearranging."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate, groupby
from operator import mul
from typing import Optional


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return indices ``[i, j]`` with ``i < j`` whose values add up to ``target``.

    An empty list is returned when no such pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [partner, index]
        seen[value] = index
    return []


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers in ``nums``."""
    values = set(nums)
    longest = 0
    for value in values:
        if value - 1 in values:
            continue
        end = value
        while end + 1 in values:
            end += 1
        longest = max(longest, end - value + 1)
    return longest


def max_product(nums: Sequence[int]) -> int:
    """Return ``(a - 1) * (b - 1)`` for the two largest positive values."""
    largest = second = 0
    for num in nums:
        if num > largest:
            second, largest = largest, num
        elif num > second:
            second = num
    return (largest - 1) * (second - 1)


def interleave_halves(nums: Sequence[int], n: int) -> list[int]:
    """Turn ``[x1..xn, y1..yn]`` into ``[x1, y1, x2, y2, ..., xn, yn]``."""
    if n < 0 or len(nums) < 2 * n:
        raise ValueError("nums must hold at least 2 * n values")
    return [value for pair in zip(nums[:n], nums[n : 2 * n]) for value in pair]


def majority_element(nums: Sequence[int]) -> Optional[int]:
    """Return the value occurring more than ``len(nums) // 2`` times, or None."""
    candidate = None
    count = 0
    for num in nums:
        if count == 0:
            candidate, count = num, 1
        elif num == candidate:
            count += 1
        else:
            count -= 1
    if candidate is not None and nums.count(candidate) > len(nums) // 2:
        return candidate
    return None


def rotate_array(nums: list[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` places in place."""
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = nums[-k:] + nums[:-k]


def build_array(nums: Sequence[int]) -> list[int]:
    """Return ``[nums[nums[0]], nums[nums[1]], ...]``."""
    size = len(nums)
    for value in nums:
        if not 0 <= value < size:
            raise IndexError(f"index {value} out of range")
    return [nums[value] for value in nums]


def get_concatenation(nums: Sequence[int]) -> list[int]:
    """Return ``nums`` followed by itself."""
    return list(nums) * 2


def target_indices(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices ``target`` would occupy once ``nums`` is sorted."""
    smaller = sum(1 for num in nums if num < target)
    larger = sum(1 for num in nums if num > target)
    return list(range(smaller, len(nums) - larger))


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Return every value occurring more than ``len(nums) // 3`` times."""
    first = second = None
    count1 = count2 = 0
    for num in nums:
        if count1 == 0 and num != second:
            first, count1 = num, 1
        elif count2 == 0 and num != first:
            second, count2 = num, 1
        elif num == first:
            count1 += 1
        elif num == second:
            count2 += 1
        else:
            count1 -= 1
            count2 -= 1
    threshold = len(nums) // 3
    return [
        candidate
        for candidate in (first, second)
        if candidate is not None and nums.count(candidate) > threshold
    ]


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of all the other values."""
    if not nums:
        return []
    prefix = accumulate(nums[:-1], mul, initial=1)
    suffix = list(accumulate(reversed(nums[1:]), mul, initial=1))[::-1]
    return [before * after for before, after in zip(prefix, suffix)]


def find_duplicate(nums: Sequence[int]) -> int:
    """Find the repeated value in a list of ``n + 1`` values drawn from ``1..n``."""
    if not nums:
        raise ValueError("no values given")
    slow = fast = nums[0]
    while True:
        slow = nums[slow]
        fast = nums[nums[fast]]
        if slow == fast:
            break
    fast = nums[0]
    while slow != fast:
        slow = nums[slow]
        fast = nums[fast]
    return slow


def next_permutation(nums: list[int]) -> None:
    """Rearrange ``nums`` in place into the next lexicographic permutation.

    The last permutation wraps round to the first (ascending order).
    """
    pivot = next(
        (i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]), None
    )
    if pivot is None:
        nums.reverse()
        return
    swap = next(j for j in range(len(nums) - 1, pivot, -1) if nums[j] > nums[pivot])
    nums[pivot], nums[swap] = nums[swap], nums[pivot]
    nums[pivot + 1 :] = reversed(nums[pivot + 1 :])


def number_game(nums: Sequence[int]) -> list[int]:
    """Sort the values, then swap each consecutive pair."""
    result = sorted(nums)
    evens, odds = result[0::2], result[1::2]
    pairs = len(odds)
    result[0 : 2 * pairs : 2] = odds
    result[1 : 2 * pairs : 2] = evens[:pairs]
    return result


def find_max_consecutive_ones(nums: Sequence[int]) -> int:
    """Return the length of the longest run of ones."""
    return max(
        (sum(1 for _ in run) for value, run in groupby(nums) if value == 1),
        default=0,
    )


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in one pass."""
    if any(num not in (0, 1, 2) for num in nums):
        raise ValueError("values must be 0, 1 or 2")
    low = mid = 0
    high = len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[mid], nums[low] = nums[low], nums[mid]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def remove_duplicates(nums: list[int]) -> int:
    """Keep each value of a sorted list at most twice, in place.

    The list is truncated to the kept values and their count is returned.
    """
    kept = 0
    for num in nums:
        if kept < 2 or num != nums[kept - 2]:
            nums[kept] = num
            kept += 1
    del nums[kept:]
    return kept


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1`` in place."""
    if m < 0 or n < 0 or len(nums1) < m + n or len(nums2) < n:
        raise ValueError("nums1 must have room for m + n values")
    nums1[: m + n] = sorted(nums1[:m] + list(nums2[:n]))