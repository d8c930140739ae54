"""Greedy and single-pass routines: trading, jumping, intervals and more."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise
from typing import Optional


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sale."""
    if not prices:
        raise ValueError("no prices given")
    buy = prices[0]
    best = 0
    for price in prices[1:]:
        if price < buy:
            buy = price
        else:
            best = max(best, price - buy)
    return best


def max_profit_multi(prices: Sequence[int]) -> int:
    """Return the best profit when any number of trades may be made."""
    return sum(max(after - before, 0) for before, after in pairwise(prices))


def can_complete_circuit(gas: Sequence[int], cost: Sequence[int]) -> Optional[int]:
    """Return the station from which the circuit can be driven, or None."""
    total = fuel = start = 0
    for index, (got, spent) in enumerate(zip(gas, cost, strict=True)):
        diff = got - spent
        total += diff
        fuel += diff
        if fuel < 0:
            start = index + 1
            fuel = 0
    return None if total < 0 else start


def min_jumps(nums: Sequence[int]) -> int:
    """Return the fewest jumps needed to reach the last index."""
    if len(nums) <= 1:
        return 0
    destination = len(nums) - 1
    coverage = last_jump = jumps = 0
    for index, step in enumerate(nums):
        coverage = max(coverage, index + step)
        if index == last_jump:
            last_jump = coverage
            jumps += 1
            if coverage >= destination:
                return jumps
    return jumps


def can_jump(nums: Sequence[int]) -> bool:
    """Tell whether the last index can be reached from the first."""
    reachable = 0
    for index, step in enumerate(nums):
        if reachable < index:
            return False
        reachable = max(reachable, index + step)
    return True


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run."""
    if not nums:
        raise ValueError("no values given")
    best = nums[0]
    running = 0
    for num in nums:
        running += num
        best = max(best, running)
        running = max(running, 0)
    return best


def h_index(citations: Sequence[int]) -> int:
    """Return the largest h such that h papers have at least h citations each."""
    h = 0
    for rank, count in enumerate(sorted(citations, reverse=True), start=1):
        if count < rank:
            break
        h = rank
    return h


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping ``[start, end]`` intervals into a sorted list."""
    merged: list[list[int]] = []
    for start, end in sorted(map(list, intervals)):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged