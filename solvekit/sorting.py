"""Sorting-based array routines."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable
from itertools import pairwise


def sort_colors(nums: list[int]) -> None:
    """Sort ``nums`` in place in ascending order."""
    nums.sort()


def maximum_gap(nums: list[int]) -> int:
    """Return the largest difference between successive values in sorted order."""
    if not nums:
        raise ValueError("nums must not be empty")
    return max((b - a for a, b in pairwise(sorted(nums))), default=0)


def find_kth_largest(nums: list[int], k: int) -> int:
    """Return the k-th largest value (1-based) of ``nums``."""
    if not 1 <= k <= len(nums):
        raise ValueError("k must be between 1 and the number of values")
    return heapq.nlargest(k, nums)[-1]


def sort_array(nums: list[int]) -> list[int]:
    """Return a new ascending list of ``nums`` built by counting sort."""
    if not nums:
        return []
    counts = Counter(nums)
    return [value for value in range(min(counts), max(counts) + 1) for _ in range(counts[value])]


def largest_perimeter(nums: list[int]) -> int:
    """Return the largest perimeter of a non-degenerate triangle, or 0."""
    sides = sorted(nums, reverse=True)
    for longest, middle, shortest in zip(sides, sides[1:], sides[2:]):
        if longest < middle + shortest:
            return longest + middle + shortest
    return 0


def frequency_sort(nums: list[int]) -> list[int]:
    """Order values by increasing frequency, equal frequencies by decreasing value."""
    counts = Counter(nums)
    return sorted(nums, key=lambda value: (counts[value], -value))


def sort_jumbled(mapping: list[int], nums: list[int]) -> list[int]:
    """Stable-sort ``nums`` by the value obtained after mapping each digit.

    Every number is compared over as many digit places as the largest number
    has; missing leading places count as 0, except that zero itself maps to
    ``mapping[0]`` in every place.
    """
    if not nums:
        return []
    largest = max(nums)
    width = len(str(largest)) if largest > 0 else 0

    def mapped(num: int) -> int:
        value = 0
        for power in range(width - 1, -1, -1):
            place = 10**power
            if num >= place:
                digit = mapping[num // place % 10]
            elif num == 0:
                digit = mapping[0]
            else:
                digit = 0
            value = value * 10 + digit
        return value

    return sorted(nums, key=mapped)


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of one another, in order of first appearance."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())