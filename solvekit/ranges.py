"""Range queries: segment tree, Fenwick tree and prefix XOR."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate
from operator import xor


class NumArray:
    """An array supporting point updates and inclusive range sums."""

    def __init__(self, nums: Iterable[int]) -> None:
        values = list(nums)
        self._size = len(values)
        self._tree = [0] * self._size + values
        for i in range(self._size - 1, 0, -1):
            self._tree[i] = self._tree[2 * i] + self._tree[2 * i + 1]

    def __len__(self) -> int:
        return self._size

    def update(self, index: int, val: int) -> None:
        """Set the value at ``index`` to ``val``."""
        if not 0 <= index < self._size:
            raise IndexError("index out of range")
        index += self._size
        diff = val - self._tree[index]
        while index > 0:
            self._tree[index] += diff
            index //= 2

    def sum_range(self, left: int, right: int) -> int:
        """Return the sum of the values from ``left`` to ``right`` inclusive."""
        if not 0 <= left <= right < self._size:
            raise IndexError("range out of bounds")
        left += self._size
        right += self._size
        total = 0
        while left <= right:
            if left & 1:
                total += self._tree[left]
                left += 1
            if not right & 1:
                total += self._tree[right]
                right -= 1
            left //= 2
            right //= 2
        return total


class FenwickTree:
    """A binary indexed tree over positions ``1..size``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._tree = [0] * (size + 1)

    def __len__(self) -> int:
        return len(self._tree) - 1

    def add(self, index: int, delta: int) -> None:
        """Add ``delta`` at position ``index``."""
        if not 1 <= index < len(self._tree):
            raise IndexError("index out of range")
        while index < len(self._tree):
            self._tree[index] += delta
            index += index & -index

    def prefix_sum(self, index: int) -> int:
        """Return the sum of positions ``1..index``."""
        if not 0 <= index < len(self._tree):
            raise IndexError("index out of range")
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total


def count_smaller(nums: Sequence[int]) -> list[int]:
    """For each value, count the strictly smaller values to its right."""
    if not nums:
        return []
    low = min(nums)
    offset = 1 - low
    tree = FenwickTree(max(nums) - low + 1)
    for num in nums:
        tree.add(num + offset, 1)
    result = []
    for num in nums:
        result.append(tree.prefix_sum(num + offset - 1))
        tree.add(num + offset, -1)
    return result


def num_teams(ratings: Sequence[int]) -> int:
    """Count index triples whose ratings are strictly increasing or decreasing."""
    if not ratings:
        return 0
    low = min(ratings)
    offset = 1 - low
    size = max(ratings) - low + 1
    left = FenwickTree(size)
    right = FenwickTree(size)
    for rating in ratings:
        right.add(rating + offset, 1)

    teams = 0
    for i, rating in enumerate(ratings):
        position = rating + offset
        right.add(position, -1)
        smaller_left = left.prefix_sum(position - 1)
        larger_left = i - smaller_left
        smaller_right = right.prefix_sum(position - 1)
        larger_right = len(ratings) - 1 - i - smaller_right
        teams += smaller_right * larger_left + smaller_left * larger_right
        left.add(position, 1)
    return teams


def xor_queries(arr: Sequence[int], queries: Iterable[Sequence[int]]) -> list[int]:
    """Return the XOR of ``arr[start..end]`` for each ``(start, end)`` query."""
    prefix = list(accumulate(arr, xor, initial=0))
    return [prefix[end + 1] ^ prefix[start] for start, end in queries]