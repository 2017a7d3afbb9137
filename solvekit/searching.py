"""Searching: sorted matrices, ugly numbers, covering ranges and bookings."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Binary-search a matrix whose rows, read in order, form one sorted run."""
    if not matrix or not matrix[0]:
        return False
    cols = len(matrix[0])
    low, high = 0, len(matrix) * cols - 1
    while low < high:
        middle = (low + high) // 2
        row, col = divmod(middle, cols)
        if matrix[row][col] < target:
            low = middle + 1
        else:
            high = middle
    row, col = divmod(low, cols)
    return matrix[row][col] == target


def search_matrix_ii(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Search a matrix whose rows and columns are each sorted ascending."""
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value < target:
            row += 1
        else:
            col -= 1
    return False


def nth_ugly_number(n: int) -> int:
    """Return the n-th number (1-based) whose only prime factors are 2, 3 and 5."""
    if n < 1:
        raise ValueError("n must be positive")
    heap = [1]
    seen = {1}
    for _ in range(n - 1):
        smallest = heapq.heappop(heap)
        for factor in (2, 3, 5):
            candidate = smallest * factor
            if candidate not in seen:
                seen.add(candidate)
                heapq.heappush(heap, candidate)
    return heap[0]


def smallest_range(nums: Sequence[Sequence[int]]) -> list[int]:
    """Return the narrowest ``[low, high]`` holding a value from every sorted list.

    Among equally narrow ranges the one with the smaller start wins.
    """
    if not nums or any(not row for row in nums):
        raise ValueError("every list must hold at least one value")
    heap = [(row[0], i, 0) for i, row in enumerate(nums)]
    heapq.heapify(heap)
    high = max(row[0] for row in nums)
    best_start, best_width = heap[0][0], high - heap[0][0]
    while True:
        low, row_index, position = heapq.heappop(heap)
        width = high - low
        if width < best_width or (width == best_width and low < best_start):
            best_start, best_width = low, width
        position += 1
        row = nums[row_index]
        if position >= len(row):
            break
        heapq.heappush(heap, (row[position], row_index, position))
        high = max(high, row[position])
    return [best_start, best_start + best_width]


@dataclass
class _Booking:
    start: int
    end: int
    left: Optional["_Booking"] = None
    right: Optional["_Booking"] = None


class MyCalendar:
    """A calendar of half-open ``[start, end)`` bookings that never overlap."""

    def __init__(self) -> None:
        self._root: Optional[_Booking] = None

    def book(self, start: int, end: int) -> bool:
        """Add the booking if it overlaps no existing one; tell whether it was added."""
        if self._root is None:
            self._root = _Booking(start, end)
            return True
        node = self._root
        while True:
            if start >= node.end:
                if node.right is None:
                    node.right = _Booking(start, end)
                    return True
                node = node.right
            elif end <= node.start:
                if node.left is None:
                    node.left = _Booking(start, end)
                    return True
                node = node.left
            else:
                return False