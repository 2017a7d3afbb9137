"""Array routines: sums, intervals, frequencies and greedy scheduling."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, groupby, pairwise


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct ascending triplet of values that sums to zero."""
    values = sorted(nums)
    triplets: list[list[int]] = []
    for i, first in enumerate(values[:-2]):
        if i and values[i - 1] == first:
            continue
        low, high = i + 1, len(values) - 1
        while low < high:
            total = first + values[low] + values[high]
            if total == 0:
                triplets.append([first, values[low], values[high]])
                low += 1
                while low < high and values[low] == values[low - 1]:
                    low += 1
                high -= 1
                while low < high and values[high] == values[high + 1]:
                    high -= 1
            elif total < 0:
                low += 1
            else:
                high -= 1
    return triplets


def max_sub_array(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``nums``."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = running = nums[0]
    for value in nums[1:]:
        running = value + running if running > 0 else value
        best = max(best, running)
    return best


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching closed intervals into sorted disjoint ones."""
    merged: list[list[int]] = []
    for start, end in sorted(intervals):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def majority_element(nums: Iterable[int]) -> int:
    """Return the most frequent value; ties go to the smallest value."""
    counts = Counter(nums)
    if not counts:
        raise ValueError("nums must not be empty")
    return min(counts, key=lambda value: (-counts[value], value))


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values, most frequent first.

    Values of equal frequency are ordered from the largest value down.
    """
    counts = Counter(nums)
    if not 0 <= k <= len(counts):
        raise ValueError("k must be between 0 and the number of distinct values")
    ranked = heapq.nlargest(k, counts.items(), key=lambda item: (item[1], item[0]))
    return [value for value, _ in ranked]


def find_duplicates(nums: Sequence[int]) -> list[int]:
    """Return values seen more than once, in the order of their second occurrence.

    Every value must lie between 1 and ``len(nums)``.
    """
    seen: set[int] = set()
    duplicates: list[int] = []
    for value in nums:
        if not 1 <= value <= len(nums):
            raise ValueError(f"value {value} outside 1..{len(nums)}")
        if value in seen:
            duplicates.append(value)
        else:
            seen.add(value)
    return duplicates


def max_score_sightseeing_pair(values: Iterable[int]) -> int:
    """Return the best ``values[i] + values[j] + i - j`` over ``i < j``, at least 0."""
    best_partner = 0
    best = 0
    for previous, current in pairwise(values):
        best_partner = max(best_partner, previous) - 1
        best = max(best, current + best_partner)
    return best


def longest_subarray(nums: Sequence[int]) -> int:
    """Return the length of the longest run made only of the maximum value."""
    if not nums:
        raise ValueError("nums must not be empty")
    largest = max(nums)
    return max(sum(1 for _ in run) for value, run in groupby(nums) if value == largest)


def min_subarray(nums: Sequence[int], p: int) -> int:
    """Return the length of the shortest run whose removal leaves a sum divisible by ``p``.

    Returns 0 when the sum is already divisible and -1 when only removing
    everything would do.
    """
    remainder = sum(nums) % p
    if remainder == 0:
        return 0
    last_seen = {0: -1}
    result = len(nums)
    prefix = 0
    for i, value in enumerate(nums):
        prefix = (prefix + value) % p
        wanted = (prefix - remainder) % p
        if wanted in last_seen:
            result = min(result, i - last_seen[wanted])
        last_seen[prefix] = i
    return -1 if result == len(nums) else result


def max_sum_of_three_subarrays(nums: Sequence[int], k: int) -> list[int]:
    """Return the start indices of three non-overlapping windows of length ``k``
    with the largest total, choosing the lexicographically smallest on ties."""
    n = len(nums)
    if k <= 0 or 3 * k > n:
        raise ValueError("need k > 0 and room for three windows of length k")
    prefix = list(accumulate(nums, initial=0))
    window = [prefix[i + k] - prefix[i] for i in range(n - k + 1)]

    starts_by_count: list[list[int]] = []
    previous_best: list[float] | None = None
    for count in range(1, 4):
        best = [float("-inf")] * (n + 1)
        start = [-1] * (n + 1)
        for ele in range(n - k * count, -1, -1):
            current = window[ele]
            if previous_best is not None:
                current += previous_best[ele + k]
            if current >= best[ele + 1]:
                best[ele] = current
                start[ele] = ele
            else:
                best[ele] = best[ele + 1]
                start[ele] = start[ele + 1]
        starts_by_count.append(start)
        previous_best = best

    result: list[int] = []
    next_start = 0
    for start in reversed(starts_by_count):
        chosen = start[next_start]
        result.append(chosen)
        next_start = chosen + k
    return result


def divide_players(skill: Iterable[int]) -> int:
    """Pair players into teams of equal total skill and return the summed
    product of each team's skills, or -1 when no such pairing exists."""
    ordered = sorted(skill)
    if not ordered or len(ordered) % 2:
        raise ValueError("need a positive, even number of players")
    half = len(ordered) // 2
    target = sum(ordered) // half
    chemistry = 0
    for low, high in zip(ordered[:half], reversed(ordered)):
        if low + high != target:
            return -1
        chemistry += low * high
    return chemistry


def missing_rolls(rolls: Sequence[int], mean: int, n: int) -> list[int]:
    """Return ``n`` die rolls making the overall mean ``mean``, or [] if impossible."""
    missing_sum = mean * (n + len(rolls)) - sum(rolls)
    if missing_sum < n or missing_sum > 6 * n:
        return []
    base, extra = divmod(missing_sum, n)
    return [base + 1] * extra + [base] * (n - extra)


def average_waiting_time(customers: Sequence[Sequence[int]]) -> float:
    """Return the mean waiting time of customers served one at a time in order.

    Each customer is an ``(arrival, preparation_time)`` pair.
    """
    if not customers:
        raise ValueError("customers must not be empty")
    finish = 0
    total_wait = 0
    for arrival, duration in customers:
        finish = max(finish, arrival) + duration
        total_wait += finish - arrival
    return total_wait / len(customers)


def max_k_elements(nums: Iterable[int], k: int) -> int:
    """Take the largest value ``k`` times, replacing it by its third rounded up;
    return the sum of the values taken."""
    heap = [-value for value in nums]
    if not heap:
        raise ValueError("nums must not be empty")
    heapq.heapify(heap)
    score = 0
    for _ in range(k):
        largest = -heap[0]
        score += largest
        heapq.heapreplace(heap, -(-largest // 3))
    return score


def least_interval(tasks: Sequence[str], n: int) -> int:
    """Return the fewest time units to run ``tasks`` with cooldown ``n`` between
    two runs of the same task."""
    counts = Counter(tasks)
    if not counts:
        return 0
    most = max(counts.values())
    ties = sum(1 for count in counts.values() if count == most)
    return max(len(tasks), (most - 1) * (n + 1) + ties)