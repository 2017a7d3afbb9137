"""String routines: windows, bracket matching, greedy construction and digits."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable
from itertools import takewhile

_REMOVABLE = {"B": "A", "D": "C"}


def check_inclusion(s1: str, s2: str) -> bool:
    """Tell whether some permutation of ``s1`` occurs as a substring of ``s2``."""
    needed = Counter(s1)
    head = 0
    for tail, char in enumerate(s2):
        needed[char] -= 1
        while needed[char] < 0:
            needed[s2[head]] += 1
            head += 1
        if tail - head + 1 == len(s1):
            return True
    return False


def min_add_to_make_valid(s: str) -> int:
    """Return how many parentheses must be added to balance ``s``.

    Every character other than '(' counts as a closing parenthesis.
    """
    open_count = 0
    unmatched = 0
    for char in s:
        if char == "(":
            open_count += 1
        elif open_count:
            open_count -= 1
        else:
            unmatched += 1
    return unmatched + open_count


def reverse_parentheses(s: str) -> str:
    """Reverse the text inside each pair of parentheses, innermost first,
    and drop the parentheses."""
    output: list[str] = []
    openings: list[int] = []
    for char in s:
        if char == "(":
            openings.append(len(output))
        elif char == ")":
            if not openings:
                raise ValueError("unbalanced ')' in input")
            start = openings.pop()
            output[start:] = reversed(output[start:])
        else:
            output.append(char)
    return "".join(output)


def longest_diverse_string(a: int, b: int, c: int) -> str:
    """Build a longest string of at most ``a`` 'a's, ``b`` 'b's and ``c`` 'c's
    with no letter three times in a row."""
    heap = [(-count, -ord(letter)) for count, letter in ((a, "a"), (b, "b"), (c, "c")) if count]
    heapq.heapify(heap)
    pieces: list[str] = []
    last = ""
    while heap:
        neg_count, neg_code = heapq.heappop(heap)
        count, letter = -neg_count, chr(-neg_code)
        length = min(2, count)
        if letter == last:
            if not heap:
                break
            heapq.heappush(heap, (neg_count, neg_code))
            neg_count, neg_code = heapq.heappop(heap)
            count, letter = -neg_count, chr(-neg_code)
            length = 1
        pieces.append(letter * length)
        last = letter
        if count > length:
            heapq.heappush(heap, (-(count - length), -ord(letter)))
    return "".join(pieces)


def min_operations(logs: Iterable[str]) -> int:
    """Return the folder depth reached after following the change-folder log."""
    depth = 0
    for command in logs:
        if command == "../":
            depth = max(depth - 1, 0)
        elif command != "./":
            depth += 1
    return depth


def _common_length(first: Iterable[str], second: Iterable[str]) -> int:
    return sum(1 for _ in takewhile(lambda pair: pair[0] == pair[1], zip(first, second)))


def are_sentences_similar(s1: str, s2: str) -> bool:
    """Tell whether inserting one run of words into one sentence yields the other."""
    first, second = s1.split(), s2.split()
    short, long = (second, first) if len(first) > len(second) else (first, second)
    prefix = _common_length(short, long)
    suffix = _common_length(reversed(short), reversed(long))
    return prefix + suffix >= len(short)


def min_swaps(s: str) -> int:
    """Return the fewest swaps that balance a string of square brackets."""
    stack: list[str] = []
    for char in s:
        if char == "]" and stack and stack[-1] == "[":
            stack.pop()
        else:
            stack.append(char)
    unmatched_pairs = len(stack) // 2
    return (unmatched_pairs + 1) // 2


def min_length(s: str) -> int:
    """Return the length left after repeatedly removing "AB" and "CD"."""
    stack: list[str] = []
    for char in s:
        if stack and _REMOVABLE.get(char) == stack[-1]:
            stack.pop()
        else:
            stack.append(char)
    return len(stack)


def maximum_swap(num: int) -> int:
    """Return the largest number reachable by swapping two digits at most once."""
    if num < 10:
        return num
    digits = list(str(num))
    for i, digit in enumerate(digits[:-1]):
        best = max(digits[i + 1 :])
        if best > digit:
            j = len(digits) - 1 - digits[::-1].index(best)
            digits[i], digits[j] = digits[j], digits[i]
            return int("".join(digits))
    return num


def min_bit_flips(start: int, goal: int) -> int:
    """Return how many of the low 32 bits differ between ``start`` and ``goal``."""
    return ((start ^ goal) & 0xFFFFFFFF).bit_count()