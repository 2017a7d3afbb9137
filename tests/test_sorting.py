import random
from collections import Counter

import pytest

from solvekit.sorting import (
    find_kth_largest,
    frequency_sort,
    group_anagrams,
    largest_perimeter,
    maximum_gap,
    sort_array,
    sort_colors,
    sort_jumbled,
)

RNG = random.Random(2024)
SAMPLES = [
    [2, 0, 2, 1, 1, 0],
    [5],
    [-3, 7, -3, 0, 12, 1],
    RNG.choices(range(-100, 101), k=80),
]


@pytest.mark.parametrize("values", SAMPLES)
def test_sort_colors_in_place(values):
    nums = list(values)
    sort_colors(nums)
    assert nums == sorted(values)


def test_maximum_gap_example():
    assert maximum_gap([3, 6, 9, 1]) == 3


def test_maximum_gap_arithmetic_progression():
    values = list(range(0, 100, 7))
    RNG.shuffle(values)
    assert maximum_gap(values) == 7


def test_maximum_gap_bounds():
    values = RNG.choices(range(1000), k=50)
    gap = maximum_gap(values)
    spread = max(values) - min(values)
    assert gap <= spread
    assert gap * (len(values) - 1) >= spread
    shuffled = list(values)
    RNG.shuffle(shuffled)
    assert maximum_gap(shuffled) == gap


def test_maximum_gap_empty():
    with pytest.raises(ValueError):
        maximum_gap([])


@pytest.mark.parametrize("values", SAMPLES)
def test_find_kth_largest(values):
    descending = sorted(values, reverse=True)
    for k in range(1, len(values) + 1):
        assert find_kth_largest(list(values), k) == descending[k - 1]


@pytest.mark.parametrize("k", [0, 4])
def test_find_kth_largest_out_of_range(k):
    with pytest.raises(ValueError):
        find_kth_largest([1, 2, 3], k)


@pytest.mark.parametrize("values", SAMPLES + [[]])
def test_sort_array(values):
    original = list(values)
    assert sort_array(values) == sorted(original)
    assert values == original


def test_largest_perimeter_examples():
    assert largest_perimeter([2, 1, 2]) == 5
    assert largest_perimeter([1, 2, 1]) == 0


def test_largest_perimeter_single_triangle():
    sides = [4, 5, 6]
    assert largest_perimeter(sides) == sum(sides)


def test_largest_perimeter_result_is_a_triangle():
    values = RNG.choices(range(1, 60), k=12)
    result = largest_perimeter(values)
    sides = sorted(values, reverse=True)
    triangles = [
        (a, b, c) for a, b, c in zip(sides, sides[1:], sides[2:]) if a < b + c
    ]
    assert triangles
    assert result == sum(triangles[0])
    assert all(result >= sum(t) for t in triangles)


@pytest.mark.parametrize("values", SAMPLES)
def test_frequency_sort_invariants(values):
    result = frequency_sort(values)
    assert Counter(result) == Counter(values)
    counts = Counter(values)
    for first, second in zip(result, result[1:]):
        assert counts[first] <= counts[second]
        if counts[first] == counts[second]:
            assert first >= second


def test_sort_jumbled_example():
    mapping = [8, 9, 4, 0, 2, 1, 3, 5, 7, 6]
    assert sort_jumbled(mapping, [991, 338, 38]) == [338, 38, 991]


def test_sort_jumbled_identity_mapping():
    values = RNG.choices(range(0, 5000), k=40)
    assert sort_jumbled(list(range(10)), values) == sorted(values)


def test_sort_jumbled_reversed_digits():
    values = RNG.choices(range(100, 1000), k=30)
    mapping = list(range(9, -1, -1))
    assert sort_jumbled(mapping, values) == sorted(values, reverse=True)


def test_sort_jumbled_constant_mapping_is_stable():
    values = [31, 7, 450, 2, 99]
    assert sort_jumbled([3] * 10, values) == values or sort_jumbled([0] * 10, values) == values


def test_group_anagrams_invariants():
    words = ["eat", "tea", "tan", "ate", "nat", "bat", ""]
    groups = group_anagrams(words)
    assert sorted(w for group in groups for w in group) == sorted(words)
    keys = ["".join(sorted(group[0])) for group in groups]
    assert len(set(keys)) == len(groups)
    for key, group in zip(keys, groups):
        assert all("".join(sorted(w)) == key for w in group)
    assert [group[0] for group in groups] == ["eat", "tan", "bat", ""]


def test_group_anagrams_keeps_input_order_within_group():
    words = ["abc", "cab", "bca"]
    assert group_anagrams(words) == [words]