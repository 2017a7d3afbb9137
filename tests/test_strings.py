import pytest

from solvekit.strings import (
    are_sentences_similar,
    check_inclusion,
    longest_diverse_string,
    maximum_swap,
    min_add_to_make_valid,
    min_bit_flips,
    min_length,
    min_operations,
    min_swaps,
    reverse_parentheses,
)


def test_check_inclusion_examples():
    assert check_inclusion("ab", "eidbaooo")
    assert not check_inclusion("ab", "eidboaoo")


@pytest.mark.parametrize("word", ["abc", "aab", "xyzzy"])
def test_check_inclusion_finds_reversed_word(word):
    assert check_inclusion(word, "qq" + word[::-1] + "rr")


def test_check_inclusion_longer_pattern_never_fits():
    assert not check_inclusion("abcd", "abc")


@pytest.mark.parametrize("text", ["", "()", "(())()", "((()))"])
def test_min_add_balanced_needs_nothing(text):
    assert min_add_to_make_valid(text) == 0


@pytest.mark.parametrize("closing, opening", [(1, 0), (0, 3), (2, 2)])
def test_min_add_counts_unmatched(closing, opening):
    assert min_add_to_make_valid(")" * closing + "(" * opening) == closing + opening


def test_reverse_parentheses_single_pair():
    assert reverse_parentheses("(abcd)") == "abcd"[::-1]


def test_reverse_parentheses_nested():
    assert reverse_parentheses("(u(love)i)") == "iloveu"


def test_reverse_parentheses_double_wrap_is_identity():
    assert reverse_parentheses("((hello))") == "hello"


def test_reverse_parentheses_plain_text_unchanged():
    assert reverse_parentheses("plain") == "plain"


def test_reverse_parentheses_rejects_unmatched_close():
    with pytest.raises(ValueError):
        reverse_parentheses("ab)c")


def _is_happy(text):
    return not any(letter * 3 in text for letter in "abc")


@pytest.mark.parametrize("a, b, c", [(2, 2, 1), (3, 3, 3), (1, 2, 2)])
def test_longest_diverse_string_uses_everything_when_balanced(a, b, c):
    assert len(longest_diverse_string(a, b, c)) == a + b + c


def test_longest_diverse_string_empty():
    assert longest_diverse_string(0, 0, 0) == ""


def test_min_operations_example():
    assert min_operations(["d1/", "d2/", "../", "d21/", "./"]) == 2


def test_min_operations_cannot_go_above_root():
    assert min_operations(["../", "../", "./"]) == 0


def test_min_operations_counts_descents():
    logs = ["a/", "b/", "c/", "d/"]
    assert min_operations(logs) == len(logs)


def test_sentences_similar_example():
    assert are_sentences_similar("My name is Haley", "My Haley")


def test_sentences_not_similar():
    assert not are_sentences_similar("of", "A lot of words")


@pytest.mark.parametrize("other", ["Eating right now", "Eating", "now", "Eating   right  now"])
def test_sentences_similar_prefix_suffix_and_spacing(other):
    assert are_sentences_similar(other, "Eating right now")
    assert are_sentences_similar("Eating right now", other)


@pytest.mark.parametrize("text", ["", "[]", "[[]]", "[][][]"])
def test_min_swaps_balanced(text):
    assert min_swaps(text) == 0


def test_min_swaps_example():
    assert min_swaps("]]][[[") == 2


def test_min_swaps_single_pair_reversed():
    assert min_swaps("][") == 1


def test_min_length_removes_nested_pairs():
    assert min_length("CABD") == 0
    assert min_length("AB" * 4) == 0


def test_min_length_keeps_other_text():
    assert min_length("EFGH") == len("EFGH")


def test_min_length_example():
    assert min_length("ABFCACDB") == 2


def test_maximum_swap_example():
    assert maximum_swap(2736) == 7236


@pytest.mark.parametrize("num", [9973, 98368, 1993, 115, 7, 0, 10, 4321])
def test_maximum_swap_invariants(num):
    result = maximum_swap(num)
    assert result >= num
    assert sorted(str(result)) == sorted(str(num))
    changed = sum(1 for x, y in zip(str(num), str(result)) if x != y)
    assert changed in (0, 2)


def test_maximum_swap_already_maximal():
    assert maximum_swap(9973) == 9973


def test_min_bit_flips_example():
    assert min_bit_flips(10, 7) == 3


@pytest.mark.parametrize("value", [0, 5, 123456])
def test_min_bit_flips_same_value(value):
    assert min_bit_flips(value, value) == 0


@pytest.mark.parametrize("bits", [1, 8, 20])
def test_min_bit_flips_all_ones(bits):
    assert min_bit_flips(0, 2**bits - 1) == bits


def test_min_bit_flips_symmetric():
    assert min_bit_flips(3, 4) == min_bit_flips(4, 3)


def test_min_bit_flips_uses_32_bits():
    assert min_bit_flips(-1, 0) == 32