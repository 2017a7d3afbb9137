# solvekit

Small implementations of well-known algorithm problems, grouped by theme.
The package uses only the Python standard library and needs Python 3.10 or
later.

## Install

```
pip install solvekit
```

To run the tests:

```
pip install "solvekit[test]"
pytest
```

## Modules

### `solvekit.linked`

- `ListNode(val=0, next=None)`: a singly linked list node; iterating over a
  node yields the values from it to the end of the list.
- `TreeNode(val=0, left=None, right=None)`: a binary tree node.
- `build_list(values)` builds a list (or `None` when empty);
  `list_values(head)` reads it back into a Python list.
- `insertion_sort_list(head)` and `sort_list(head)` sort a list ascending
  (insertion sort and merge sort) and return the new head.
- `split_list_to_parts(head, k)` cuts a list into `k` parts whose lengths
  differ by at most one, longer parts first, `None` for empty parts.
- `insert_greatest_common_divisors(head)` puts a node holding the GCD
  between every pair of neighbours.
- `modified_list(nums, head)` removes every node whose value is in `nums`.
- `is_sub_path(head, root)` tells whether the list appears as a downward
  path in the tree.
- `get_directions(root, start_value, dest_value)` returns the moves
  (`"U"`, `"L"`, `"R"`) from one tree value to another.

### `solvekit.sorting`

`sort_colors` (sorts a list in place), `maximum_gap`, `find_kth_largest`,
`sort_array`, `largest_perimeter`, `frequency_sort` (increasing frequency,
ties by decreasing value), `sort_jumbled` (stable sort by digit-mapped
value) and `group_anagrams` (groups in order of first appearance).

### `solvekit.arrays`

`three_sum`, `max_sub_array`, `merge_intervals`, `majority_element`,
`top_k_frequent`, `find_duplicates`, `max_score_sightseeing_pair`,
`longest_subarray`, `min_subarray`, `max_sum_of_three_subarrays`,
`divide_players`, `missing_rolls`, `average_waiting_time`, `max_k_elements`
and `least_interval`.

### `solvekit.ranges`

- `NumArray(nums)`: a segment tree with `update(index, val)` and
  `sum_range(left, right)` (inclusive); `len()` gives its size.
- `FenwickTree(size)`: a binary indexed tree over positions `1..size` with
  `add(index, delta)` and `prefix_sum(index)`.
- `count_smaller(nums)`, `num_teams(ratings)` and `xor_queries(arr, queries)`.

### `solvekit.strings`

`check_inclusion`, `min_add_to_make_valid`, `reverse_parentheses`,
`longest_diverse_string`, `min_operations`, `are_sentences_similar`,
`min_swaps`, `min_length`, `maximum_swap` and `min_bit_flips` (compares the
low 32 bits).

### `solvekit.searching`

`search_matrix`, `search_matrix_ii`, `nth_ugly_number`, `smallest_range`,
and `MyCalendar`, whose `book(start, end)` accepts a half-open booking only
when it overlaps none already taken.

### `solvekit.grids`

`spiral_matrix_iii`, `count_sub_islands` and `max_probability`.

## Errors

Inputs a routine cannot work with raise `ValueError` (for example an empty
list where a value is needed, or `k` out of range); out-of-range positions
given to `NumArray` and `FenwickTree` raise `IndexError`.

## Examples

```python
from solvekit.arrays import three_sum, merge_intervals
from solvekit.linked import build_list, list_values, sort_list
from solvekit.ranges import NumArray
from solvekit.searching import MyCalendar

three_sum([-1, 0, 1, 2, -1, -4])           # [[-1, -1, 2], [-1, 0, 1]]
merge_intervals([[1, 3], [2, 6], [8, 10]])  # [[1, 6], [8, 10]]

list_values(sort_list(build_list([4, 2, 1, 3])))  # [1, 2, 3, 4]

tree = NumArray([1, 3, 5])
tree.sum_range(0, 2)  # 9
tree.update(1, 2)
tree.sum_range(0, 2)  # 8

calendar = MyCalendar()
calendar.book(10, 20)  # True
calendar.book(15, 25)  # False
```

## What it does not do

solvekit is a library only: it has no command-line program, and it reads
and writes no files.