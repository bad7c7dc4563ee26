# algosolve

A library of small, self-contained solutions to well-known algorithm
problems, grouped by theme. Every solution is a plain function (or a small
class) that takes Python lists, strings and integers and returns a value.
Invalid input, such as an empty list where a value is required, raises
`ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

The only runtime dependency is `sortedcontainers`.

## Modules

- `algosolve.linked_lists` – a `ListNode` dataclass (iterable over its
  values), `from_values`, `to_values`, `reverse_k_group`, `sort_list`
  (merge sort), `is_palindrome` (leaves the list intact), `delete_node`,
  `odd_even_list`.
- `algosolve.trees` – a `TreeNode` dataclass, `inorder` (a generator of
  nodes), `recover_tree` (swaps back the two misplaced values of a binary
  search tree).
- `algosolve.searching` – `median_of_sorted`, `k_weakest_rows`,
  `minimize_max`, `contains_nearby_almost_duplicate`, `count_range_sum`,
  `merge_sort`.
- `algosolve.text` – `prefix_function`, `full_justify`,
  `shortest_palindrome`, `repeated_string_match`, `rotate_string`,
  `longest_prefix`, `remove_outer_parentheses`, `max_depth`.
- `algosolve.seating` – `max_dist_to_closest`, and `ExamRoom`, whose
  `seat()` picks the seat furthest from everyone (lowest on ties) and whose
  `leave(p)` frees a seat.
- `algosolve.geometry` – `max_points`, `skyline` (returns `(x, height)`
  tuples), `smallest_range` (returns a `(low, high)` tuple).
- `algosolve.combinatorics` – `lexical_order`, `find_kth_number`,
  `can_i_win`, `count_arrangement`, `check_record`, `count_good_arrays`,
  `assign_edge_weights`, `count_permutations`. Counts that grow large are
  taken modulo 1 000 000 007.
- `algosolve.graphs` – `DisjointSet` (union-find whose representative is the
  smallest member), `smallest_equivalent_string`, `max_candies`.
- `algosolve.autocomplete` – `Trie`, with `insert`, `suggest`, `search` and
  `starts_with`, keeping the `k` smallest words under every prefix; and
  `suggested_products`.
- `algosolve.digits` – `max_diff`, `min_max_difference`,
  `largest_odd_number`.
- `algosolve.arrays` – `max_profit`, `ways_to_make_fair`,
  `maximum_difference`, `partition_array`, `divide_array`,
  `max_adjacent_distance`, `can_make_equal`.
- `algosolve.frequency` – `longest_substring`, `beauty_sum`,
  `minimum_deletions`, `max_parity_difference`,
  `max_parity_difference_window`, `max_manhattan_distance`.
- `algosolve.greedy_strings` – `robot_with_string`, `clear_stars`,
  `answer_string`, `max_active_sections_after_trade`, `max_substrings`.

## Example

```python
from algosolve.linked_lists import from_values, to_values, sort_list
from algosolve.text import full_justify
from algosolve.autocomplete import suggested_products

to_values(sort_list(from_values([4, 2, 1, 3])))   # [1, 2, 3, 4]
full_justify(["This", "is", "an", "example"], 16)  # ['This    is    an', 'example         ']
suggested_products(["mobile", "mouse", "moneypot"], "mo")
# [['mobile', 'moneypot', 'mouse'], ['mobile', 'moneypot', 'mouse']]
```

## What it does not do

The package is a library only: it has no command-line program and reads no
input files. Call its functions from your own code.