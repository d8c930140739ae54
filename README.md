# algosolve

Small solutions to classic algorithm problems, grouped by the kind of data
they work on. The package uses only the standard library and needs
Python 3.10 or later.

## Installation

```
pip install .
```

## Modules

### `algosolve.linked_list`

`ListNode` is a dataclass with `val` and `next`. Nodes compare by identity.
`build_list(values)` makes a list from an iterable and returns its head.
`to_values(head)` returns the values as a Python list. It raises `ValueError`
if the list has a cycle.

The module also has these operations:

- `has_cycle` tells whether the list loops.
- `detect_cycle` returns the node where the loop starts, or `None`.
- `get_intersection_node` returns the first node that two lists share, or `None`.
- `remove_nth_from_end` counts `n` from the end, starting at 1. It raises
  `ValueError` when `n` is less than 1 or longer than the list.
- `add_two_numbers` adds two numbers stored as digit lists, with the least
  significant digit first.
- `reverse_list` reverses the list in place.
- `merge_two_lists` splices two sorted lists into one. On equal values the
  node from the first list comes first.
- `is_palindrome` reverses half the list to compare it, then puts it back
  as it was.
- `delete_node` removes a node without the head. It raises `ValueError` on
  the tail node.
- `rotate_right` rotates the list right by `k` places. It raises `ValueError`
  when `k` is negative.

### `algosolve.strings`

- `int_to_roman` and `roman_to_int` convert to and from Roman numerals.
  `roman_to_int` counts characters that are not numerals as zero, and it
  raises `ValueError` on an empty string.
- `longest_common_prefix`
- `reverse_words` reverses the order of the whitespace-separated words.
- `reverse_string` reverses a list of characters in place.
- `fizz_buzz`
- `detect_capital_use` accepts "USA", "leetcode" or "Google" patterns, with
  ASCII letters only.
- `length_of_last_word`
- `next_greatest_letter` finds the next letter in a sorted sequence and
  wraps round to the first letter.

### `algosolve.arrays`

These functions take lists of integers:

- `two_sum` returns `[i, j]`, or `[]` when no pair adds up to the target.
- `longest_consecutive`
- `max_product`
- `interleave_halves`
- `majority_element` returns the majority value, or `None` when there is none.
- `majority_elements` returns every value that occurs more than n/3 times.
- `rotate_array`
- `build_array`
- `get_concatenation`
- `target_indices`
- `product_except_self`
- `find_duplicate`
- `next_permutation` wraps from the last permutation to the first.
- `number_game`
- `find_max_consecutive_ones`
- `sort_colors`
- `remove_duplicates` keeps each value at most twice, truncates the list and
  returns the new length.
- `merge_sorted`

`rotate_array`, `next_permutation`, `sort_colors`, `remove_duplicates` and
`merge_sorted` change the list they are given.

### `algosolve.greedy`

- `max_profit` allows one trade.
- `max_profit_multi` allows any number of trades.
- `can_complete_circuit` returns the starting station, or `None` when the
  circuit cannot be driven.
- `min_jumps`
- `can_jump`
- `max_subarray`
- `h_index`
- `merge_intervals` returns the merged intervals sorted by start.

### `algosolve.numbers`

- `pascal_row` counts rows from 1.
- `generate_pascal`
- `power` computes an integer power by repeated squaring.
- `unique_paths`
- `reverse_integer` returns 0 when the result falls outside the signed
  32-bit range.
- `sum_of_three` returns three consecutive integers, or `[]` when there are
  none.

### `algosolve.matrix`

- `k_weakest_rows` returns the weakest rows first. On a tie the lower row
  index comes first.
- `count_negatives` expects each row to be sorted from highest to lowest.
- `rotate_image` turns a square matrix a quarter turn clockwise, in place.
- `set_zeroes` changes the matrix in place.
- `search_matrix` expects each row to be sorted in ascending order.

### `algosolve.randomized_set`

`RandomizedSet` inserts and removes members and picks a random member in
constant time:

- `insert` and `remove` return whether the set changed.
- `get_random` raises `IndexError` when the set is empty.
- The set also supports `len()` and `in`.
- You can pass a `random.Random` instance to get reproducible picks.

## Examples

```python
import random

from algosolve.linked_list import build_list, reverse_list, to_values
from algosolve.randomized_set import RandomizedSet
from algosolve.strings import int_to_roman, roman_to_int

int_to_roman(1994)            # "MCMXCIV"
roman_to_int("MCMXCIV")       # 1994

to_values(reverse_list(build_list([1, 2, 3])))   # [3, 2, 1]

s = RandomizedSet(random.Random(0))
s.insert(5)                   # True
s.insert(5)                   # False
5 in s                        # True
s.get_random()                # 5
```

## What it does not do

`algosolve` is a library only. It has no command-line tool and does not read
input files. You call its functions from your own code.

## Running the tests

```
pip install .[test]
pytest tests
```