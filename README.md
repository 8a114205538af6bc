# algokata

Classic algorithm exercises written as plain Python functions and grouped
by the kind of data they work on. The package needs nothing outside the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `algokata.linked_list`

`ListNode(val=0, next=None)` is a singly linked list node. Iterating over a
node yields the values from that node to the end of the list.
`build_list(values)` builds a list and returns its head, or `None` for no
values. `to_values(head)` returns the values as a Python list.

- `has_cycle(head)`: whether following `next` ever revisits a node.
- `get_intersection_node(head_a, head_b)`: the first node of list A that is
  also in list B, or `None`.
- `add_two_numbers(l1, l2)`: adds two numbers stored least significant digit
  first. Raises `ValueError` if either list is empty.
- `remove_elements(head, val)`: unlinks every node holding `val`.
- `reverse_list(head)`: a new list with the values reversed.
- `merge_two_lists(list1, list2)`: a new sorted list of both lists' values.
- `is_palindrome_list(head)`: whether the values read the same both ways.
- `delete_node(node)`: removes `node` by copying its successor into it.
  Raises `ValueError` for the last node.
- `rotate_right(head, k)`: rotates the list `k` places right, relinking it
  in place.
- `middle_node(head)`: the middle node; the second middle for even lengths.
- `reverse_between(head, left, right)`: a list with 1-based positions
  `left` to `right` reversed. Raises `ValueError` for an empty list.

### `algokata.sequences`

`two_sum`, `max_area`, `max_profit`, `max_profit_multiple`,
`longest_consecutive`, `can_complete_circuit`, `candy`, `kids_with_candies`,
`two_sum_sorted`, `min_subarray_len`, `find_kth_largest`,
`contains_nearby_duplicate`, `summary_ranges` and `product_except_self`.
`two_sum` and `two_sum_sorted` raise `ValueError` when no pair adds up to
the target; `max_profit` and `max_profit_multiple` raise it for an empty
price list, and `find_kth_largest` for `k` out of range.

### `algokata.arrays`

`remove_duplicates`, `remove_element` and `move_zeroes` rearrange the list
they are given in place; the first two return how many entries are kept at
the front. Also `buy_choco`, `h_index`, `trap`, `find_min_arrow_shots`,
`can_jump`, `subarray_sum` and `plus_one` (which returns a new list).

### `algokata.numbers`

`trailing_zeroes`, `find_the_winner`, `can_win_nim`, `is_palindrome_number`,
`eval_rpn` and `coin_change`. `eval_rpn` supports `+`, `-`, `*` and `/`
(division truncates toward zero) and raises `ValueError` for a missing
operand or an empty expression.

### `algokata.matrix`

`rotate(matrix)` turns a square matrix a quarter turn clockwise and
`set_zeroes(matrix)` zeroes every row and column holding a zero; both work
in place.

### `algokata.strings`

`is_palindrome`, `longest_common_prefix`, `check_if_pangram`, `is_valid`,
`is_isomorphic`, `is_anagram`, `str_str`, `length_of_longest_substring`,
`can_construct`, `is_subsequence`, `group_anagrams`, `length_of_last_word`
and `convert` (zigzag conversion; raises `ValueError` for fewer than one
row).

## Example

```python
from algokata.linked_list import build_list, reverse_list, to_values
from algokata.sequences import summary_ranges
from algokata.numbers import eval_rpn

to_values(reverse_list(build_list([1, 2, 3])))   # [3, 2, 1]
summary_ranges([0, 1, 2, 4, 5, 7])               # ['0->2', '4->5', '7']
eval_rpn(["2", "1", "+", "3", "*"])              # 9
```

## What it does not do

This is a library only: it has no command-line program, and it does not
read problems from files or input. Call the functions from your own code.