# algokit

A small collection of classic algorithms written as plain Python functions,
with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

- `algokit.searching`: `linear_search`, `binary_search`, `search_insert`,
  `search_rotated`, `search_rotated_recursive` (both return an index or -1),
  and `search_rotated_with_duplicates` (returns a bool).
- `algokit.arrays`: `concatenate`, `max_area`, `maximum_wealth`,
  `contains_duplicate`, `distinct_values`, `count_distinct`, `find_max`,
  `pascal_triangle`, `can_jump`, `min_jumps`, `longest_zero_sum_subarray`,
  `majority_element`, `max_product`, `max_profit`, `max_subarray`,
  `running_sum`, `single_number`, `subarray_sum_count`, `two_sum`,
  `two_sum_sorted`, `all_occurrences`, `next_greater_elements`, `stock_span`,
  `merge_intervals`. `find_max` and `max_subarray` raise `ValueError` on an
  empty sequence; `majority_element` returns -1 when no value holds a
  majority.
- `algokit.inplace`: list algorithms that modify their argument:
  `merge_sorted`, `remove_duplicates`, `remove_duplicates_at_most_twice`,
  `remove_element` (these three return the length kept at the front),
  `reverse_in_place`, `merge_sort`.
- `algokit.strings`: `add_binary`, `is_anagram`, `count_substrings`,
  `is_valid_brackets`, `is_alnum_palindrome`, `length_of_last_word`,
  `reverse_string`.
- `algokit.numbers`: `decimal_to_binary`, `is_palindrome_number`, `is_prime`,
  `number_of_steps`.
- `algokit.linked_list`: `ListNode`, `LinkedList` (with `push_front`,
  `push_back`, `format`, and iteration over its values), `from_values`,
  `to_values`, `remove_elements`, `has_cycle`, `get_intersection_node`,
  `middle_node`, `remove_cycle` (returns whether a cycle was broken),
  `remove_nth_from_end` (raises `ValueError` when `n` is out of range).
- `algokit.trees`: `TreeNode`, `build_tree` (from a preorder listing with -1
  for an empty child), `height`, `diameter_naive`, `diameter_and_height`,
  `count_nodes`, `max_depth`, `min_depth`, `is_identical`, `is_subtree`.
- `algokit.stack`: a `Stack` with `push`, `pop` (returns the removed value),
  `top` and `is_empty`, where `pop` and `top` raise `IndexError` when the stack
  is empty; and `push_at_bottom`.

## Examples

```python
from algokit.searching import binary_search
from algokit.arrays import merge_intervals, stock_span
from algokit.strings import add_binary
from algokit.linked_list import LinkedList, from_values, middle_node, to_values
from algokit.trees import build_tree, diameter_and_height

binary_search([1, 2, 3, 4, 5, 6, 7], 5)        # 4
merge_intervals([[1, 3], [2, 6], [8, 10]])     # [[1, 6], [8, 10]]
stock_span([100, 80, 60, 70, 60, 85, 100])     # [1, 1, 1, 2, 1, 5, 7]
add_binary("11", "1")                          # "100"

head = from_values([1, 2, 3, 4, 5])
to_values(middle_node(head))                   # [3, 4, 5]

ll = LinkedList()
ll.push_back(1)
ll.push_back(2)
ll.format()                                    # "1->2->NULL"

# Preorder values, -1 marks an empty child.
root = build_tree([1, 2, 4, -1, -1, 5, -1, -1, 3, -1, 6, -1, -1])
diameter_and_height(root)                      # (5, 3)
```

## What it does not do

algokit is a library only: it installs no command-line program, and its
functions print nothing. Results are returned to the caller.