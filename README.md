# algokit

Classic algorithm exercises as plain Python functions and small classes.
It needs nothing outside the standard library.

## Install

```
pip install .
pip install ".[test]"   # adds pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.linked` | `ListNode` (with `from_values` and `values`), `merge_two_lists`, `merge_two_lists_iterative`, `merge_k_lists`, `merge_k_lists_divide`, `remove_nth_from_end` (and `_v2`, `_v3`), `reverse_k_group`, `get_intersection_node`, `get_kth_from_end` (and `_v2`) |
| `algokit.stacks` | `MinStack`, `FastMinStack`, `TwoStackQueue`, `RecentCounter` |
| `algokit.medians` | running medians with `LinkedMedianFinder` and `HeapMedianFinder` |
| `algokit.sums` | `two_sum`, `three_sum`, `three_sum_closest`, `two_sum_sorted` (and `_v2` to `_v4`, 1-based indices), `judge_square_sum`, `find_closest` (and `_v2`) |
| `algokit.search` | `search_insert`, `binary_search`, `find_peak_element`, `find_peaks`, `find_indices`, `find_median_sorted_arrays`, `first_bad_version` |
| `algokit.subarrays` | `max_sub_array` (and `_v2`, `_v3`), `max_product` (and `_v2`), `num_subarray_product_less_than_k` (and `_v2`), `longest_consecutive`, `trap` |
| `algokit.sorting` | `bubble_sort`, `select_sort`, `insert_sort`, `quick_sort`, `merge_sort` |
| `algokit.inplace` | `remove_duplicates`, `sort_colors`, `rotate` (and `_v2`, `_v3`), `move_zeroes` (and `_v2`), `reverse_string` (and `_v2`), `sorted_squares` |
| `algokit.greedy` | `num_rescue_boats`, `find_maximized_capital`, `chalk_replacer` (and `_v2`, `_v3`), `slowest_key`, `missing_rolls`, `max_div_score`, `find_winners`, `the_maximum_achievable_x` |
| `algokit.text` | `length_of_longest_substring` (and `_v2`, `_v3`), `longest_palindrome`, `reverse_integer`, `atoi`, `is_palindrome_number`, `is_palindrome`, `compare_version`, `reverse_words` (and `_v2`), `nearest_palindromic`, `balanced_string_split` |
| `algokit.patterns` | `find_substring`, `longest_valid_parentheses`, `is_valid_parentheses`, `find_longest_word`, `is_subsequence`, `maximum_length`, `can_make_pali_queries` (and `_slow`), `di_string_match` (and `_v2`) |
| `algokit.combinatorics` | `permute`, `subsets`, `subsets_v2`, Pascal's triangle through `generate` |
| `algokit.dynamic` | `climb_stairs` (and `_v2`, `_v3`), `coin_change`, `coin_change_greedy`, `coin_change_v3`, `can_partition` (and `_v2`), `fib`, `fib2` |
| `algokit.sudoku` | `is_valid_sudoku`, `solve_sudoku` for 9x9 boards of `'1'`-`'9'` and `'.'` |
| `algokit.counting` | `max_points`, `hamming_weight`, `count_digit_one`, `rand10` |
| `algokit.trees` | `TreeNode`, `inorder_successor` |

Several problems come in more than one version, such as `_v2` and `_v3`. Each
version keeps its own approach, so the results can be compared; a few of them
(for example `coin_change_greedy` and `max_product_v2`) are not always optimal.

The sorting functions, the `algokit.inplace` functions and `solve_sudoku`
change the list they are given. The linked-list functions reuse and relink the
nodes they are given. Invalid input such as an empty sequence where one is
required raises `ValueError`.

## Examples

```python
from algokit.sums import two_sum, three_sum
from algokit.linked import ListNode, merge_k_lists
from algokit.sorting import merge_sort
from algokit.stacks import MinStack

two_sum([1, 3, 5, 6, 8], 9)          # [1, 3]
three_sum([-1, 0, 1, 2, -1, -4])     # [[-1, -1, 2], [-1, 0, 1]]

merged = merge_k_lists([
    ListNode.from_values([1, 4, 5]),
    ListNode.from_values([1, 3, 4]),
    ListNode.from_values([2, 6]),
])
merged.values()                      # [1, 1, 2, 3, 4, 4, 5, 6]

merge_sort([4, 2, 1, 3])             # [1, 2, 3, 4]

stack = MinStack()
stack.push(3)
stack.push(1)
stack.get_min()                      # 1
```

Functions that need an outside source take it as an argument:

```python
import random

from algokit.search import first_bad_version
from algokit.counting import rand10

first_bad_version(10, lambda version: version >= 4)   # 4
rand10(lambda: random.randint(1, 7))                  # a value from 1 to 10
```

## What it does not do

This is a library only: it has no command-line tool and keeps no state on
disk. Call the functions from your own code.

## Tests

```
pytest
```