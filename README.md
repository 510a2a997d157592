# algokit

A small collection of classic algorithm routines written as plain Python
functions. It uses only the standard library.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Modules

### `algokit.two_pointers`

- `three_sum(nums)`: the distinct triplets that sum to zero. Each triplet is in
  ascending order. The input is not modified.
- `max_area(height)`: the largest water area held between two of the lines.
- `sorted_squares(nums)`: the squares of an ascending sequence, in ascending order.
- `trap(height)`: the rain water trapped by an elevation map.
- `two_sum_sorted(nums, target)`: the 1-based positions of two entries of an
  ascending sequence that add up to `target`, or `[]` if no two entries do.
- `is_palindrome(s)`: a palindrome test that looks only at ASCII letters and
  digits and ignores case.

### `algokit.heaps`

- `ListNode(val=0, next=None)`: a node of a singly linked list. Iterating over
  a node yields the values from that node to the end of the list.
- `linked_list(values)`: builds a list and returns its head, or `None` when
  there are no values.
- `k_closest(points, k)`: the `k` points nearest the origin, nearest first.
  Ties are broken by coordinates. A negative `k` returns every point.
- `find_kth_largest(nums, k)`: the `k`-th largest value. It returns `0` for an
  empty input and raises `ValueError` when `k` is out of range.
- `kth_smallest_in_matrix(matrix, k)`: the entry at zero-based rank `k` in
  ascending order, that is, the value that follows the `k` smallest entries.
  It raises `IndexError` for an empty matrix or a rank out of range.
- `last_stone_weight(stones)`: the weight of the last stone left, or `0`.
- `merge_k_lists(lists)`: a new linked list that holds every value in
  ascending order. `None` entries are skipped.
- `find_relative_ranks(score)`: `"Gold Medal"`, `"Silver Medal"` and
  `"Bronze Medal"` for the top three scores, and the placing as a string for
  the rest. Of two equal scores, the later athlete is ranked first.
- `max_sliding_window(nums, k)`: the maximum of each window of `k` values.
  It raises `ValueError` when `k` is less than 1.
- `top_k_frequent(nums, k)`: the `k` most frequent values, most frequent
  first. Of two equally frequent values, the larger comes first. It raises
  `ValueError` when `k` is out of range.

### `algokit.stack`

- `cal_points(operations)`: the baseball game total. `"C"` cancels the last
  score, `"D"` doubles it, `"+"` adds the last two, and any other entry is an
  integer score.
- `daily_temperatures(temperatures)`: for each day, the number of days until a
  warmer one, or `0` if none comes.
- `eval_rpn(tokens)`: evaluates an integer expression in reverse Polish
  notation. A token whose first character is `*`, `/`, `+` or `-` is treated
  as an operator. Division truncates toward zero.
- `is_valid_brackets(s)`: whether `s` consists only of properly nested
  `()`, `[]` and `{}`.

### `algokit.trees`

- `TreeNode(val=0, left=None, right=None)`: a binary tree node.
- `build_tree(values)`: builds a tree from a level-order list in which `None`
  marks a missing child.
- `in_order(root)`: a generator of values in in-order sequence.
- `level_order(root)`: the values level by level, left to right.
- `kth_smallest(root, k)`: the `k`-th in-order value, counting from 1. It
  raises `IndexError` when `k` is out of range.
- `get_minimum_difference(root)`: the smallest difference between in-order
  neighbours. A tree with fewer than two nodes gives `NO_DIFFERENCE`
  (`2**31 - 1`).
- `is_valid_bst(root)`: whether the in-order values never decrease.
- `lowest_common_ancestor(root, p, q)`: the lowest node of a search tree that
  is `p` or `q`, or that has both beneath it. It raises `ValueError` when the
  nodes cannot be found.
- `is_balanced(root)`, `diameter_of_binary_tree(root)` (counted in edges),
  `max_depth(root)` (counted in nodes), `has_path_sum(root, target_sum)`.
- `invert_tree(root)`: mirrors the tree in place and returns its root.
- `is_same_tree(p, q)`, `is_subtree(root, sub_root)`, and `is_symmetric(root)`.
  An empty tree counts as symmetric.

## Example

```python
from algokit.two_pointers import three_sum
from algokit.trees import build_tree, level_order

three_sum([-1, 0, 1, 2, -1, -4])       # [[-1, -1, 2], [-1, 0, 1]]
level_order(build_tree([3, 9, 20, None, None, 15, 7]))  # [[3], [9, 20], [15, 7]]
```

## Scope

algokit is a library only. It has no command-line tool, and it does not read
or write files.