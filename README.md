# algodrills

Classic interview algorithms and data structures in plain Python, with no
runtime dependencies. Every function takes ordinary Python values (lists,
tuples, strings, `deque`s, tree and list nodes) and returns its answer;
nothing is printed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algodrills.matrix` | `search_sorted_matrix` (returns `(row, col)` or `None`), `spiral_order` |
| `algodrills.arrays` | `max_profit`, `max_profit_brute_force`, `max_water`, `max_water_brute_force`, `kadane`, `max_subarray_sum_brute_force`, `max_subarray_sum_quadratic`, `majority_element`, `pair_sum`, `power`, `product_except_self`, `product_except_self_compact`, `trapped_water` |
| `algodrills.backtracking` | `grid_paths`, `count_grid_paths`, `is_safe_queen`, `n_queens`, `permutations`, `subsets`, `is_valid_placement`, `solve_sudoku`, `sudoku_solvable` |
| `algodrills.binary_tree` | `TreeNode`, `build_tree` (preorder list with `-1` for a missing child), `level_order`, `levels`, `preorder`, `inorder`, `postorder`, `height`, `count_nodes`, `sum_nodes`, `diameter`, `diameter_fast`, `find_path`, `kth_ancestor`, `kth_level`, `lowest_common_ancestor`, `lowest_common_ancestor_fast`, `node_distance`, `min_distance`, `is_identical`, `is_subtree`, `top_view`, `to_sum_tree` |
| `algodrills.bst` | `insert`, `build_bst`, `leftmost`, `delete`, `search`, `values_in_range`, `root_to_leaf_paths`, `sorted_to_bst`, `is_valid_bst`, `largest_bst_size`, `largest_bst_sum` |
| `algodrills.binary_search` | `aggressive_cows`, `allocate_books`, `painters_partition`, `peak_index`, `binary_search`, `find_rotation_point`, `search_rotated`, `single_element` |
| `algodrills.greedy` | `fractional_knapsack`, `min_coins`, `job_sequencing`, `max_chain_length`, `min_absolute_diff` |
| `algodrills.hashing` | `HashTable` (string keys, separate chaining, doubles its buckets when it holds more entries than buckets), `count_subarrays_with_sum` |
| `algodrills.heap` | `MaxHeap` (`push`, `pop`, `peek`, `len`), `heap_sort`, `min_rope_cost`, `Car`, `nearest_cars`, `rank_by_score`, `sliding_window_max` |
| `algodrills.queues` | `interleave`, which rearranges a `deque` in place |
| `algodrills.tries` | `Trie` (`insert`, `search`, `starts_with`, `in`), `shortest_unique_prefixes`, `longest_word_with_all_prefixes`, `word_break` |
| `algodrills.linked_list` | `ListNode`, `from_iterable`, `to_list`, `has_cycle`, `remove_cycle`, `reverse`, `reverse_between`, `reverse_k_group`, `reorder`, `merge_sorted`, `merge_sort` |
| `algodrills.stacks` | `is_valid_parentheses`, `has_duplicate_parentheses`, `nearest_smaller_left`, `nearest_smaller_right`, `largest_rectangle`, `next_greater`, `push_at_bottom`, `stock_span` |

Searches that find nothing return `None` rather than a sentinel index.
Empty input where an answer is undefined (for example `kadane([])`) raises
`ValueError`; `HashTable.search` and `HashTable.remove` raise `KeyError` for
a missing key, and `MaxHeap.pop` / `MaxHeap.peek` raise `IndexError` on an
empty heap. The backtracking searches (`grid_paths`, `n_queens`,
`permutations`, `subsets`, `solve_sudoku`) are generators.

## Examples

```python
from algodrills.arrays import kadane, trapped_water
from algodrills.matrix import search_sorted_matrix, spiral_order

kadane([3, -4, 5, 4, -1, 7, -8])                          # 15
trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])       # 6

grid = [[10, 20, 30, 40], [15, 25, 35, 45], [27, 29, 37, 48], [32, 33, 39, 50]]
search_sorted_matrix(grid, 29)                             # (2, 1)
search_sorted_matrix(grid, 34)                             # None
spiral_order([[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16]])
# [1, 2, 3, 4, 8, 12, 16, 15, 14, 13, 9, 5, 6, 7, 11, 10]
```

```python
from algodrills.binary_tree import build_tree, diameter, level_order
from algodrills.tries import word_break

tree = build_tree([1, 2, 4, -1, -1, 5, -1, -1, 3, -1, 6, -1, -1])
level_order(tree)                                          # [1, 2, 3, 4, 5, 6]
diameter(tree)                                             # 5 (nodes on the longest path)

word_break(["i", "like", "sam", "samsung", "mobile", "ice"], "ilikesamsung")  # True
```

```python
from algodrills.hashing import HashTable
from algodrills.heap import MaxHeap

table = HashTable(5)
table.insert("maths", 25)
table.search("maths")     # 25
"maths" in table          # True

heap = MaxHeap().push(50).push(10).push(100).push(40)
[heap.pop() for _ in range(len(heap))]   # [100, 50, 40, 10]
```

## What this package does not do

It is a library only: there is no command-line tool, and no function prints
or draws its results. `spiral_order` walks only complete rings, so a leftover
middle row, column or cell of a non-square or odd-sized matrix is not
included.