# dsakit

A small, dependency-free collection of classic data structures and
algorithms in plain Python 3.10+.

Functions take ordinary iterables and return new lists rather than
changing their input. Errors are raised as Python exceptions:
`IndexError` for bad positions and empty containers, `OverflowError`
when a fixed-capacity container is full, `ValueError` for invalid
arguments, and `dsakit.graphs.CycleError` (a `ValueError`) when a
topological order is asked of a cyclic graph.

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.sorting` | `bubble_sort`, `selection_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `counting_sort`, `radix_sort`, `bucket_sort`; `merge` of two sorted sequences; `push_zeros_to_end` |
| `dsakit.arrays` | `binary_search`, `linear_search` (both return an index or `None`), `delete_at`, `insert_at`, `concatenate`, `common_elements` |
| `dsakit.singly` | `SinglyLinkedList`: `push_front`, `push_back`, 1-based `insert_at` / `delete_at`, `remove`, `dedupe_sorted`, `dedupe`, `sort`, `from_middle` |
| `dsakit.circular` | `CircularLinkedList`: `insert_after`, `delete`; iteration starts at the tail |
| `dsakit.doubly` | `DoublyLinkedList`: `push_front`, `push_back`, 1-based `insert_at` / `delete_at`; iterable forwards and with `reversed()` |
| `dsakit.ring` | fixed-capacity `ArrayDeque`, `CircularQueue` (default capacity 1000) and `ArrayStack` |
| `dsakit.adapters` | `TwoStackQueue`, `QueueStack`, `reverse_queue`, `reverse_queue_by_rotation`, `next_higher_peaks`, `run_queries` |
| `dsakit.graphs` | `build_adjacency`, `build_weighted_adjacency`, `format_adjacency`, `bfs`, `bfs_all`, `dfs`, `dfs_all`, `shortest_path`, `dijkstra`, `greedy_chromatic_number`, `traversal_chromatic_number`, `topological_sort_dfs`, `topological_sort_kahn`, `CycleError` |
| `dsakit.expressions` | `evaluate_postfix`, `precedence`, `infix_to_postfix`, `infix_to_prefix`, `is_balanced`, `is_palindrome`, `backspace_equal`, `unique_descending`, `reverse_string`, `convex_hull` over `Point` |
| `dsakit.strings` | `substring`, `delete_range` (1-based positions), `find_pattern`, `merge`, `length`, `latin_plural` |
| `dsakit.recursion` | `josephus`, `plane_regions`, `hanoi_moves`, `collatz_sequence`, `even_indices_reversed` |
| `dsakit.problems` | short sorting- and counting-based puzzles such as `running_medians`, `can_defeat_dragons`, `min_coins_to_take`, `find_triple` |

## Examples

```python
from dsakit.expressions import evaluate_postfix, infix_to_postfix
from dsakit.recursion import josephus, plane_regions
from dsakit.strings import find_pattern

infix_to_postfix("a+b*c")        # 'abc*+'
evaluate_postfix("23+")          # 5
josephus(5)                      # 3
plane_regions(3)                 # 7
find_pattern("ABABCABAB", "ABABDABACDABABCABAB")  # 10
```

Linked lists and the fixed-capacity containers behave like ordinary
Python containers:

```python
from dsakit.singly import SinglyLinkedList
from dsakit.ring import ArrayStack

items = SinglyLinkedList([10, 12, 13, 13, 15])
items.dedupe_sorted()
list(items)      # [10, 12, 13, 15]
len(items)       # 4

stack = ArrayStack(10)
stack.push(10)
stack.push(12)
stack.peek()     # 12
len(stack)       # 2
```

Graphs use vertices `0 .. n - 1` and adjacency lists built from edge pairs:

```python
from dsakit.graphs import build_adjacency, bfs, topological_sort_kahn

graph = build_adjacency(4, [(0, 1), (1, 2), (2, 3)], directed=False)
bfs(graph, 0)                                   # [0, 1, 2, 3]
topological_sort_kahn(4, [(0, 1), (1, 2), (2, 3)])  # [0, 1, 2, 3]
```

## What it does not do

`dsakit` is a library only. It installs no command-line program and
reads nothing from standard input; every operation is a function or
method call that takes its data as arguments and returns its result.

The package needs nothing beyond the Python standard library. Tests run
with `pytest` (install the `test` extra).