# algokit

A study collection of classic algorithms and data structures in plain Python:
sorting and searching routines, sequential and linked containers, a hash table
with linear probing, a red-black tree, a handful of divide-and-conquer and
dynamic-programming problems, and small examples of common design patterns.

It has no runtime dependencies.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

### Sorting — `algokit.sorting`

`bubble_sort`, `bubble_sort_early_exit`, `selection_sort`, `insertion_sort`,
`shell_sort`, `merge_sort` (bottom-up), `merge_sort_recursive`, `quick_sort`
(first element as pivot), `quick_sort_last_pivot`, `quick_sort_iterative`,
`heap_sort`, `counting_sort`, `bucket_sort`, `radix_sort` and the helper
`max_digits`.

Every sort takes an iterable and returns a new sorted list; the input is left
untouched.

- `counting_sort` and `radix_sort` work on non-negative integers and raise
  `ValueError` for a negative one.
- `bucket_sort` uses ten buckets of width ten and accepts integers from -9 to
  99; any other value raises `ValueError`.
- `max_digits` returns the number of decimal digits of the largest value and
  raises `ValueError` for an empty input.

```python
from algokit.sorting import heap_sort

heap_sort([3, 1, 2])   # [1, 2, 3]
```

### Searching — `algokit.searching`

`sequential_search`, `sentinel_search`, `binary_search`,
`binary_search_recursive`, `interpolation_search` and `fibonacci_search`
(with `fibonacci_numbers` for the table it uses). Each returns the index of a
matching element, or `None` when the target is absent. The binary,
interpolation and Fibonacci searches need a sorted sequence;
`fibonacci_search` raises `ValueError` for a sequence longer than 4180
elements.

```python
from algokit.searching import binary_search

binary_search([1, 3, 5, 7], 5)   # 2
binary_search([1, 3, 5, 7], 4)   # None
```

### Data structures

- `algokit.binary_tree` — `TreeNode` (with `data`, `left`, `right`) and the
  functions `leaf_count`, `depth`, `levels` (yields `(data, level)` pairs in
  pre-order, the root at level 1), `break_tree`, `replace_left`,
  `replace_right` and the binary-search-tree lookup `bst_search`, which
  returns `(True, node)` on a match and otherwise `(False, last_node_visited)`.
- `algokit.linked_list` — `LinkedQueue` and `HeadedLinkedQueue` (the latter
  keeps an empty head node), both FIFO queues on singly linked nodes with
  `enqueue`, `dequeue`, iteration and `len()`. Dequeuing an empty queue
  raises `IndexError`.
- `algokit.seq_list` — `SeqList(size, increment)`, a fixed-capacity list:
  `append` raises `OverflowError` when full, `get` takes a 1-based position,
  `search` returns a 0-based index or `None`.
- `algokit.seq_stack` — `SeqStack(size, increment)`, a stack whose
  `capacity` grows by `increment` when a push finds it full; `pop` and
  `peek` raise `IndexError` on an empty stack.
- `algokit.hash_table` — `HashTable` of integer keys with open addressing
  and linear probing, hashed by `hash_key` (`3 * key % size`). Table sizes
  run 11, 31, 61, 127, 251, 503. When an insert probes through too many
  collisions the table is rebuilt at the next size and that insert returns
  `False` without storing the key; past the largest size a rebuild raises
  `OverflowError`. `search` returns a `SearchResult` (`found`, `position`,
  `collisions`); `format` renders the slots' keys and tags.
- `algokit.red_black_tree` — `RedBlackTree` with `insert`, `delete` (returns
  whether a value was removed), `inorder` and in-order iteration. Equal values
  may be stored more than once; `delete` removes one occurrence.

### Problems

- `algokit.chessboard` — `cover_board(k, row, column)` tiles a 2^k × 2^k
  board with numbered L-shaped trominoes around one special square, which
  holds 0.
- `algokit.knapsack` — the 0/1 knapsack problem: `knapsack_iterative`,
  `knapsack_recursive`, `knapsack_table` and `format_table`.
- `algokit.round_robin` — `match_table(k)` builds a round-robin schedule for
  2^k players: row i starts with player i+1 followed by that player's
  opponent on each day.
- `algokit.tubing` — `optimal_pipeline` places a main pipeline at the median
  of the wells' y coordinates; the answer is a `PipelinePlacement` with
  `low`, `high` and `total_distance`.
- `algokit.neumann` — the number of cells in a von Neumann neighbourhood of
  order n, by closed formula (`neumann_formula`) and by recurrence
  (`neumann_recursive`).

```python
from algokit.neumann import neumann_formula, neumann_recursive

neumann_formula(2)     # 13
neumann_recursive(2)   # 13
```

### Design patterns — `algokit.patterns`

- `singleton` — `Singleton`, reached only through `Singleton.instance()`;
  calling the class directly raises `TypeError`.
- `abstract_factory` — car and bike factories for three makes, chosen with
  `create_factory` and `FactoryType`.
- `adapter` — `PowerAdapter` lets an `OwnCharger` serve a `RussiaSocket`.
- `bridge` — `PullChainSwitch` and `TwoPositionSwitch` driving a `Light` or a
  `Fan`.
- `observer` — `ConcreteSubject` notifying `ConcreteObserver`s of a price.

Each module has a `demo()` function that walks through the pattern and
prints what happens.

## Command-line tools

```
algokit-chessboard
algokit-knapsack
algokit-round-robin
algokit-tubing
algokit-neumann
algokit-patterns
```

The problem tools ask for their input and print the result. Input is read
from the command-line arguments first and then from standard input, so
`algokit-round-robin 2` or `echo "2 1 1" | algokit-chessboard` works without
prompting. Invalid input prints an error on standard error and exits with
status 1. `algokit-knapsack` asks for the number of items, the capacity, each
item's weight and value, and then `1` (iterative, also printing the table) or
`2` (recursive). `algokit-neumann` prints the count by both methods.

`algokit-patterns` runs every design-pattern demo in turn.