# algodrills

A collection of classic algorithm exercises: array fundamentals, array
problems, binary-search and two-pointer problems, and basic graph handling.
Each one is a plain Python function or a small class, usable directly or as a
worked example. The package has no third-party dependencies.

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

- `algodrills.basics`
  - `format_array(values)`: renders values with a space after each one.
  - `zero_padded(values, length)`: the given values followed by zeros up to
    `length`; raises `ValueError` if the values do not fit or the length is
    negative.
  - `update_first(values)`: sets the first element to 120 in place and returns
    the same sequence; raises `IndexError` on an empty sequence.
- `algodrills.graph`
  - `Graph`: an adjacency list (`Graph.adj`) with `add_edge(u, v, directed)`
    and `format_edges()`, which renders each node as `node->n1 , n2 , ` on its
    own line.
  - `bfs(vertex_count, edges)`: breadth-first order of an undirected graph,
    starting each component from vertices `0 .. vertex_count-1` in turn.
  - `main(argv=None)`: the `algodrills-bfs` command described below.
- `algodrills.array_problems`: `pascal_row`, `unique_occurrences`,
  `max_profit`, `single_number`, `majority_element`, `two_sum`,
  `contains_duplicate`, `contains_nearby_duplicate`, `missing_number`,
  `remove_duplicates`, `remove_element`, `move_zeroes`, `find_duplicate`,
  `reverse_string`, `intersection`, `intersect`, `search_insert`, `third_max`,
  `find_disappeared_numbers`, `find_max_consecutive_ones`,
  `find_poisoned_duration`, `judge_square_sum`, `plus_one`, and the
  `NumArray` class whose `sum_range(left, right)` sums an inclusive index range.
  `remove_duplicates`, `remove_element`, `move_zeroes` and `reverse_string`
  change the list they are given in place.
- `algodrills.searching`: `binary_search`, `search_range`, `search_rotated`,
  `search_rotated_with_duplicates`, `pivot_index`, `find_min`,
  `find_peak_element`, `peak_index_in_mountain_array`, `ship_within_days`,
  `allocate_books`, `smallest_divisor`, `distribute_candies`,
  `count_negatives`, `find_kth_positive`, `special_array`,
  `min_subarray_len`, `answer_queries`, `maximum_count`, `get_common`,
  `count_pairs`, `is_perfect_square`, and `guess_number(n, guess)`, which
  takes the guessing callback as an argument (it answers -1 for too high,
  1 for too low, 0 for right).

Functions that have no answer for empty input, such as `find_min`,
`third_max` or `plus_one`, raise `ValueError` instead.

## Example

```python
from algodrills.array_problems import two_sum, pascal_row
from algodrills.searching import binary_search, guess_number
from algodrills.graph import bfs

two_sum([2, 7, 11, 15], 9)            # [0, 1]
pascal_row(3)                         # [1, 3, 3, 1]
binary_search([-1, 0, 3, 5, 9], 9)    # 4
bfs(4, [(0, 1), (0, 3), (1, 2)])      # [0, 1, 3, 2]

picked = 6
guess_number(10, lambda x: (x < picked) - (x > picked))   # 6
```

## Command line

`algodrills-bfs` reads whitespace-separated integers from standard input: the
number of nodes, the number of edges, then one pair of node numbers per edge.
It prints the prompts `Enter the number of nodes : ` and
`Enter the number of edges : `, followed by `BFS Traversal : ` and the
breadth-first order of the undirected graph:

```
printf '4 3\n0 1\n0 3\n1 2\n' | algodrills-bfs
```

With `--adjacency` it prints the adjacency list of the graph instead, one
`node->neighbours` line per node.

If the input runs out or holds something that is not an integer, the command
prints an error to standard error and exits with status 1.

## Limits

The command only reads standard input in one go; it does not prompt and wait
interactively, read graphs from files, or offer commands for the array and
searching exercises. Those are available only as Python functions.