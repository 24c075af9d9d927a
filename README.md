# algoshelf

A small shelf of algorithms in plain Python: classic graph algorithms
(traversals, shortest paths, connectivity) and a set of compact solutions
to well-known array, string, numeric, linked-list and tree problems.

There are no runtime dependencies. Python 3.10 or later is required.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Graphs

Graph functions number vertices `1..n`. An adjacency structure is either a
sequence indexed by vertex (slot 0 unused) or a mapping from vertex to its
neighbours; a vertex missing from a mapping has no neighbours. For weighted
graphs each neighbour is a `(vertex, weight)` pair.

Distance lists are indexed `0..n`. Unreachable vertices get
`algoshelf.graph.traversal.INF` (`math.inf`), and their predecessor entries
are `None`.

```python
from algoshelf.graph.traversal import bfs, connected_components, is_bipartite
from algoshelf.graph.shortest_paths import dijkstra, path
from algoshelf.graph.connectivity import articulation_points, bridges

adj = {1: [2], 2: [1, 3], 3: [2], 4: []}
dist = bfs(adj, 1, 4)                    # [inf, 0, 1, 2, inf]
print(connected_components(adj, 4))      # 2
print(is_bipartite(adj, 4))              # True
print(articulation_points(adj, 4))       # {2}
print(bridges(adj, 4))                   # [(2, 3), (1, 2)]

weighted = {1: [(2, 4), (3, 1)], 2: [], 3: [(2, 1)]}
dist, pred = dijkstra(weighted, 1, 3)
print(path(pred, 1, 2))                  # [(1, 3), (3, 2)]
```

`algoshelf.graph.traversal`

- `bfs(adj, source, n)` — unweighted distances from `source`
- `bfs_01(adj, source, n)` — distances when every edge weight is 0 or 1
- `reachable(adj, start)` — the set of vertices reachable from `start`
- `connected_components(adj, n)` — number of components among `1..n`
- `has_cycle(adj, n)` — whether an undirected graph has a cycle
- `is_bipartite(adj, n)` — whether the graph can be two-coloured

`algoshelf.graph.shortest_paths`

- `bellman_ford(edges, source, n)` — `(dist, pred)` over directed
  `(u, v, w)` edges, negative weights allowed
- `has_negative_cycle(edges, source, n)` — whether a negative cycle is
  reachable from `source`
- `dijkstra(adj, source, n)` — `(dist, pred)` for non-negative weights
- `floyd_warshall(adj, n)` — all-pairs distance and predecessor matrices
- `path(pred, source, target)` and `all_pairs_path(pred, source, target)` —
  the list of `(u, v)` edges on the shortest path; both raise `ValueError`
  when `target` is not reachable

`algoshelf.graph.connectivity`

- `articulation_points(adj, n)` — set of cut vertices
- `bridges(adj, n)` — list of bridge edges, in depth-first finishing order

## Problem solutions

```python
from algoshelf.leetcode.arrays import two_sum, product_except_self
from algoshelf.leetcode.strings import roman_to_int, reverse_words
from algoshelf.leetcode.numeric import my_atoi, is_power_of_two
from algoshelf.leetcode.linked_list import ListNode, reverse_list
from algoshelf.leetcode.binary_tree import TreeNode, max_depth
from algoshelf.leetcode.recent_counter import RecentCounter

print(two_sum([2, 7, 11, 15], 9))            # [0, 1]
print(product_except_self([1, 2, 3, 4]))     # [24, 12, 8, 6]
print(roman_to_int("MCMXCIV"))               # 1994
print(reverse_words("  the sky  is blue "))  # "blue is sky the"
print(my_atoi("   -42"))                     # -42
print(is_power_of_two(16))                   # True
print(list(reverse_list(ListNode.from_iterable([1, 2, 3]))))  # [3, 2, 1]
print(max_depth(TreeNode(1, TreeNode(2), None)))               # 2

counter = RecentCounter()
counter.ping(1)                              # 1
counter.ping(3001)                           # 2
```

Modules:

- `algoshelf.leetcode.arrays` — two-pointer, sliding-window and counting
  problems: `two_sum`, `longest_ones`, `max_area`, `unique_occurrences`,
  `kids_with_candies`, `longest_subarray`, `max_operations`,
  `largest_altitude`, `find_difference`, `equal_pairs`,
  `product_except_self`, `remove_duplicates`, `remove_element`,
  `move_zeroes`, `increasing_triplet`, `compress`, `find_lhs`,
  `can_place_flowers`, `find_max_average`, `pivot_index`,
  `asteroid_collision`. `remove_duplicates`, `remove_element`,
  `move_zeroes` and `compress` rearrange the given list in place.
- `algoshelf.leetcode.strings` — `gcd_of_strings`, `roman_to_int`,
  `longest_common_prefix`, `max_vowels`, `reverse_words`,
  `merge_alternately`, `is_valid_brackets`, `largest_good_integer`,
  `remove_stars`, `str_str`, `length_of_longest_substring`,
  `reverse_vowels`, `is_subsequence`
- `algoshelf.leetcode.numeric` — `is_power_of_two`, `is_power_of_three`,
  `reverse_integer` and `my_atoi` (both bounded by the signed 32-bit
  range), `is_palindrome_number`, and `guess_number(n, guess)`, which
  binary-searches `1..n` with a caller-supplied `guess` function
- `algoshelf.leetcode.linked_list` — `ListNode` (with `from_iterable` and
  iteration over values), `remove_nth_from_end`, `add_two_numbers`,
  `reverse_list`, `delete_middle`, `merge_two_lists`, `pair_sum`,
  `swap_pairs`, `odd_even_list`
- `algoshelf.leetcode.binary_tree` — `TreeNode`, `max_depth`, `good_nodes`,
  `search_bst`, `leaf_similar`
- `algoshelf.leetcode.graphs` — `find_circle_num` (adjacency matrix),
  `can_visit_all_rooms` (key lists)
- `algoshelf.leetcode.recent_counter` — `RecentCounter`, counting pings in
  the inclusive window `[t - 3000, t]`

Invalid input raises `ValueError` where a result cannot be given: for
example an unknown Roman numeral symbol, a window length out of range in
`find_max_average`, a `*` with nothing to delete in `remove_stars`, an `n`
larger than the list in `remove_nth_from_end`, or a `guess` function that
never answers 0.

## What it does not do

algoshelf is a library only: it has no command-line tool, reads no input
files and stores nothing. Graphs are passed in as Python adjacency
structures or edge lists; there is no graph parser or file format.