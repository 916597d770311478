# dsakit

Classic data structures and algorithms in plain Python: modular
arithmetic, bit manipulation, merge sort, linked lists, an ordered set with
order statistics, tries, range-query trees, backtracking searches, substring
search, dynamic programming, monotonic stacks, graph algorithms and binary
trees.

## Installation

```
pip install .
```

The only runtime dependency is `sortedcontainers`. To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.numbers` | `mod_pow`, `mod_add`, `mod_sub`, `mod_mul`, `mod_div`, `mod_inv`, `binary_mul`, `large_pow`, `crt`, `factorial_mod`, `divisor_count`, `is_prime`, `log_ceil`; the default modulus is `MOD = 1_000_000_007` |
| `dsakit.bits` | `to_binary`, `is_odd`, `is_power_of_two`, `is_bit_set`, `set_bit`, `unset_bit`, `toggle_bit`, `popcount`, `halve`, `double`, `to_lower`, `to_upper`, `clear_lsb`, `clear_msb`, `availability_mask`, `best_worker_pair` (returns a `WorkerPair`) |
| `dsakit.sorting` | `merge`, `merge_sort` (both sort in place) |
| `dsakit.linked_list` | `ListNode`, `LinkedList`, and node-chain helpers `from_iterable`, `to_list`, `insert_at_head`, `insert_at_tail`, `delete_value`, `contains`, `reverse_iterative`, `reverse_recursive`, `reverse_k` |
| `dsakit.ordered_set` | `OrderedSet` with `add`, `discard`, `find_by_order`, `order_of_key` |
| `dsakit.trie` | `Trie` (lowercase `a`–`z` only) and `MapTrie` (any characters) |
| `dsakit.range_query` | `SparseTable` (range minimum), `SegmentTree` (range sum, `point_update`, lazy `range_update`) |
| `dsakit.backtracking` | `stair_paths`, `subset_sums`, `subsets`, `unique_subsets`, `permutations`, `solve_n_queens`, `solve_sudoku`, `rat_in_maze_paths` |
| `dsakit.string_search` | `lps_array`, `longest_prefix_suffix`, `kmp_find`, `z_array`, `z_find`, `rabin_karp_hash`, `rabin_karp_find` |
| `dsakit.sequences` | `find_duplicate`, `length_of_lis`, `length_of_lis_fast`, `longest_increasing_subsequence`, `lis_tails`, `count_lis`, `longest_common_subsequence`, `matrix_chain_order`, `next_greater_index`, `prev_greater_index`, `next_smaller_index`, `prev_smaller_index`, `span_counts_greater`, `span_counts_smaller` |
| `dsakit.graph_traversal` | `build_undirected`, `build_directed`, `dfs_recursive`, `dfs_iterative`, `bfs`, `has_cycle_undirected_dfs`, `has_cycle_undirected_bfs`, `has_cycle_directed_dfs`, `has_cycle_directed_bfs`, `topo_sort_dfs`, `topo_sort_kahn` |
| `dsakit.shortest_paths` | `shortest_path_unit`, `shortest_path_dag`, `dijkstra`, `dijkstra_path`, `dijkstra_set`, `bellman_ford`, `floyd_warshall`, `NegativeCycleError`, `INF` |
| `dsakit.dsu` | `DisjointSet` with `find`, `union`, `union_by_rank` |
| `dsakit.spanning` | `prim_parents`, `kruskal`, `bridges`, `articulation_points`, `count_scc` |
| `dsakit.binary_tree` | `TreeNode`, `preorder`, `inorder`, `postorder`, `build_from_preorder_tokens`, `build_from_pre_in`, `build_from_post_in`, `height`, `is_balanced`, `diameter`, `max_path_sum`, `is_valid_bst` |
| `dsakit.tree_traversal` | `preorder_iterative`, `inorder_iterative`, `postorder_iterative`, `postorder_one_stack`, `level_order`, `build_level_order`, `tree_to_graph`, `morris_inorder`, `morris_preorder` |

## Conventions

- Graphs are lists of adjacency lists indexed by node number. Weighted
  graphs hold `(neighbour, weight)` pairs; edge lists hold
  `(u, v)` or `(u, v, weight)` tuples.
- Shortest-path functions report unreachable nodes with the distance
  `INF = 10**9`. `bellman_ford` raises `NegativeCycleError` (a
  `ValueError`) when a negative cycle can be reached from the source.
- `kruskal` raises `ValueError` when the graph is not connected.
- `DisjointSet(n)` covers the elements `0` to `n` inclusive, so both 0- and
  1-based labels fit; `len()` starts at `n` and drops by one per merge.
- Serialized trees (`build_from_preorder_tokens`, `build_level_order`) use
  `-1` for a missing child.
- `LinkedList.get` raises `IndexError` for a bad index, while
  `add_at_index` and `delete_at_index` ignore out-of-range indices.
  `delete_value` raises `ValueError` when the value is absent, and
  `Trie.erase` / `MapTrie.erase` raise `KeyError` for a word not stored.
- Range queries take inclusive `[left, right]` bounds and raise
  `IndexError` when they fall outside the data.

## Examples

```python
from dsakit.numbers import mod_pow, crt
from dsakit.ordered_set import OrderedSet
from dsakit.trie import Trie
from dsakit.range_query import SegmentTree, SparseTable
from dsakit.string_search import kmp_find
from dsakit.backtracking import solve_n_queens
from dsakit.graph_traversal import build_undirected, bfs
from dsakit.shortest_paths import dijkstra
from dsakit.binary_tree import build_from_pre_in, postorder

mod_pow(2, 10)                        # 1024
crt([2, 3, 2], [3, 5, 7])             # 23

s = OrderedSet([1, 10, 2, 7, 2])
list(s)                               # [1, 2, 7, 10]
s.find_by_order(3)                    # 10
s.order_of_key(7)                     # 2

trie = Trie()
for word in ("apple", "apple", "app"):
    trie.insert(word)
trie.count_words_equal_to("apple")    # 2
trie.count_words_starting_with("app") # 3

tree = SegmentTree([1, 2, 3, 4, 5])
tree.query(1, 3)                      # 9
tree.range_update(0, 4, 1)
tree.query(0, 4)                      # 20
SparseTable([5, 2, 4, 1, 3]).query(0, 2)  # 2

kmp_find("sadbutsad", "sad")          # 0
solve_n_queens(4)                     # [['.Q..', '...Q', 'Q...', '..Q.'], ['..Q.', 'Q...', '...Q', '.Q..']]

adj = build_undirected(4, [(0, 1), (1, 2), (2, 3)])
bfs(adj)                              # [0, 1, 2, 3]

weighted = [[(1, 4), (2, 1)], [(3, 1)], [(1, 2), (3, 5)], []]
dijkstra(weighted, 0)                 # [0, 3, 1, 4]

root = build_from_pre_in([1, 2, 4, 3, 5], [4, 2, 1, 5, 3])
postorder(root)                       # [4, 2, 5, 3, 1]
```

## What it does not do

`dsakit` is a library only. It has no command-line program and reads
nothing from standard input: trees, graphs and worker availability are
passed in as Python values rather than typed in interactively.