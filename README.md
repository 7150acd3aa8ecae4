# cpkit

A small toolbox of algorithms and data structures that come up again and
again in competitive programming. It is plain Python and needs no
third-party libraries.

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

| Module | Contents |
| --- | --- |
| `cpkit.sos` | `SubsetSums`, a table over bit masks with in-place sum-over-subsets and sum-over-supersets transforms and their inverses; `mask_statistics` |
| `cpkit.combinatorics` | `Binomial`, `C(n, r)` modulo a prime (default `1_000_000_007`) from precomputed factorials |
| `cpkit.dsu` | `DisjointSets` with path compression and union by size |
| `cpkit.dijkstra` | `dijkstra`, with a pluggable `combine` for path cost and edge weight (addition by default) |
| `cpkit.mo` | `distinct_counts`, Mo's algorithm for the number of distinct values in ranges |
| `cpkit.numbers` | `smallest_prime_factors`, `prime_factorization`, `count_with_bit_set` |
| `cpkit.bipartite` | `explore_component`, `check_entire_graph` for two-colouring graphs |
| `cpkit.records` | `count_records`, counting elements at least as large as all before them |
| `cpkit.hashing` | `HashedString`, polynomial rolling hash with substring hashes |
| `cpkit.trie` | `Trie` over the letters `a`–`z`, with `insert`, `search` and `starts_with` |
| `cpkit.zfunc` | `z_function` and `shortest_repeating_unit` |
| `cpkit.lca` | `BinaryLiftingLCA` and `EulerTourLCA` |
| `cpkit.euler_tour` | `EulerTour`, visiting order and subtree intervals of a tree |
| `cpkit.graph` | `dfs_order` and `bfs_order` |

## Examples

```python
from cpkit.dsu import DisjointSets
from cpkit.trie import Trie
from cpkit.zfunc import shortest_repeating_unit
from cpkit.numbers import prime_factorization
from cpkit.combinatorics import Binomial

sets = DisjointSets(5)
sets.unite(0, 1)
sets.connected(0, 1)          # True

trie = Trie()
trie.insert("apple")
trie.search("apple")          # True
trie.search("app")            # False
trie.starts_with("app")       # True

shortest_repeating_unit("abcabcabc")   # "abc"
prime_factorization(360)               # [(2, 3), (3, 2), (5, 1)]

binom = Binomial(10)
binom(5, 2)                            # 10
```

Shortest paths; unreachable nodes get `math.inf`:

```python
import operator
from cpkit.dijkstra import dijkstra

adj = [[(1, 4), (2, 1)], [], [(1, 2)]]
dijkstra(3, adj, 0)                    # [0, 3, 1]
dijkstra(3, adj, 0, operator.xor)      # costs combined with XOR instead
```

Lowest common ancestors on a tree given as adjacency lists:

```python
from cpkit.lca import BinaryLiftingLCA, EulerTourLCA

adj = [[1, 2], [0, 3, 4], [0], [1], [1]]
BinaryLiftingLCA(adj, 0).lca(3, 4)    # 1
EulerTourLCA(adj, 0).lca(3, 2)        # 0
```

## Command-line tools

Several modules also work as stand-alone solvers that read whitespace-separated
input from standard input and write answers to standard output:

```
cpkit-sos          < input.txt
cpkit-dijkstra     < input.txt
cpkit-mo           < input.txt
cpkit-bipartite    < input.txt
cpkit-records      < input.txt
cpkit-euler-tour   < input.txt
```

- `cpkit-sos` reads `n` and `n` non-negative values, and prints for each
  value three counts: how many values are subsets of it, how many are
  supersets of it, and how many share a set bit with it.
- `cpkit-dijkstra` reads `n m` and `m` weighted directed edges `u v w`
  (nodes 1 to `n`), and prints the smallest path cost from node 1 to node
  `n` where costs are combined with XOR along the path, or `-1` if node `n`
  cannot be reached.
- `cpkit-mo` reads `n`, an array of `n` values, `q` and `q` 1-based
  inclusive ranges, and prints the number of distinct values in each range.
- `cpkit-bipartite` reads a number of test cases, each `n m` and `m`
  undirected 1-based edges, and prints for each the sum of the larger colour
  class over its components that have no odd cycle.
- `cpkit-records` reads a number of test cases, each `n` and `n` values, and
  prints how many elements are at least as large as everything before them.
- `cpkit-euler-tour` reads a tree as `n` and `n - 1` 1-based edges and prints
  its pre-order tour starting from node 2.