# algonote

A compact collection of algorithms and data structures commonly used in
competitive programming. It is pure Python and has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Contents

| Module | What it offers |
| --- | --- |
| `algonote.segment_tree` | `LazySegmentTree` (range add, range sum) and `PersistentSegmentTree` (point assignment with range sums at any past version) |
| `algonote.strings` | `failure_function`, `kmp`, `z_function`, `lcs_length` |
| `algonote.sequences` | `lis`, `next_permutation`, `prev_permutation`, `permutations`, `combinations` |
| `algonote.geometry` | `Pos` (ordered by the angle of its `(p, q)` direction, then by `y`, then `x`), `ccw` orientation test |
| `algonote.graph` | `strongly_connected_components`, `dijkstra`, `prim`, `kruskal`, `LowestCommonAncestor`, `centroid_decomposition` |
| `algonote.dynamic_connectivity` | `OfflineDynamicConnectivity`, `QueryType`, `offline_connectivity` |
| `algonote.number_theory` | `gcd`, `lcm`, `mod_pow`, `extended_gcd`, `mod_inverse`, `crt`, `is_prime`, `pollard`, `factor`, `count_palindromes` |
| `algonote.binomial` | `binomial_mod_prime_power`, `binomial_mod` (nCr modulo any positive integer) |
| `algonote.linalg` | `gauss_jordan`, `SingularMatrixError`, `mat_mul`, `mat_pow`, `inverse_det_rank` |

## Conventions

- Segment tree ranges are zero-based and inclusive; an empty range
  (`left > right`) sums to 0. `PersistentSegmentTree` starts at version 0,
  and update versions must not decrease (an older one raises `ValueError`).
- Graphs are adjacency lists over nodes `0..n-1`. Weighted graphs hold
  `(neighbour, weight)` pairs. `dijkstra` gives `-1` for unreachable nodes;
  `prim` and `kruskal` give `-1` for a disconnected graph.
- `strongly_connected_components` returns each component sorted, in the
  order the components are completed.
- `centroid_decomposition` returns `(depth, parent)` for every node of the
  centroid tree; the first centroid has depth 0 and parent `-1`.
- `crt` returns `(0, 0)` when the system has no solution.
- `gauss_jordan` returns `(X, A^-1)` and raises `SingularMatrixError` for a
  singular matrix. `inverse_det_rank` never raises for singular input: it
  returns a determinant of 0 and `None` for the inverse.

## Examples

Range updates and range sums:

```python
from algonote.segment_tree import LazySegmentTree

tree = LazySegmentTree([1, 2, 3, 4, 5])
tree.update(1, 3, 10)      # add 10 to indices 1..3 inclusive
tree.query(0, 4)           # 45
```

Pattern search:

```python
from algonote.strings import kmp, z_function

kmp("abababa", "aba")      # [0, 2, 4]
z_function("aaaa")         # [4, 3, 2, 1]
```

Number theory:

```python
from algonote.number_theory import factor, is_prime, crt

is_prime(1_000_000_007)    # True
factor(360)                # [2, 2, 2, 3, 3, 5]
crt([2, 3], [3, 5])        # (8, 15)
```

Binomial coefficients modulo a composite:

```python
from algonote.binomial import binomial_mod

binomial_mod([(10, 3), (5, 2)], 12)   # [0, 10]
```

Shortest paths:

```python
from algonote.graph import dijkstra

adj = [[(1, 4), (2, 1)], [], [(1, 2)], []]
dijkstra(adj, 0)           # [0, 3, 1, -1]
```

Connectivity questions over a sequence of edge insertions and removals:

```python
from algonote.dynamic_connectivity import offline_connectivity

offline_connectivity(3, [(1, 0, 1), (3, 0, 1), (2, 0, 1), (3, 0, 1)])   # [True, False]
```

Matrix powers modulo a number:

```python
from algonote.linalg import mat_pow

mat_pow([[1, 1], [1, 0]], 10, 1_000_000_007)   # [[89, 55], [55, 34]]
```

## What it does not do

This is a library only. It has no command-line program and reads or writes
no files or standard streams: every function takes its input as arguments
and returns its result.