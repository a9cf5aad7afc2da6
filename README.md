# kyopro90

Solvers for a set of classic competitive-programming problems. Each solver is
a plain Python function that takes its input as ordinary values (integers,
lists, tuples, strings) and returns its answer. The data structures behind
them can be used on their own.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Data structures

- `kyopro90.disjoint_set`: `UnionFind` (union by size with path compression;
  `root`, `unite`, `same`, `size`) and `WeightedUnionFind`, which also keeps
  the potential difference between members (`weight`, `merge`, `diff`).
- `kyopro90.fenwick`: `FenwickTree`, with `add` for point additions and
  `range_sum` for half-open range sums.
- `kyopro90.segment_tree`: `MaxSegmentTree` (point `update`, range-maximum
  `query`, indexing with `[]`; unset positions hold `-inf`) and
  `RangeAssignMaxTree` (lazy range assignment with range-maximum `query`;
  positions start at zero).
- `kyopro90.maxflow`: `Dinic`, a maximum-flow solver with `add_edge`,
  `max_flow` and `flows`, which yields `(frm, to, flow, capacity)` for every
  added edge.
- `kyopro90.combinatorics`: `BinomialTable`, giving binomial coefficients
  modulo 1 000 000 007.

```python
from kyopro90.disjoint_set import UnionFind
from kyopro90.fenwick import FenwickTree

uf = UnionFind(5)
uf.unite(0, 1)
uf.unite(1, 2)
assert uf.same(0, 2)
assert uf.size(0) == 3

tree = FenwickTree(8)
tree.add(3, 5)
tree.add(6, 2)
assert tree.range_sum(0, 7) == 7
```

## Problem solvers

The solvers are grouped by technique:

| Module | Contents |
| --- | --- |
| `disjoint_set` | grid connectivity queries, cheapest determining range questions, constrained sequence queries |
| `fenwick` | crossing chords, splits with a bounded number of inversions |
| `segment_tree` | stacking bricks, bounded-amount knapsack |
| `maxflow` | assigning one of eight directions by bipartite matching |
| `combinatorics` | binomial counts, subsequence counting, stair climbing, colourings, digit-length sums |
| `graphs` | tree diameter, shortest paths through each vertex, strongly connected components, bipartite colouring, tree DP, shortest paths with an unknown weight |
| `grids` | cross sums, 2-D imos and prefix sums, 0-1 BFS over turns, cycle search, 2x2 block operations |
| `searching` | binary search on the answer, two pointers, longest bitonic subsequence, medians |
| `dp` | smallest subsequence, deadline knapsack, interval DP, Grundy numbers, permutations, subset DP |
| `enumeration` | bit-mask search, meet-in-the-middle, inclusion-exclusion, equal-sum subset search |
| `geometry` | largest angle, Ferris wheel elevation, Manhattan distances, Pick's theorem, expected inversions |
| `number_theory` | gcd and lcm, sieves, elimination over GF(2), cycle detection, base conversion, factorisation |
| `strings` | Z-algorithm, colour-string overlaps, substring counting, first occurrences |
| `queries` | prefix sums, rotations, deque operations, difference arrays |
| `interactive` | Fibonacci search for the peak of a unimodal sequence, driven by a caller-supplied `ask` function |

```python
from kyopro90.enumeration import balanced_parentheses
from kyopro90.combinatorics import count_atcoder_subsequences
from kyopro90.interactive import find_maximum

assert balanced_parentheses(4) == ["(())", "()()"]
assert count_atcoder_subsequences("attcordeer") == 4

values = [3, 9, 4, 1]
assert find_maximum(len(values), lambda i: values[i - 1]) == 9
```

Invalid input raises `ValueError` or `IndexError`. Where a problem has no
solution, the solver returns `None`; `graphs.count_unknown_weights` returns
`math.inf` when infinitely many weights qualify. Each docstring says which
applies.

## What the package does not do

There is no command-line program and nothing reads problem input from
standard input or writes formatted answers: every solver is called from
Python with its input already parsed into values.