# algokit3611

A small collection of classic algorithms and helpers. It has no
dependencies outside the standard library.

## Modules

- `algokit3611.graph`
  - `BidirectionalGraph` is a directed graph that keeps both out-edges and
    in-edges. Vertices are the integers `0 .. len(graph) - 1`, in the order
    they were added.
  - `add_vertex(**props)` and `add_edge(source, target, **props)` return
    descriptors. Properties are read back as attributes of `graph[vertex]` or
    `graph[edge]`.
  - `vertices()`, `edges()`, `out_edges(v)` and `in_edges(v)` list the
    descriptors in insertion order.
  - Edges are frozen `Edge(source, target, index)` objects.
- `algokit3611.operators`: `edge_distance`, `edge_capacity`, `edge_flow` and
  `residual_capacity` (capacity minus flow). Each takes `(edge, graph)` and
  reads the matching edge property.
- `algokit3611.string_match`: `naive_search` and `bmh_search`
  (Boyer-Moore-Horspool).
  - Both return the index of the first occurrence of a pattern in a sequence.
    They return `len(text)` when there is no match, and `0` for an empty
    pattern.
  - Both accept an optional `pred` comparison and the projections `proj`
    (for text elements) and `s_proj` (for pattern elements).
- `algokit3611.sequences`: integer sequences for trying out sort algorithms.
  - `sorted_ints(n)`
  - `reverse_ints(n)`
  - `organpipe_ints(n)`, which needs `n >= 2`.
  - `rotated_ints(n)`, which gives `1, ..., n-1, 0`.
  - `random01_ints(n, rng=None)`
  - Each of these raises `ValueError` when the count is invalid.
- `algokit3611.paths`: builds paths from a predecessor sequence or mapping.
  - `build_result_paths` walks back along in-edges and returns every path it
    finds.
  - `shortest_path_from_predecessors` follows the predecessor chain and
    returns that single path.
  - In the paths from both functions, each path lists the vertices after the
    start, up to and including the target.
- `algokit3611.bellman_ford`: `bellman_ford_shortest_paths(graph, start, goal,
  distance_op=edge_distance)`. It handles negative edge lengths.
  - It returns a list that holds one shortest path: the vertices after
    `start`, up to and including `goal`.
  - It returns an empty list when `goal` cannot be reached, or when
    `start == goal`.
  - An unknown vertex raises `IndexError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from algokit3611.graph import BidirectionalGraph
from algokit3611.bellman_ford import bellman_ford_shortest_paths
from algokit3611.string_match import bmh_search, naive_search

g = BidirectionalGraph()
s = g.add_vertex(name="S")
t = g.add_vertex(name="T")
v = g.add_vertex(name="V")
w = g.add_vertex(name="W")
g.add_edge(s, t, distance=2.0)
g.add_edge(s, v, distance=6.0)
g.add_edge(s, w, distance=4.0)
g.add_edge(v, w, distance=-8.0)
g.add_edge(w, t, distance=3.0)

print(bellman_ford_shortest_paths(g, s, t))   # [[2, 3, 1]], i.e. V, W, T

print(naive_search("hello world", "world"))   # 6
print(bmh_search("hello world", "xyz"))       # 11, i.e. len(text): no match
```

## What it does not do

- There is no command-line program; the package is used as a library.
- The flow and capacity operators are provided, but there is no max-flow
  solver built on them.
- `bellman_ford_shortest_paths` returns at most one shortest path, even when
  several paths have equal length.
- `bellman_ford_shortest_paths` does not report negative cycles. When the
  successor chain does not lead to the goal, it returns an empty list.