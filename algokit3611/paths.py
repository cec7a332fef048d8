"""Rebuild paths from a predecessor map produced by a shortest-path search."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Union

from .graph import BidirectionalGraph

Predecessors = Union[Sequence[int], Mapping[int, int]]


def build_result_paths(
    graph: BidirectionalGraph,
    start: int,
    predecessors: Predecessors,
    vertex: int,
) -> list[list[int]]:
    """Every path from ``start`` to ``vertex`` that walks back along in-edges.

    Each path lists the vertices after ``start`` up to and including
    ``vertex``. A vertex that is its own predecessor is a dead end, and a
    vertex already on the current path is not entered again. Paths are
    produced in depth-first order of the in-edges.
    """
    paths: list[list[int]] = []
    stack: list[tuple[int, tuple[int, ...]]] = [(vertex, ())]
    while stack:
        current, suffix = stack.pop()
        if current == start:
            paths.append(list(reversed(suffix)))
            continue
        if predecessors[current] == current or current in suffix:
            continue
        extended = suffix + (current,)
        sources = [edge.source for edge in graph.in_edges(current)]
        stack.extend((source, extended) for source in reversed(sources))
    return paths


def shortest_path_from_predecessors(
    graph: BidirectionalGraph,
    start: int,
    predecessors: Predecessors,
    vertex: int,
) -> list[list[int]]:
    """The single path from ``start`` to ``vertex`` given by ``predecessors``.

    Returns a list holding that path (the vertices after ``start`` up to and
    including ``vertex``), or an empty list when the chain of predecessors
    hits a dead end or a cycle before reaching ``start``.
    """
    if vertex not in graph.vertices():
        raise IndexError(f"no such vertex: {vertex}")
    path: list[int] = []
    seen: set[int] = set()
    current = vertex
    while current != start:
        if predecessors[current] == current or current in seen:
            return []
        seen.add(current)
        path.append(current)
        current = predecessors[current]
    path.reverse()
    return [path]