"""Bellman-Ford shortest paths towards a goal vertex."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Optional

from .graph import BidirectionalGraph, Edge
from .operators import edge_distance

DistanceOperator = Callable[[Edge, BidirectionalGraph], float]


def bellman_ford_shortest_paths(
    graph: BidirectionalGraph,
    start: int,
    goal: int,
    distance_op: DistanceOperator = edge_distance,
) -> list[list[int]]:
    """Shortest paths from ``start`` to ``goal``; negative edge lengths allowed.

    Distances to ``goal`` are relaxed backwards along in-edges, only from
    vertices whose distance changed in the previous pass, for at most
    ``len(graph) - 1`` passes. The result holds one path (the vertices after
    ``start`` up to and including ``goal``), or is empty when ``goal`` cannot
    be reached from ``start`` or ``start`` is ``goal``.
    """
    vertices = graph.vertices()
    for vertex in (start, goal):
        if vertex not in vertices:
            raise IndexError(f"no such vertex: {vertex}")

    distance = {v: math.inf for v in vertices}
    successor: dict[int, Optional[int]] = {v: None for v in vertices}
    distance[goal] = 0.0

    updated: list[int] = [goal]
    for _ in range(1, len(graph)):
        previous = set(updated)
        updated = []
        for w in vertices:
            if w not in previous:
                continue
            for edge in graph.in_edges(w):
                v = edge.source
                candidate = distance[w] + distance_op(edge, graph)
                if distance[v] > candidate:
                    distance[v] = candidate
                    successor[v] = w
                    updated.append(v)
        if not updated:
            break

    path: list[int] = []
    stop = successor[goal]
    current = successor[start]
    while current != stop:
        if current is None or len(path) > len(graph):
            return []
        path.append(current)
        current = successor[current]

    return [path] if path else []