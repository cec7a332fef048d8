"""A small bidirectional graph with bundled vertex and edge properties."""

from __future__ import annotations

from dataclasses import dataclass
from types import SimpleNamespace
from typing import Any


@dataclass(frozen=True)
class Edge:
    """Descriptor of a directed edge; ``index`` tells parallel edges apart."""

    source: int
    target: int
    index: int


class BidirectionalGraph:
    """Directed graph that gives access to both out-edges and in-edges.

    Vertices are the integers ``0 .. len(graph) - 1`` in order of insertion.
    Properties given as keyword arguments are reachable as attributes of
    ``graph[vertex]`` and ``graph[edge]``.
    """

    def __init__(self) -> None:
        self._vertex_props: list[SimpleNamespace] = []
        self._edges: list[Edge] = []
        self._edge_props: list[SimpleNamespace] = []
        self._out: list[list[Edge]] = []
        self._in: list[list[Edge]] = []

    def _check_vertex(self, vertex: int) -> None:
        if isinstance(vertex, bool) or not isinstance(vertex, int):
            raise TypeError(f"vertex must be an int, not {type(vertex).__name__}")
        if not 0 <= vertex < len(self._vertex_props):
            raise IndexError(f"no such vertex: {vertex}")

    def add_vertex(self, **kwargs: Any) -> int:
        """Add a vertex with the given properties and return its descriptor."""
        self._vertex_props.append(SimpleNamespace(**kwargs))
        self._out.append([])
        self._in.append([])
        return len(self._vertex_props) - 1

    def add_edge(self, source: int, target: int, **kwargs: Any) -> Edge:
        """Add an edge from ``source`` to ``target`` and return its descriptor."""
        self._check_vertex(source)
        self._check_vertex(target)
        edge = Edge(source, target, len(self._edges))
        self._edges.append(edge)
        self._edge_props.append(SimpleNamespace(**kwargs))
        self._out[source].append(edge)
        self._in[target].append(edge)
        return edge

    def vertices(self) -> range:
        """All vertex descriptors in insertion order."""
        return range(len(self._vertex_props))

    def edges(self) -> list[Edge]:
        """All edge descriptors in insertion order."""
        return list(self._edges)

    def out_edges(self, vertex: int) -> list[Edge]:
        """Edges leaving ``vertex`` in insertion order."""
        self._check_vertex(vertex)
        return list(self._out[vertex])

    def in_edges(self, vertex: int) -> list[Edge]:
        """Edges entering ``vertex`` in insertion order."""
        self._check_vertex(vertex)
        return list(self._in[vertex])

    def __getitem__(self, key: int | Edge) -> SimpleNamespace:
        if isinstance(key, Edge):
            if 0 <= key.index < len(self._edges) and self._edges[key.index] == key:
                return self._edge_props[key.index]
            raise KeyError(key)
        self._check_vertex(key)
        return self._vertex_props[key]

    def __len__(self) -> int:
        return len(self._vertex_props)