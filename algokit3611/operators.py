"""Edge operators reading flow, capacity and distance from a graph."""

from __future__ import annotations

from typing import Any

from .graph import BidirectionalGraph, Edge


def edge_flow(edge: Edge, graph: BidirectionalGraph) -> int:
    """Current flow through ``edge``."""
    return int(graph[edge].flow)


def edge_capacity(edge: Edge, graph: BidirectionalGraph) -> int:
    """Capacity of ``edge``."""
    return int(graph[edge].capacity)


def residual_capacity(edge: Edge, graph: BidirectionalGraph) -> int:
    """Capacity of ``edge`` not yet used by flow."""
    props: Any = graph[edge]
    return int(props.capacity - props.flow)


def edge_distance(edge: Edge, graph: BidirectionalGraph) -> float:
    """Distance (weight) of ``edge`` as a float."""
    return float(graph[edge].distance)