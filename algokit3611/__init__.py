"""Algorithm toolkit: subsequence search, sort input sequences, a bidirectional graph, edge operators, path rebuilding and Bellman-Ford shortest paths."""

__version__ = "0.1.0"