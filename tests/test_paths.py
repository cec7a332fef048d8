import pytest

from algokit3611.graph import BidirectionalGraph
from algokit3611.paths import build_result_paths, shortest_path_from_predecessors


def _chain(length):
    graph = BidirectionalGraph()
    vertices = [graph.add_vertex(name=str(i)) for i in range(length)]
    for a, b in zip(vertices, vertices[1:]):
        graph.add_edge(a, b, distance=1.0)
    return graph, vertices


def _diamond():
    graph = BidirectionalGraph()
    a, b, c, d = (graph.add_vertex(name=n) for n in "ABCD")
    graph.add_edge(a, b, distance=1.0)
    graph.add_edge(a, c, distance=1.0)
    graph.add_edge(b, d, distance=1.0)
    graph.add_edge(c, d, distance=1.0)
    return graph, (a, b, c, d)


def _is_walk(graph, start, path):
    edges = {(e.source, e.target) for e in graph.edges()}
    steps = [start] + path
    return all((x, y) in edges for x, y in zip(steps, steps[1:]))


def test_shortest_path_follows_chain():
    graph, vs = _chain(4)
    predecessors = [vs[0], vs[0], vs[1], vs[2]]
    paths = shortest_path_from_predecessors(graph, vs[0], predecessors, vs[3])
    assert paths == [vs[1:]]


def test_shortest_path_to_start_is_empty_path():
    graph, vs = _chain(3)
    predecessors = [vs[0], vs[0], vs[1]]
    assert shortest_path_from_predecessors(graph, vs[0], predecessors, vs[0]) == [[]]


def test_shortest_path_dead_end():
    graph, vs = _chain(3)
    predecessors = [vs[0], vs[1], vs[1]]
    assert shortest_path_from_predecessors(graph, vs[0], predecessors, vs[2]) == []


def test_shortest_path_predecessor_cycle_is_dead_end():
    graph, vs = _chain(3)
    predecessors = {vs[0]: vs[0], vs[1]: vs[2], vs[2]: vs[1]}
    assert shortest_path_from_predecessors(graph, vs[0], predecessors, vs[2]) == []


def test_shortest_path_unknown_vertex():
    graph, vs = _chain(2)
    with pytest.raises(IndexError):
        shortest_path_from_predecessors(graph, vs[0], [0, 0], 7)


def test_result_paths_chain_matches_single_path():
    graph, vs = _chain(5)
    predecessors = [vs[0]] + vs[:-1]
    single = shortest_path_from_predecessors(graph, vs[0], predecessors, vs[4])
    assert build_result_paths(graph, vs[0], predecessors, vs[4]) == single


def test_result_paths_diamond_gives_both_routes():
    graph, (a, b, c, d) = _diamond()
    predecessors = [a, a, a, b]
    paths = build_result_paths(graph, a, predecessors, d)
    assert sorted(paths) == [[b, d], [c, d]]
    for path in paths:
        assert path[-1] == d
        assert _is_walk(graph, a, path)


def test_result_paths_order_follows_in_edges():
    graph, (a, b, c, d) = _diamond()
    paths = build_result_paths(graph, a, [a, a, a, b], d)
    assert [p[0] for p in paths] == [b, c]


def test_result_paths_dead_end_vertex():
    graph, (a, b, c, d) = _diamond()
    predecessors = [a, a, a, d]
    assert build_result_paths(graph, a, predecessors, d) == []


def test_result_paths_skips_self_predecessor_branch():
    graph, (a, b, c, d) = _diamond()
    predecessors = [a, a, c, b]
    assert build_result_paths(graph, a, predecessors, d) == [[b, d]]


def test_result_paths_start_equals_vertex():
    graph, (a, _, _, _) = _diamond()
    assert build_result_paths(graph, a, [a, a, a, a], a) == [[]]


def test_result_paths_cycle_terminates():
    graph = BidirectionalGraph()
    a, b, c = (graph.add_vertex() for _ in range(3))
    graph.add_edge(a, b)
    graph.add_edge(b, c)
    graph.add_edge(c, b)
    paths = build_result_paths(graph, a, [a, a, b], c)
    assert paths == [[b, c]]