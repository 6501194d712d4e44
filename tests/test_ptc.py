import itertools
import random

import pytest

from gktc.graph import Graph
from gktc.ptc import count_triangles, preprocess


def _complete(n):
    return Graph.from_edges(n, itertools.combinations(range(n), 2))


def _random_graph(n, p, seed):
    rng = random.Random(seed)
    edges = [(u, v) for u, v in itertools.combinations(range(n), 2) if rng.random() < p]
    return n, edges


def _disjoint_copies(n, edges, copies):
    all_edges = [(u + k * n, v + k * n) for k in range(copies) for u, v in edges]
    return Graph.from_edges(n * copies, all_edges)


def test_single_triangle():
    assert count_triangles(_complete(3)).triangles == 1


@pytest.mark.parametrize("n, expected", [(4, 4), (5, 10)])
def test_complete_graphs(n, expected):
    assert count_triangles(_complete(n)).triangles == expected


def test_triangle_free_graphs_match_edgeless_graph():
    edgeless = count_triangles(Graph.from_edges(6, [])).triangles
    bipartite = Graph.from_edges(6, [(u, v) for u in range(3) for v in range(3, 6)])
    path = Graph.from_edges(6, [(i, i + 1) for i in range(5)])
    assert count_triangles(bipartite).triangles == edgeless
    assert count_triangles(path).triangles == edgeless


def test_edgeless_graph_start_vertex_is_nvtxs():
    result = count_triangles(Graph.from_edges(7, []))
    assert result.start_vertex == 7
    assert result.probes == result.triangles


def test_count_is_invariant_under_relabeling():
    n, edges = _random_graph(60, 0.2, seed=3)
    base = count_triangles(Graph.from_edges(n, edges)).triangles
    labels = list(range(n))
    random.Random(11).shuffle(labels)
    relabeled = Graph.from_edges(n, [(labels[u], labels[v]) for u, v in edges])
    assert count_triangles(relabeled).triangles == base


def test_disjoint_copies_add_up_across_both_phases():
    n, edges = _random_graph(12, 0.5, seed=5)
    single = count_triangles(Graph.from_edges(n, edges))
    many = count_triangles(_disjoint_copies(n, edges, 20))
    assert many.hash_size < 20 * n
    assert many.triangles == 20 * single.triangles
    assert many.probes == 20 * single.probes


def test_adding_a_triangle_increments_count():
    n, edges = _random_graph(40, 0.1, seed=9)
    base = count_triangles(Graph.from_edges(n + 3, edges)).triangles
    extra = edges + [(n, n + 1), (n + 1, n + 2), (n, n + 2)]
    assert count_triangles(Graph.from_edges(n + 3, extra)).triangles == base + 1


def test_probes_bound_triangles():
    n, edges = _random_graph(80, 0.15, seed=1)
    result = count_triangles(Graph.from_edges(n, edges))
    assert result.probes >= result.triangles


def test_hash_size_is_power_of_two_minus_one():
    n, edges = _random_graph(100, 0.3, seed=2)
    result = count_triangles(Graph.from_edges(n, edges))
    size = result.hash_size + 1
    assert size & (size - 1) == 0
    assert size >= 32


def test_preprocess_orders_by_degree_and_adds_diagonal():
    n, edges = _random_graph(30, 0.25, seed=4)
    graph = Graph.from_edges(n, edges)
    ordered = preprocess(graph)
    assert ordered.nvtxs == graph.nvtxs
    assert ordered.nedges() == graph.nedges() + graph.nvtxs
    degrees = [ordered.degree(v) for v in range(n)]
    assert degrees == sorted(degrees)
    assert sorted(degrees) == sorted(graph.degree(v) + 1 for v in range(n))
    for v in range(n):
        row = ordered.neighbors(v)
        assert row == sorted(row)
        assert v in row


def test_preprocess_keeps_graph_symmetric():
    n, edges = _random_graph(25, 0.3, seed=8)
    ordered = preprocess(Graph.from_edges(n, edges))
    for v in range(n):
        for u in ordered.neighbors(v):
            assert v in ordered.neighbors(u)


def test_preprocess_is_stable_for_equal_degrees():
    cycle = Graph.from_edges(4, [(0, 1), (1, 2), (2, 3), (3, 0)])
    ordered = preprocess(cycle)
    assert ordered.xadj == [0, 3, 6, 9, 12]
    assert ordered.neighbors(0) == [0, 1, 3]