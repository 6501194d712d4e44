"""Triangle counting over a degree-ordered graph using the JIK enumeration."""

from __future__ import annotations

import time
from dataclasses import dataclass
from itertools import takewhile

from gktc.graph import Graph


@dataclass(frozen=True)
class TriangleCount:
    """The outcome of a triangle-counting run."""

    triangles: int
    probes: int
    hash_size: int
    start_vertex: int
    preprocess_seconds: float
    count_seconds: float

    @property
    def probe_rate(self) -> float:
        """Millions of probes per second spent counting."""
        if self.count_seconds <= 0:
            return 0.0
        return self.probes / (1e6 * self.count_seconds)


def preprocess(graph: Graph) -> Graph:
    """Relabel vertices in increasing degree order and add a diagonal entry.

    Ties keep their original order. Every adjacency list of the result is
    sorted increasingly and holds the vertex itself.
    """
    order = sorted(range(graph.nvtxs), key=graph.degree)
    perm = [0] * graph.nvtxs
    for new, old in enumerate(order):
        perm[old] = new
    rows = [
        sorted([perm[u] for u in graph.neighbors(old)] + [new])
        for new, old in enumerate(order)
    ]
    return Graph._from_lists(rows)


def count_triangles(graph: Graph) -> TriangleCount:
    """Count the triangles of an undirected (symmetric) graph."""
    started = time.perf_counter()
    ordered = preprocess(graph)
    preprocessed = time.perf_counter()

    nvtxs, xadj, adjncy = ordered.nvtxs, ordered.xadj, ordered.adjncy
    lower: list[list[int]] = []
    upper: list[list[int]] = []
    widest = 0
    start_vertex = nvtxs
    for vertex in range(nvtxs):
        end = xadj[vertex + 1]
        diag = end - 1
        while adjncy[diag] > vertex:
            diag -= 1
        lower.append(adjncy[xadj[vertex] : diag])
        upper.append(adjncy[end - 1 : diag : -1])
        widest = max(widest, end - diag)
        if diag != xadj[vertex]:
            start_vertex = min(start_vertex, vertex)

    bits = 1
    while widest > (1 << bits):
        bits += 1
    hash_size = (1 << (bits + 4)) - 1
    direct_start = nvtxs - hash_size

    triangles = 0
    probes = 0
    for vj in range(nvtxs):
        above_vj = upper[vj]
        if not above_vj or not lower[vj]:
            continue
        complete = vj >= direct_start and len(above_vj) + 1 == nvtxs - vj
        members = set(above_vj)
        for vi in lower[vj]:
            candidates = list(takewhile(lambda vk: vk > vj, upper[vi]))
            probes += len(candidates)
            if complete:
                triangles += len(candidates)
            else:
                triangles += sum(vk in members for vk in candidates)

    finished = time.perf_counter()
    return TriangleCount(
        triangles=triangles,
        probes=probes,
        hash_size=hash_size,
        start_vertex=start_vertex,
        preprocess_seconds=preprocessed - started,
        count_seconds=finished - preprocessed,
    )