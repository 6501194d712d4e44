"""Compressed sparse row graphs and the readers for the supported input formats."""

from __future__ import annotations

import enum
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


class GraphFormatError(ValueError):
    """Raised when a graph file does not follow its declared format."""


class InputFormat(enum.Enum):
    """The formats an input graph may be stored in."""

    TSV = 1
    METIS = 2

    @classmethod
    def from_name(cls, name: str) -> "InputFormat":
        """Return the format called ``name`` ("tsv" or "metis")."""
        for member in cls:
            if member.name.lower() == name:
                return member
        raise ValueError(f"Invalid iftype of {name}.")


@dataclass
class Graph:
    """A graph in compressed sparse row form with 0-based vertex numbers."""

    nvtxs: int
    xadj: list[int]
    adjncy: list[int]
    adjwgt: list[float] | None = field(default=None)

    def __post_init__(self) -> None:
        if self.nvtxs < 0:
            raise ValueError("the number of vertices cannot be negative")
        if len(self.xadj) != self.nvtxs + 1:
            raise ValueError("xadj must hold nvtxs + 1 entries")
        if self.xadj[0] != 0:
            raise ValueError("xadj must start at 0")
        if any(a > b for a, b in zip(self.xadj, self.xadj[1:])):
            raise ValueError("xadj must be non-decreasing")
        if self.xadj[-1] != len(self.adjncy):
            raise ValueError("xadj must end at the length of adjncy")
        if any(not 0 <= v < self.nvtxs for v in self.adjncy):
            raise ValueError("adjncy holds a vertex outside the graph")
        if self.adjwgt is not None and len(self.adjwgt) != len(self.adjncy):
            raise ValueError("adjwgt must be as long as adjncy")

    @classmethod
    def from_edges(cls, nvtxs: int, edges: Iterable[tuple[int, int]]) -> "Graph":
        """Build an undirected graph; each pair is stored in both adjacency lists."""
        lists: list[list[int]] = [[] for _ in range(nvtxs)]
        for u, v in edges:
            if not (0 <= u < nvtxs and 0 <= v < nvtxs):
                raise ValueError(f"edge ({u}, {v}) has a vertex outside the graph")
            lists[u].append(v)
            if u != v:
                lists[v].append(u)
        return cls._from_lists(lists)

    @classmethod
    def _from_lists(
        cls, lists: list[list[int]], weights: list[list[float]] | None = None
    ) -> "Graph":
        xadj = [0]
        adjncy: list[int] = []
        for row in lists:
            adjncy.extend(row)
            xadj.append(len(adjncy))
        adjwgt = None
        if weights is not None:
            adjwgt = [w for row in weights for w in row]
        return cls(len(lists), xadj, adjncy, adjwgt)

    def degree(self, vertex: int) -> int:
        """Return the number of adjacency entries of ``vertex``."""
        return self.xadj[vertex + 1] - self.xadj[vertex]

    def neighbors(self, vertex: int) -> list[int]:
        """Return the adjacency list of ``vertex``."""
        return self.adjncy[self.xadj[vertex] : self.xadj[vertex + 1]]

    def nedges(self) -> int:
        """Return the number of stored (directed) adjacency entries."""
        return self.xadj[-1]


def _number(token: str, what: str) -> float:
    try:
        value = float(token)
    except ValueError:
        raise GraphFormatError(f"invalid {what}: {token!r}") from None
    return int(value) if value.is_integer() else value


def _integer(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise GraphFormatError(f"invalid {what}: {token!r}") from None


def _data_lines(handle: Iterable[str]) -> Iterator[str]:
    for line in handle:
        if not line.startswith("%"):
            yield line.rstrip("\r\n")


def read_metis(path: str | os.PathLike[str]) -> Graph:
    """Read a graph stored in the METIS format (1-based vertex numbers)."""
    with open(path, encoding="utf-8") as handle:
        lines = _data_lines(handle)
        header = next(lines, None)
        if header is None or not header.split():
            raise GraphFormatError("missing header line")
        fields = header.split()
        if len(fields) > 4:
            raise GraphFormatError("the header holds too many fields")
        nvtxs = _integer(fields[0], "number of vertices")
        nedges = _integer(fields[1], "number of edges") if len(fields) > 1 else 0
        fmt = fields[2] if len(fields) > 2 else "0"
        if not fmt.isdigit() or len(fmt.lstrip("0")) > 3 or set(fmt) - {"0", "1"}:
            raise GraphFormatError(f"invalid format specifier {fmt!r}")
        code = int(fmt)
        has_sizes = code // 100 == 1
        has_vwgts = (code % 100) // 10 == 1
        has_ewgts = code % 10 == 1
        ncon = _integer(fields[3], "number of constraints") if len(fields) > 3 else 1
        if not has_vwgts:
            ncon = 0
        if nvtxs < 0 or nedges < 0 or ncon < 0:
            raise GraphFormatError("the header holds a negative count")

        lists: list[list[int]] = []
        weights: list[list[float]] = []
        for vertex in range(1, nvtxs + 1):
            line = next(lines, None)
            if line is None:
                raise GraphFormatError(
                    f"premature end of input: expected {nvtxs} vertices, got {vertex - 1}"
                )
            tokens = line.split()
            skip = int(has_sizes) + ncon
            if len(tokens) < skip:
                raise GraphFormatError(f"vertex {vertex} lacks its size or weights")
            for token in tokens[:skip]:
                _number(token, "vertex value")
            rest = tokens[skip:]
            step = 2 if has_ewgts else 1
            if len(rest) % step:
                raise GraphFormatError(f"vertex {vertex} has an edge without a weight")
            row: list[int] = []
            row_weights: list[float] = []
            for pos in range(0, len(rest), step):
                neighbor = _integer(rest[pos], "vertex number")
                if not 1 <= neighbor <= nvtxs:
                    raise GraphFormatError(
                        f"vertex {vertex} has neighbor {neighbor} outside 1..{nvtxs}"
                    )
                row.append(neighbor - 1)
                if has_ewgts:
                    row_weights.append(_number(rest[pos + 1], "edge weight"))
            lists.append(row)
            weights.append(row_weights)

    found = sum(len(row) for row in lists)
    if found != 2 * nedges:
        raise GraphFormatError(
            f"the header declares {2 * nedges} adjacency entries but {found} were read"
        )
    return Graph._from_lists(lists, weights if has_ewgts else None)


def read_tsv(path: str | os.PathLike[str]) -> Graph:
    """Read a graph stored as "i j [v]" lines with 1-based vertex numbers.

    Each line is one directed adjacency entry; the optional value is checked
    but not kept.
    """
    entries: list[tuple[int, int]] = []
    with open(path, encoding="utf-8") as handle:
        for lineno, line in enumerate(_data_lines(handle), start=1):
            tokens = line.split()
            if not tokens:
                continue
            if len(tokens) < 2 or len(tokens) > 3:
                raise GraphFormatError(f"line {lineno}: expected 'i j [v]'")
            i = _integer(tokens[0], "vertex number")
            j = _integer(tokens[1], "vertex number")
            if len(tokens) == 3:
                _number(tokens[2], "edge value")
            if i < 1 or j < 1:
                raise GraphFormatError(f"line {lineno}: vertex numbers start at 1")
            entries.append((i - 1, j - 1))

    nvtxs = max((max(i, j) + 1 for i, j in entries), default=0)
    lists: list[list[int]] = [[] for _ in range(nvtxs)]
    for i, j in entries:
        lists[i].append(j)
    return Graph._from_lists(lists)


def load_graph(path: str | os.PathLike[str], fmt: InputFormat) -> Graph:
    """Read the graph at ``path`` in the given input format."""
    if not os.path.isfile(path):
        raise FileNotFoundError(f"file {os.fspath(path)!r} does not exist")
    if fmt is InputFormat.TSV:
        return read_tsv(path)
    if fmt is InputFormat.METIS:
        return read_metis(path)
    raise ValueError(f"Unknown iftype of {fmt!r}")