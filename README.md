# gktc

`gktc` counts the triangles in an undirected graph. It first relabels the vertices
in order of increasing degree, adding each vertex to its own sorted adjacency
list. It then counts triangles with the "JIK" enumeration order. For each vertex
it intersects the higher-numbered neighbours of the vertex with those of its
lower-numbered neighbours. It reports the number of triangles, the number of
adjacency probes it made, and how long each stage took.

## Installation

```
pip install .
```

The package uses only the Python standard library and needs Python 3.10 or later.

## Command line

```
gktc [options] infile
```

Options can start with one or two dashes and can be shortened to any unique
prefix. An option's value follows `=` or is given as the next argument.

- `-iftype=metis|tsv`: the format of the input file. The default is `metis`.
  - `metis`: a METIS graph file, with vertices numbered from 1. The header line
    is `nvtxs nedges [fmt [ncon]]`. Each following line lists the neighbours of
    one vertex. Vertex sizes, vertex weights and edge weights are accepted when
    the format specifier declares them. The file must hold `2 * nedges`
    adjacency entries.
  - `tsv`: one adjacency entry per line as `i j [v]`, with vertices numbered
    from 1. The value column is checked for being a number and then discarded.
    Each line adds only the entry `i -> j`, so an undirected graph must list
    both directions.

  In both formats, lines that start with `%` are skipped.
- `-nthreads=int`: the number of threads requested. It must be at least 1.
- `-help`: prints a summary of the options.

Example:

```
gktc -iftype=tsv edges.tsv
```

The command echoes its arguments and reports the vertex and adjacency-entry
counts. It then prints the hash size and start vertex used for counting,
followed by the results and timings:

```
Results...
  #triangles:           42; #probes:          310; rate:       1.23 MP/sec
```

The command exits with status 1 in these cases:

- the arguments are invalid;
- the file is missing;
- the file does not follow its format.

## Library use

```python
from gktc.graph import Graph, InputFormat, load_graph
from gktc.ptc import count_triangles, preprocess

graph = Graph.from_edges(4, [(0, 1), (1, 2), (0, 2), (2, 3)])
result = count_triangles(graph)
print(result.triangles)   # 1
print(result.probes)

graph = load_graph("graph.metis", InputFormat.METIS)
print(count_triangles(graph).triangles)
```

- `Graph` holds a graph in compressed sparse row form (`nvtxs`, `xadj`, `adjncy`,
  and optional `adjwgt`). It provides `degree()`, `neighbors()` and `nedges()`.
- `read_metis(path)`, `read_tsv(path)` and `load_graph(path, fmt)` read graph
  files. A malformed file raises `GraphFormatError`.
- `InputFormat.from_name("metis" | "tsv")` looks up a format by its name.
- `preprocess(graph)` returns the graph after degree-ordered relabelling. Each
  adjacency list in it is sorted and includes the vertex itself.
- `count_triangles(graph)` returns a `TriangleCount`, which has these fields:
  `triangles`, `probes`, `hash_size`, `start_vertex`, `preprocess_seconds` and
  `count_seconds`. Its `probe_rate` property gives millions of probes per second.

The command line can be driven from Python with these functions:

- `gktc.cli.parse_args(argv)` returns a `Params` object. It raises `UsageError`
  when the arguments are invalid.
- `gktc.cli.run(params)` loads the graph, counts its triangles and prints the
  report.
- `gktc.cli.main(argv)` does both and returns the exit status.
- `gktc.cli.help_text()` returns the usage summary.

## Limitations

Counting always runs in a single thread. `-nthreads` is checked but has no
effect, and the report always shows `nthreads: 1`.