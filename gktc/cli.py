"""Command-line front end: option parsing and the triangle-counting run."""

from __future__ import annotations

import re
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass

from gktc.graph import GraphFormatError, InputFormat, load_graph
from gktc.ptc import TriangleCount, count_triangles

PROGRAM = "gktc"

_HELP_LINES = (
    " ",
    f"Usage: {PROGRAM} [options] infile",
    " ",
    " Options",
    "  -iftype=text",
    "     Specifies the format of the input file. ",
    "     Possible values are:",
    "        metis   Metis format [default]",
    "        tsv     tsv format (i, j, v)",
    " ",
    "  -nthreads=int",
    "     Specifies the number of threads to use.",
    "     The default value is 1.",
    " ",
    "  -help",
    "     Prints this message.",
)

# option name -> whether it takes an argument
_OPTIONS = {"iftype": True, "nthreads": True, "help": False}

_ILLEGAL = (
    "Illegal command-line option(s)\n"
    f"Use {PROGRAM} -help for a summary of the options."
)
_MISSING = (
    "Missing required parameters.\n"
    f"  Use {PROGRAM} -help for a summary of the options."
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class UsageError(ValueError):
    """Raised when the command line cannot be understood."""


@dataclass
class Params:
    """The settings of one run."""

    infile: str | None = None
    iftype: InputFormat = InputFormat.METIS
    nthreads: int = 1
    show_help: bool = False


def help_text() -> str:
    """Return the usage summary."""
    return "\n".join(_HELP_LINES)


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _resolve(name: str) -> str:
    if name in _OPTIONS:
        return name
    matches = [option for option in _OPTIONS if option.startswith(name)]
    if len(matches) != 1 or not name:
        raise UsageError(_ILLEGAL)
    return matches[0]


def parse_args(argv: Sequence[str]) -> Params:
    """Parse the arguments (without the program name) into run settings.

    Options may be given with one or two dashes, abbreviated to any unique
    prefix, and take their value after "=" or as the next argument.
    """
    params = Params()
    positional: list[str] = []
    args = iter(argv)
    for arg in args:
        if arg == "--":
            positional.extend(args)
            break
        if not arg.startswith("-") or arg == "-":
            positional.append(arg)
            continue

        body = arg[2:] if arg.startswith("--") else arg[1:]
        name, sep, value = body.partition("=")
        option = _resolve(name)
        if _OPTIONS[option]:
            if not sep:
                value = next(args, None)
                if value is None:
                    raise UsageError(_ILLEGAL)
        elif sep:
            raise UsageError(_ILLEGAL)

        if option == "iftype":
            try:
                params.iftype = InputFormat.from_name(value)
            except ValueError as exc:
                raise UsageError(str(exc)) from None
        elif option == "nthreads":
            params.nthreads = _leading_int(value)
            if params.nthreads < 1:
                raise UsageError("The -nthreads must be greater than 0.")
        else:
            params.show_help = True
            return params

    if len(positional) != 1:
        raise UsageError(_MISSING)
    params.infile = positional[0]
    return params


def run(params: Params) -> TriangleCount:
    """Load the input graph, count its triangles and print a report."""
    if params.infile is None:
        raise UsageError(_MISSING)
    print(f"Reading graph {params.infile}...")
    graph = load_graph(params.infile, params.iftype)

    print("\n-----------------")
    print(f"  infile: {params.infile}")
    print(f"  #nvtxs: {graph.nvtxs}")
    print(f" #nedges: {graph.nedges()}")
    print("nthreads: 1")
    print()

    started = time.perf_counter()
    result = count_triangles(graph)
    total = time.perf_counter() - started

    print(
        f"& compatible maxhmsize: {result.hash_size}, startv: {result.start_vertex}"
    )
    print("\nResults...")
    print(
        f"  #triangles: {result.triangles:12d}; #probes: {result.probes:12d}; "
        f"rate: {result.probe_rate:10.2f} MP/sec"
    )
    print("\nTimings...")
    print(f"     preprocessing: {result.preprocess_seconds:9.3f}s")
    print(f" triangle counting: {result.count_seconds:9.3f}s")
    print(f"    total (/x i/o): {total:9.3f}s")
    print("-----------------")
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    if argv is None:
        argv = sys.argv[1:]
    print(" ".join([PROGRAM, *argv]) + " ")
    try:
        params = parse_args(argv)
    except UsageError as exc:
        print(exc)
        return 1
    if params.show_help:
        print(help_text())
        return 0
    try:
        run(params)
    except (OSError, GraphFormatError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())