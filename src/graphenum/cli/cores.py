"""
graphenum degeneracy / kcore commands - Degeneracy and core decomposition.

Usage:
    graphenum degeneracy --input edges.txt
    graphenum kcore --input edges.txt --k 3 --output cores.csv
"""

import argparse
import logging
from pathlib import Path

from graphenum.cli._validators import _non_negative_int

logger = logging.getLogger(__name__)


def register_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the degeneracy and kcore subcommands."""
    parser = subparsers.add_parser(
        "degeneracy",
        help="Degeneracy and degeneracy ordering of a graph",
        description=(
            "Compute the degeneracy d of a graph and an ordering in which every "
            "vertex has at most d later neighbors."
        )
    )
    parser.add_argument("--input", "-i", type=Path, required=True,
                        help="Edge list file (whitespace or comma separated)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    parser.set_defaults(func=run_degeneracy)

    parser = subparsers.add_parser(
        "kcore",
        help="K-core decomposition and k-core queries",
        description=(
            "Build the core decomposition of a graph. Prints the size of the "
            "k-core for --k and optionally writes every vertex's core number."
        )
    )
    parser.add_argument("--input", "-i", type=Path, required=True,
                        help="Edge list file (whitespace or comma separated)")
    parser.add_argument("--k", type=_non_negative_int, default=None,
                        help="Report the vertices of the k-core (0 <= k < n)")
    parser.add_argument("--output", "-o", type=Path, default=None,
                        help="CSV file for per-vertex core numbers (optional)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    parser.set_defaults(func=run_kcore)


def run_degeneracy(args: argparse.Namespace) -> int:
    """Execute the degeneracy command."""
    from graphenum.algorithms import degeneracy_ordering
    from graphenum.errors import GraphEnumError
    from graphenum.io import load_graph

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        G = load_graph(args.input)
        logger.info(f"Loaded {args.input}: {G.number_of_nodes()} vertices, {G.number_of_edges()} edges")
        d, ordering = degeneracy_ordering(G)
    except (FileNotFoundError, ValueError, GraphEnumError) as e:
        print(f"ERROR: {e}")
        return 1

    print(f"Degeneracy: {d}")
    print(f"Ordering:   {' '.join(str(v) for v in ordering)}")
    return 0


def run_kcore(args: argparse.Namespace) -> int:
    """Execute the kcore command."""
    from graphenum.algorithms import KCoreIndex
    from graphenum.errors import GraphEnumError
    from graphenum.io import load_graph, write_core_numbers_csv

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        G = load_graph(args.input)
        logger.info(f"Loaded {args.input}: {G.number_of_nodes()} vertices, {G.number_of_edges()} edges")
        index = KCoreIndex(G)
        core = index.k_core(args.k) if args.k is not None else None
    except (FileNotFoundError, ValueError, GraphEnumError) as e:
        print(f"ERROR: {e}")
        return 1

    print(f"Degeneracy (max core number): {index.degeneracy}")
    if core is not None:
        print(f"{args.k}-core: {len(core)}/{index.n} vertices")
        if core:
            print(f"  {' '.join(sorted(str(v) for v in core))}")

    if args.output:
        write_core_numbers_csv(index.core_numbers, args.output)
        logger.info(f"Saved: {args.output}")

    return 0
