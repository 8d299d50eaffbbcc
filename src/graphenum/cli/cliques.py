"""
graphenum cliques command - Maximal clique enumeration.

Cliques are collected before they are printed or written. The enumerator is
lazy, so ``--limit`` stops the search as soon as enough cliques were found.

Usage:
    graphenum cliques --input edges.txt --min-size 3 --output results/cliques.csv
"""

import argparse
import itertools
import logging
from datetime import datetime
from pathlib import Path

from graphenum.cli._validators import _positive_int

logger = logging.getLogger(__name__)


def register_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the cliques subcommand."""
    parser = subparsers.add_parser(
        "cliques",
        help="Enumerate maximal cliques",
        description=(
            "Enumerate the maximal cliques of a graph with pivoted Bron-Kerbosch "
            "over a degeneracy ordering. With --min-size the search is restricted "
            "to the (min-size - 1)-core."
        )
    )

    parser.add_argument("--input", "-i", type=Path, default=None,
                        help="Edge list file (whitespace or comma separated)")
    parser.add_argument("--output", "-o", type=Path, default=None,
                        help="CSV file for cliques (default: print to stdout)")
    parser.add_argument("--config", "-c", type=Path, default=None,
                        help="Path to YAML/JSON config file (optional, CLI args override config values)")

    parser.add_argument("--min-size", type=_positive_int, default=1,
                        help="Only report cliques with at least this many vertices (default: 1)")
    parser.add_argument("--limit", type=_positive_int, default=None,
                        help="Stop after this many cliques (default: all)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")

    parser.set_defaults(func=run_cliques)


def run_cliques(args: argparse.Namespace) -> int:
    """Execute the cliques command."""
    from graphenum.algorithms import estimate_clique_complexity, maximal_clique_iterator
    from graphenum.cli.config import apply_config
    from graphenum.errors import GraphEnumError
    from graphenum.io import atomic_write_json, load_graph, write_cliques_csv

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        args = apply_config(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"ERROR: Config file error: {e}")
        return 1

    if not args.input:
        print("ERROR: --input is required (via CLI or config file)")
        return 1

    try:
        G = load_graph(args.input)
    except (FileNotFoundError, ValueError) as e:
        print(f"ERROR: {e}")
        return 1

    stats = estimate_clique_complexity(G)
    logger.info(
        f"Graph: {stats['n']} vertices, {stats['m']} edges, degeneracy {stats['degeneracy']} "
        f"({stats['difficulty']}, <= {stats['estimated_cliques']} maximal cliques)"
    )

    try:
        cliques = maximal_clique_iterator(G, min_size=args.min_size)
    except (ValueError, GraphEnumError) as e:
        print(f"ERROR: {e}")
        return 1
    if args.limit:
        cliques = itertools.islice(cliques, args.limit)
    found = list(cliques)

    print(f"\n{'='*70}")
    print("  Maximal Cliques")
    print(f"{'='*70}")
    print(f"  Cliques found: {len(found)}" + (f" (limit {args.limit})" if args.limit else ""))
    if found:
        print(f"  Largest clique: {max(len(c) for c in found)} vertices")

    if args.output:
        write_cliques_csv(found, args.output)
        logger.info(f"Saved: {args.output}")

        summary = {
            'timestamp': datetime.now().isoformat(),
            'command': 'cliques',
            'input': str(args.input),
            'min_size': args.min_size,
            'limit': args.limit,
            'n_cliques': len(found),
            'complexity': stats,
        }
        summary_path = args.output.with_name(f"{args.output.stem}.summary.json")
        atomic_write_json(summary_path, summary)
        logger.info(f"Saved: {summary_path}")
    else:
        for clique in found:
            print(' '.join(sorted(str(v) for v in clique)))

    return 0
