"""
graphenum match command - Labeled induced subgraph isomorphism.

Usage:
    graphenum match --pattern triangle.txt --data edges.txt \\
        --pattern-labels triangle_labels.csv --data-labels labels.csv --limit 10
"""

import argparse
import itertools
import logging
from pathlib import Path

from graphenum.cli._validators import _positive_int

logger = logging.getLogger(__name__)


def register_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the match subcommand."""
    parser = subparsers.add_parser(
        "match",
        help="Enumerate labeled induced subgraph isomorphisms",
        description=(
            "Find every embedding of a pattern graph as an induced subgraph of a "
            "data graph, optionally preserving vertex labels. Without label files "
            "all vertices are treated as identically labeled."
        )
    )

    parser.add_argument("--pattern", "-p", type=Path, default=None,
                        help="Pattern graph edge list")
    parser.add_argument("--data", "-d", type=Path, default=None,
                        help="Data graph edge list")
    parser.add_argument("--pattern-labels", type=Path, default=None,
                        help="CSV vertex,label for the pattern graph (optional)")
    parser.add_argument("--data-labels", type=Path, default=None,
                        help="CSV vertex,label for the data graph (optional)")
    parser.add_argument("--output", "-o", type=Path, default=None,
                        help="CSV file for mappings (default: print to stdout)")
    parser.add_argument("--config", "-c", type=Path, default=None,
                        help="Path to YAML/JSON config file (optional, CLI args override config values)")
    parser.add_argument("--limit", type=_positive_int, default=None,
                        help="Stop after this many mappings (default: all)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")

    parser.set_defaults(func=run_match)


def run_match(args: argparse.Namespace) -> int:
    """Execute the match command."""
    from graphenum.algorithms import subgraph_isomorphism_iterator
    from graphenum.cli.config import apply_config
    from graphenum.errors import GraphEnumError
    from graphenum.io import load_graph, load_labels, write_mappings_csv

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        args = apply_config(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"ERROR: Config file error: {e}")
        return 1

    if not args.pattern or not args.data:
        print("ERROR: --pattern and --data are required (via CLI or config file)")
        return 1

    if (args.pattern_labels is None) != (args.data_labels is None):
        print("ERROR: --pattern-labels and --data-labels must be given together")
        return 1

    try:
        pattern = load_graph(args.pattern)
        data = load_graph(args.data)
        labels_pattern = load_labels(args.pattern_labels) if args.pattern_labels else None
        labels_data = load_labels(args.data_labels) if args.data_labels else None
        mappings = subgraph_isomorphism_iterator(pattern, data, labels_pattern, labels_data)
    except (FileNotFoundError, ValueError, GraphEnumError) as e:
        print(f"ERROR: {e}")
        return 1

    logger.info(
        f"Pattern: {pattern.number_of_nodes()} vertices, {pattern.number_of_edges()} edges; "
        f"data: {data.number_of_nodes()} vertices, {data.number_of_edges()} edges"
    )

    if args.limit:
        mappings = itertools.islice(mappings, args.limit)
    found = list(mappings)

    print(f"\n{'='*70}")
    print("  Induced Subgraph Isomorphisms")
    print(f"{'='*70}")
    print(f"  Mappings found: {len(found)}" + (f" (limit {args.limit})" if args.limit else ""))

    if args.output:
        write_mappings_csv(found, args.output)
        logger.info(f"Saved: {args.output}")
    else:
        for mapping in found:
            print(', '.join(f"{u}->{w}" for u, w in sorted(mapping.items(), key=lambda kv: str(kv[0]))))

    return 0
