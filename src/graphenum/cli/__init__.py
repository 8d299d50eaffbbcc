"""
graphenum CLI - Command-line interface for graph enumeration.

Commands:
    graphenum degeneracy  - Degeneracy and degeneracy ordering of a graph
    graphenum kcore       - K-core decomposition and k-core queries
    graphenum cliques     - Enumerate maximal cliques
    graphenum match       - Enumerate labeled induced subgraph isomorphisms
"""

import argparse
import sys
from typing import Optional, List


def main(args: Optional[List[str]] = None) -> int:
    """Main CLI dispatcher for graphenum."""
    parser = argparse.ArgumentParser(
        prog="graphenum",
        description="Lazy combinatorial enumeration over simple undirected graphs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  degeneracy  Degeneracy and degeneracy ordering of a graph
  kcore       K-core decomposition and k-core queries
  cliques     Enumerate maximal cliques
  match       Enumerate labeled induced subgraph isomorphisms

Examples:
  graphenum degeneracy --input edges.txt
  graphenum kcore --input edges.txt --k 3 --output cores.csv
  graphenum cliques --input edges.txt --min-size 3 --output results/cliques.csv
  graphenum match --pattern triangle.txt --data edges.txt --data-labels labels.csv
        """
    )

    parser.add_argument(
        "--version", "-V",
        action="version",
        version="%(prog)s 0.1.0"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    from graphenum.cli import cores, cliques, match
    cores.register_parser(subparsers)
    cliques.register_parser(subparsers)
    match.register_parser(subparsers)

    raw_args = list(sys.argv[1:] if args is None else args)
    parsed_args = parser.parse_args(raw_args)

    if parsed_args.command is None:
        parser.print_help()
        return 0

    # Arguments after the subcommand name, used to detect explicit overrides of config values
    parsed_args.cli_args = raw_args[raw_args.index(parsed_args.command) + 1:]

    return parsed_args.func(parsed_args)


if __name__ == "__main__":
    sys.exit(main())
