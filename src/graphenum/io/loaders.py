"""
Loaders for edge lists and vertex label tables.

Edge list format (whitespace or comma separated, ``#`` starts a comment):

    # u v
    1 2
    2 3
    4          <- isolated vertex

Label table format (CSV with header, first column vertex, second label):

    vertex,label
    1,C
    2,N

Vertex ids are kept as strings in both files so the two always agree.

Examples:
    >>> from pathlib import Path
    >>> from graphenum.io.loaders import load_graph, load_labels
    >>>
    >>> G = load_graph(Path("data.txt"))
    >>> labels = load_labels(Path("labels.csv"))
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Tuple

import networkx as nx
import pandas as pd

from graphenum.io.formats import sniff_delimiter

__all__ = ['load_graph', 'load_labels']


def load_graph(path: Path) -> nx.Graph:
    """
    Load an undirected simple graph from an edge list file.

    Lines with a single token add an isolated vertex; lines with two or more
    tokens add an edge between the first two (extra columns are ignored).

    Args:
        path: Edge list file

    Returns:
        networkx Graph with string vertex ids.

    Raises:
        FileNotFoundError: If path does not exist.
        ValueError: If a line contains a self-loop, or mixes whitespace into a
            file that uses an explicit delimiter.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Graph file not found: {path}")

    delimiter = sniff_delimiter(path)
    isolated, edge_lines = _split_lines(path, delimiter)

    G = nx.parse_edgelist(edge_lines, delimiter=delimiter, nodetype=str, data=False)
    G.add_nodes_from(isolated)

    loops = list(nx.selfloop_edges(G))
    if loops:
        raise ValueError(f"Self-loop on vertex {loops[0][0]!r} in {path}; graphs must be simple")

    return G


def _split_lines(path: Path, delimiter) -> Tuple[List[str], List[str]]:
    isolated: List[str] = []
    edge_lines: List[str] = []
    with open(path, 'r') as f:
        for lineno, raw in enumerate(f, start=1):
            line = raw.split('#', 1)[0].strip()
            if not line:
                continue
            tokens = [t for t in line.split(delimiter) if t.strip()]
            if delimiter is not None and any(len(t.split()) > 1 for t in tokens):
                raise ValueError(
                    f"Line {lineno} of {path} is not separated by {delimiter!r}: {line!r}"
                )
            if len(tokens) == 1:
                isolated.append(tokens[0].strip())
            else:
                edge_lines.append(
                    (delimiter or ' ').join(t.strip() for t in tokens[:2])
                )
    return isolated, edge_lines


def load_labels(path: Path) -> Dict[str, str]:
    """
    Load a vertex -> label table.

    Args:
        path: CSV file with a header row; column 1 = vertex, column 2 = label

    Returns:
        Dict mapping vertex id to label, both as strings.

    Raises:
        FileNotFoundError: If path does not exist.
        ValueError: If the table has fewer than two columns or a vertex
            appears twice.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Label file not found: {path}")

    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    if df.shape[1] < 2:
        raise ValueError(f"Label file needs two columns (vertex, label): {path}")

    vertices = df.iloc[:, 0].str.strip()
    labels = df.iloc[:, 1].str.strip()

    duplicated = vertices[vertices.duplicated()]
    if not duplicated.empty:
        raise ValueError(f"Vertex {duplicated.iloc[0]!r} has more than one label in {path}")

    return dict(zip(vertices, labels))
