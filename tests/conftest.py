"""
Pytest configuration and shared fixtures for graphenum tests.

Provides the small hand-checked graphs used across the algorithm suites and
helpers for writing graph and label files for the I/O and CLI suites.
"""

from pathlib import Path

import networkx as nx
import pytest


@pytest.fixture
def seven_vertex_graph():
    """
    Seven vertices with maximal cliques {1,2,3,4}, {2,4,5}, {5,7} and {4,6}.
    """
    return nx.Graph([
        (1, 2), (1, 3), (1, 4), (2, 3), (2, 4), (3, 4),
        (2, 5), (4, 5), (5, 7), (4, 6),
    ])


@pytest.fixture
def labeled_data_graph():
    """Data graph for the triangle matching scenarios (vertex 3 labeled 2)."""
    G = nx.Graph([
        (1, 3), (2, 3), (3, 5), (3, 6), (4, 5), (5, 6), (5, 7), (6, 7),
    ])
    labels = {v: 1 for v in G}
    labels[3] = 2
    return G, labels


@pytest.fixture
def labeled_triangle():
    """Triangle pattern with vertex 1 labeled 2, the others 1."""
    G = nx.Graph([(1, 2), (1, 3), (2, 3)])
    labels = {1: 2, 2: 1, 3: 1}
    return G, labels


@pytest.fixture
def vf3_example():
    """Pattern and data graph from the VF3 paper walkthrough (exactly one mapping)."""
    pattern = nx.Graph([(1, 2), (1, 5), (2, 3), (2, 4), (2, 5), (3, 4), (4, 5)])
    pattern_labels = dict(zip(range(1, 6), [4, 1, 2, 4, 3]))

    data = nx.Graph([
        (1, 2), (1, 12), (2, 3), (2, 12), (2, 13), (3, 4), (3, 13), (4, 5),
        (4, 6), (4, 13), (5, 6), (6, 7), (6, 13), (7, 8), (8, 9), (8, 13),
        (9, 13), (9, 10), (10, 11), (10, 12), (11, 12), (12, 13),
    ])
    data_labels = dict(zip(range(1, 14), [3, 1, 2, 1, 4, 3, 4, 1, 2, 1, 4, 3, 4]))
    return pattern, data, pattern_labels, data_labels


def write_edge_list(path: Path, lines) -> Path:
    path.write_text('\n'.join(lines) + '\n')
    return path


@pytest.fixture
def edge_list_file(tmp_path):
    """Whitespace separated edge list: triangle 1-2-3 plus pendant edge 3-4 and isolated 5."""
    return write_edge_list(tmp_path / "edges.txt", [
        "# u v",
        "1 2",
        "2 3",
        "1 3",
        "3 4",
        "5",
    ])
