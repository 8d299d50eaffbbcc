"""
Read-only adjacency snapshots of networkx graphs.

The enumeration algorithms only need four things from a graph: the vertex set,
O(1) neighbor-set lookup, degrees and edge tests. ``neighbor_sets`` extracts
exactly that from a ``networkx.Graph`` once, as a dict of frozensets, so the hot
loops work on plain Python sets and set algebra instead of networkx views.

Self-loops are dropped because the algorithms are defined on simple graphs.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Hashable

import networkx as nx
from networkx.utils import not_implemented_for


__all__ = ['Adjacency', 'neighbor_sets', 'max_degree']

Adjacency = Dict[Hashable, FrozenSet[Hashable]]


@not_implemented_for("directed")
@not_implemented_for("multigraph")
def neighbor_sets(G: nx.Graph) -> Adjacency:
    """
    Snapshot the adjacency structure of an undirected simple graph.

    Args:
        G: Undirected networkx graph. Directed graphs and multigraphs raise
            ``networkx.NetworkXNotImplemented``.

    Returns:
        Dict mapping every vertex to the frozenset of its neighbors, in the
        graph's node insertion order.

    Examples:
        >>> import networkx as nx
        >>> adj = neighbor_sets(nx.path_graph(3))
        >>> sorted(adj[1])
        [0, 2]
    """
    return {
        v: frozenset(u for u in nbrs if u != v)
        for v, nbrs in G.adjacency()
    }


def max_degree(adj: Adjacency) -> int:
    """Largest degree in the snapshot, 0 for an empty graph."""
    return max((len(nbrs) for nbrs in adj.values()), default=0)
