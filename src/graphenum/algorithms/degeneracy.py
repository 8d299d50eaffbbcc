"""
Degeneracy ordering and clique complexity estimation.

The degeneracy d(G) of a graph is the smallest d such that every subgraph has a
vertex of degree at most d. Repeatedly removing a vertex of minimum remaining
degree produces a degeneracy ordering: every vertex has at most d neighbors
that come later in the ordering.

Both the k-core index and the maximal clique enumerator are built on this
ordering. The clique search uses it as its sequence of root vertices, which
bounds the depth of every search tree by d and the number of maximal cliques by
n * 3^(d/3).

Theoretical Foundation:
    With bucket queues indexed by remaining degree the removal loop runs in
    O(n + m): each edge moves one endpoint down exactly one bucket, and after
    removing a vertex from bucket i the minimum remaining degree is at least
    i - 1, so the bucket scan never restarts from zero.

References:
    - Matula & Beck (1983): "Smallest-last ordering and clustering and graph
      coloring algorithms"
    - Eppstein et al. (2010): "Listing All Maximal Cliques in Sparse Graphs in
      Near-Optimal Time"

Examples:
    >>> import networkx as nx
    >>> from graphenum.algorithms.degeneracy import degeneracy_ordering
    >>>
    >>> d, ordering = degeneracy_ordering(nx.complete_graph(5))
    >>> d
    4
    >>> len(ordering)
    5
"""

from __future__ import annotations

import logging
from typing import Dict, Hashable, List, NamedTuple

import networkx as nx

from graphenum.core.adjacency import Adjacency, max_degree, neighbor_sets
from graphenum.errors import EmptyGraphError

logger = logging.getLogger(__name__)

__all__ = [
    'DegeneracyOrdering',
    'degeneracy_ordering',
    'estimate_clique_complexity',
]


class DegeneracyOrdering(NamedTuple):
    """Degeneracy of a graph together with one of its degeneracy orderings."""
    degeneracy: int
    ordering: List[Hashable]


def degeneracy_ordering(G: nx.Graph) -> DegeneracyOrdering:
    """
    Compute the degeneracy and a degeneracy ordering of G.

    Algorithm:
        1. File every vertex into the bucket of its degree
        2. Take a vertex from the lowest non-empty bucket i, append it to the
           ordering and record d = max(d, i)
        3. Move every still-present neighbor one bucket down
        4. Resume the bucket scan at i - 1

    Complexity: O(V + E)

    Args:
        G: Undirected simple graph (self-loops are ignored)

    Returns:
        DegeneracyOrdering(degeneracy, ordering), unpackable as a tuple.

    Raises:
        EmptyGraphError: If G has no vertices.

    Examples:
        >>> import networkx as nx
        >>> degeneracy_ordering(nx.cycle_graph(6)).degeneracy
        2
        >>> degeneracy_ordering(nx.balanced_tree(2, 3)).degeneracy
        1
    """
    adj = neighbor_sets(G)
    if not adj:
        raise EmptyGraphError("Degeneracy is undefined for a graph without vertices")
    return _degeneracy_from_adjacency(adj)


def _degeneracy_from_adjacency(adj: Adjacency) -> DegeneracyOrdering:
    """Bucket-queue peeling on an adjacency snapshot (``adj`` must be non-empty)."""
    degrees: Dict[Hashable, int] = {v: len(nbrs) for v, nbrs in adj.items()}
    # dicts as insertion-ordered sets keep the ordering reproducible
    buckets: List[Dict[Hashable, None]] = [{} for _ in range(max_degree(adj) + 1)]
    for v, degree in degrees.items():
        buckets[degree][v] = None

    ordering: List[Hashable] = []
    degeneracy = 0
    i = 0
    for _ in range(len(adj)):
        while not buckets[i]:
            i += 1
        degeneracy = max(degeneracy, i)

        v, _ = buckets[i].popitem()
        del degrees[v]
        ordering.append(v)

        for u in adj[v]:
            if u not in degrees:
                continue
            degree = degrees[u]
            del buckets[degree][u]
            buckets[degree - 1][u] = None
            degrees[u] = degree - 1

        i = max(i - 1, 0)

    logger.debug(
        f"Degeneracy ordering: {len(ordering)} vertices, degeneracy d={degeneracy}"
    )

    return DegeneracyOrdering(degeneracy, ordering)


def estimate_clique_complexity(G: nx.Graph) -> Dict:
    """
    Estimate the cost of maximal clique enumeration on G.

    Complexity Estimates:
        - Maximal cliques bounded by: n * 3^(d/3) where d = degeneracy
        - Moon-Moser bound (worst case): 3^(n/3) for n-vertex graphs

    Args:
        G: Input graph

    Returns:
        Dictionary with complexity estimates:
            - 'n': Number of vertices
            - 'm': Number of edges
            - 'density': Edge density (0 to 1)
            - 'degeneracy': Graph degeneracy
            - 'estimated_cliques': Upper bound on number of maximal cliques
            - 'difficulty': 'trivial', 'easy', 'moderate', 'hard' or 'very_hard'

    Decision Heuristics:
        - degeneracy <= 5: easy
        - degeneracy <= 15: moderate
        - degeneracy <= 25: hard
        - degeneracy > 25: very_hard

    Examples:
        >>> import networkx as nx
        >>> stats = estimate_clique_complexity(nx.complete_graph(20))
        >>> stats['degeneracy'], stats['density']
        (19, 1.0)
    """
    adj = neighbor_sets(G)
    n = len(adj)
    m = sum(len(nbrs) for nbrs in adj.values()) // 2

    if n == 0:
        return {
            'n': 0,
            'm': 0,
            'density': 0.0,
            'degeneracy': 0,
            'estimated_cliques': 0,
            'difficulty': 'trivial',
        }

    density = 2 * m / (n * (n - 1)) if n > 1 else 0.0
    degeneracy = _degeneracy_from_adjacency(adj).degeneracy

    estimated_cliques = n * (3 ** (degeneracy / 3))

    if degeneracy <= 5:
        difficulty = 'easy'
    elif degeneracy <= 15:
        difficulty = 'moderate'
    elif degeneracy <= 25:
        difficulty = 'hard'
    else:
        difficulty = 'very_hard'

    result = {
        'n': n,
        'm': m,
        'density': round(density, 4),
        'degeneracy': degeneracy,
        'estimated_cliques': int(estimated_cliques),
        'difficulty': difficulty,
    }

    logger.debug(
        f"Complexity estimate: n={n}, m={m}, density={density:.3f}, "
        f"degeneracy={degeneracy}, est_cliques={int(estimated_cliques)}, "
        f"difficulty={difficulty}"
    )

    return result
