"""
Lazy maximal clique enumeration (pivoted Bron-Kerbosch, degeneracy roots).

A maximal clique is a clique that cannot be extended by any further vertex.
``maximal_clique_iterator`` yields every maximal clique exactly once, one per
``next()`` call, without materializing the full result and without recursion.

Algorithm:
    The recursive Bron-Kerbosch search with Tomita pivoting is run as an
    explicit state machine. For every root v in a degeneracy ordering the
    neighbors of v are split into candidates C (not yet used as a root) and
    excluded vertices F (already used as a root). At every level:

    - C and F empty: the current clique K is maximal, report it and backtrack
    - C empty, F not: nothing new can be reached, backtrack
    - otherwise choose a pivot p in C ∪ F maximizing |C ∩ N(p)| and branch on
      each u in C \\ N(p): C' = C ∩ N(u), F' = F ∩ N(u), then move u from C to F

    Each recursion frame becomes one slot in per-level arrays (candidates,
    excluded, branch list, branch cursor). Since every root has at most d
    later neighbors, d + 1 slots are enough, where d is the degeneracy.

Complexity: O(d * n * 3^(d/3)) for the full enumeration.

References:
    - Tomita et al. (2006): "The worst-case time complexity for generating all
      maximal cliques and computational experiments"
    - Eppstein et al. (2010): "Listing All Maximal Cliques in Sparse Graphs in
      Near-Optimal Time"

Examples:
    >>> import networkx as nx
    >>> from graphenum.algorithms.cliques import list_maximal_cliques
    >>>
    >>> G = nx.Graph([(1, 2), (1, 3), (2, 3), (3, 4)])
    >>> sorted(sorted(c) for c in list_maximal_cliques(G))
    [[1, 2, 3], [3, 4]]
"""

from __future__ import annotations

import logging
from typing import Hashable, Iterator, List, Optional, Set

import networkx as nx

from graphenum.algorithms.degeneracy import _degeneracy_from_adjacency
from graphenum.algorithms.kcore import KCoreIndex
from graphenum.core.adjacency import neighbor_sets

logger = logging.getLogger(__name__)

__all__ = [
    'MaximalCliqueIterator',
    'maximal_clique_iterator',
    'list_maximal_cliques',
]


class MaximalCliqueIterator:
    """
    Single-pass iterator over the maximal cliques of a graph.

    The adjacency of the graph is snapshotted on construction. The iterator is
    not restartable; call ``maximal_clique_iterator`` again for a second pass.
    Stopping early needs no cleanup.
    """

    def __init__(self, G: nx.Graph, min_size: int = 1):
        if min_size < 1:
            raise ValueError(f"min_size must be at least 1, got {min_size}")
        self.min_size = min_size
        self.n_found = 0

        self._adj = neighbor_sets(G)
        if min_size > 1:
            self._adj = _restrict_to_core(G, self._adj, min_size - 1)

        self._exhausted = not self._adj
        self._level = -1
        self._clique: List[Hashable] = []
        self._looked_at: Set[Hashable] = set()

        if self._exhausted:
            self._roots: Iterator[Hashable] = iter(())
            depth = 0
        else:
            degeneracy, ordering = _degeneracy_from_adjacency(self._adj)
            self._roots = iter(ordering)
            depth = degeneracy + 1

        self._candidates: List[Set[Hashable]] = [set() for _ in range(depth)]
        self._excluded: List[Set[Hashable]] = [set() for _ in range(depth)]
        self._branches: List[List[Hashable]] = [[] for _ in range(depth)]
        self._cursor: List[int] = [0] * depth

    def __iter__(self) -> MaximalCliqueIterator:
        return self

    def __next__(self) -> Set[Hashable]:
        while not self._exhausted:
            clique = self._next_maximal_clique()
            if clique is None:
                self._exhausted = True
                logger.debug(f"Maximal clique enumeration done: {self.n_found} cliques")
                break
            if len(clique) >= self.min_size:
                self.n_found += 1
                return clique
        raise StopIteration

    def _next_maximal_clique(self) -> Optional[Set[Hashable]]:
        """Advance the search until a maximal clique is found or all roots are used."""
        while True:
            if self._level == -1:
                root = next(self._roots, _DONE)
                if root is _DONE:
                    return None
                self._start_root(root)
            else:
                level = self._level
                branches = self._branches[level]
                if self._cursor[level] == len(branches):
                    self._leave_level()
                    continue
                u = branches[self._cursor[level]]
                self._cursor[level] += 1
                self._descend(level, u)

            clique = self._enter_level()
            if clique is not None:
                return clique

    def _start_root(self, root: Hashable) -> None:
        nbrs = self._adj[root]
        self._candidates[0] = {u for u in nbrs if u not in self._looked_at}
        self._excluded[0] = {u for u in nbrs if u in self._looked_at}
        self._looked_at.add(root)
        self._clique.append(root)
        self._level = 0

    def _descend(self, level: int, u: Hashable) -> None:
        nbrs = self._adj[u]
        self._candidates[level + 1] = self._candidates[level] & nbrs
        self._excluded[level + 1] = self._excluded[level] & nbrs
        self._candidates[level].discard(u)
        self._excluded[level].add(u)
        self._clique.append(u)
        self._level = level + 1

    def _leave_level(self) -> None:
        self._clique.pop()
        self._level -= 1

    def _enter_level(self) -> Optional[Set[Hashable]]:
        """
        Inspect the level just entered.

        Reports the clique and backtracks if it is maximal, backtracks if no
        candidates remain, and otherwise picks the pivot and prepares the
        branch list for this level.
        """
        level = self._level
        candidates = self._candidates[level]
        excluded = self._excluded[level]

        if not candidates:
            clique = set(self._clique) if not excluded else None
            self._leave_level()
            return clique

        pivot_nbrs = max(
            (self._adj[p] for p in _chain(candidates, excluded)),
            key=lambda nbrs: len(candidates & nbrs),
        )
        self._branches[level] = [u for u in candidates if u not in pivot_nbrs]
        self._cursor[level] = 0
        return None


_DONE = object()


def _chain(first: Set[Hashable], second: Set[Hashable]) -> Iterator[Hashable]:
    yield from first
    yield from second


def _restrict_to_core(G: nx.Graph, adj, k: int):
    """Adjacency snapshot restricted to the k-core (empty if k >= n)."""
    index = KCoreIndex(G)
    if k >= index.n:
        return {}
    core = index.k_core(k)
    logger.debug(f"Clique search restricted to the {k}-core: {len(core)}/{index.n} vertices")
    return {v: nbrs & core for v, nbrs in adj.items() if v in core}


def maximal_clique_iterator(G: nx.Graph, min_size: int = 1) -> MaximalCliqueIterator:
    """
    Iterate lazily over every maximal clique of G.

    Args:
        G: Undirected simple graph. Must not be mutated while iterating
            (the adjacency is snapshotted, later changes are not seen).
        min_size: Only report maximal cliques with at least this many
            vertices. Values above 1 restrict the search to the
            (min_size-1)-core, which never loses a qualifying clique.

    Returns:
        MaximalCliqueIterator yielding each maximal clique once as a new set.

    Raises:
        ValueError: If min_size < 1.

    Examples:
        >>> import networkx as nx
        >>> it = maximal_clique_iterator(nx.complete_graph(4))
        >>> sorted(next(it))
        [0, 1, 2, 3]
    """
    return MaximalCliqueIterator(G, min_size=min_size)


def list_maximal_cliques(G: nx.Graph, min_size: int = 1) -> List[Set[Hashable]]:
    """Eager variant of ``maximal_clique_iterator``."""
    return list(maximal_clique_iterator(G, min_size=min_size))
