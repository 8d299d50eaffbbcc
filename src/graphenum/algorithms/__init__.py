"""
Enumeration algorithms over simple undirected graphs.

This package provides the degeneracy/k-core substrate and the two lazy
backtracking searches built on explicit per-level state:
- Degeneracy ordering and clique complexity estimation
- K-core index with output-sensitive k-core queries
- Maximal clique enumeration (pivoted Bron-Kerbosch)
- Labeled induced subgraph isomorphism (VF3-style matching)
"""

from graphenum.algorithms.degeneracy import (
    DegeneracyOrdering,
    degeneracy_ordering,
    estimate_clique_complexity,
)

from graphenum.algorithms.kcore import (
    KCoreIndex,
    kcore_reduction,
)

from graphenum.algorithms.cliques import (
    MaximalCliqueIterator,
    maximal_clique_iterator,
    list_maximal_cliques,
)

from graphenum.algorithms.isomorphism import (
    SubgraphIsomorphismIterator,
    subgraph_isomorphism_iterator,
    get_all_subgraph_isomorphisms,
)

__all__ = [
    # Degeneracy
    'DegeneracyOrdering',
    'degeneracy_ordering',
    'estimate_clique_complexity',
    # K-cores
    'KCoreIndex',
    'kcore_reduction',
    # Maximal cliques
    'MaximalCliqueIterator',
    'maximal_clique_iterator',
    'list_maximal_cliques',
    # Subgraph isomorphism
    'SubgraphIsomorphismIterator',
    'subgraph_isomorphism_iterator',
    'get_all_subgraph_isomorphisms',
]
