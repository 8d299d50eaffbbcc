"""
graphenum - Lazy combinatorial enumeration over simple undirected graphs

Degeneracy ordering, k-core index, maximal clique enumeration and labeled
induced subgraph isomorphism on networkx graphs. Both searches are resumable
iterators that produce one solution per ``next()`` call.
"""

__version__ = "0.1.0"

from graphenum.errors import (
    GraphEnumError,
    InvalidVertexError,
    InvalidCoreNumberError,
    EmptyGraphError,
    LabelMappingError,
)
from graphenum.algorithms import (
    DegeneracyOrdering,
    degeneracy_ordering,
    estimate_clique_complexity,
    KCoreIndex,
    kcore_reduction,
    MaximalCliqueIterator,
    maximal_clique_iterator,
    list_maximal_cliques,
    SubgraphIsomorphismIterator,
    subgraph_isomorphism_iterator,
    get_all_subgraph_isomorphisms,
)

__all__ = [
    "GraphEnumError",
    "InvalidVertexError",
    "InvalidCoreNumberError",
    "EmptyGraphError",
    "LabelMappingError",
    "DegeneracyOrdering",
    "degeneracy_ordering",
    "estimate_clique_complexity",
    "KCoreIndex",
    "kcore_reduction",
    "MaximalCliqueIterator",
    "maximal_clique_iterator",
    "list_maximal_cliques",
    "SubgraphIsomorphismIterator",
    "subgraph_isomorphism_iterator",
    "get_all_subgraph_isomorphisms",
]
