"""
Unit tests for the k-core index and k-core reduction.

Scientific Validation:
    - Correctness: core numbers agree with networkx.core_number
    - Monotonicity: the (k+1)-core is contained in the k-core
    - Soundness/completeness of the reduction: no clique of the requested size
      is lost, no vertex that cannot belong to one is kept
"""

import networkx as nx
import pytest

from graphenum.algorithms.kcore import KCoreIndex, kcore_reduction
from graphenum.errors import InvalidCoreNumberError, InvalidVertexError


class TestKCoreIndex:
    """Test k-core queries on the precomputed index."""

    def test_cycle(self):
        """C5: the 0-, 1- and 2-cores are the whole cycle, the 3-core is empty."""
        index = KCoreIndex(nx.cycle_graph(5))
        for k in range(3):
            assert index.k_core(k) == set(range(5))
        assert index.k_core(3) == set()
        assert index.degeneracy == 2

    def test_nested_cores(self, seven_vertex_graph):
        index = KCoreIndex(seven_vertex_graph)
        assert index.n == 7
        assert index.k_core(3) == {1, 2, 3, 4}
        assert index.k_core(2) == {1, 2, 3, 4, 5}
        assert index.k_core(1) == set(range(1, 8))
        assert index.k_core(4) == set()

    def test_k_out_of_range_raises(self):
        index = KCoreIndex(nx.cycle_graph(5))
        with pytest.raises(InvalidCoreNumberError):
            index.k_core(5)
        with pytest.raises(InvalidCoreNumberError):
            index.k_core(-1)

    def test_invalid_core_number_is_value_error(self):
        index = KCoreIndex(nx.path_graph(3))
        with pytest.raises(ValueError, match=r"\[0, 3\)"):
            index.k_core(3)

    def test_empty_graph(self):
        index = KCoreIndex(nx.Graph())
        assert index.n == 0
        assert index.degeneracy == 0
        with pytest.raises(InvalidCoreNumberError):
            index.k_core(0)

    def test_result_is_fresh_set(self):
        """Mutating a returned core does not affect later queries."""
        index = KCoreIndex(nx.complete_graph(4))
        core = index.k_core(3)
        core.clear()
        assert index.k_core(3) == {0, 1, 2, 3}

    def test_core_number(self, seven_vertex_graph):
        index = KCoreIndex(seven_vertex_graph)
        assert index.core_number(1) == 3
        assert index.core_number(5) == 2
        assert index.core_number(6) == 1

    def test_core_number_unknown_vertex(self):
        index = KCoreIndex(nx.path_graph(3))
        with pytest.raises(InvalidVertexError):
            index.core_number(99)
        with pytest.raises(KeyError):
            index.core_number(99)

    def test_k_core_subgraph(self, seven_vertex_graph):
        H = KCoreIndex(seven_vertex_graph).k_core_subgraph(3)
        assert set(H.nodes) == {1, 2, 3, 4}
        assert H.number_of_edges() == 6

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_matches_networkx_core_number(self, seed):
        G = nx.gnp_random_graph(80, 0.1, seed=seed)
        index = KCoreIndex(G)
        assert index.core_numbers == nx.core_number(G)

    @pytest.mark.parametrize("seed", [0, 1])
    def test_monotonic(self, seed):
        """k_core(k+1) is a subset of k_core(k) for every valid k."""
        G = nx.gnp_random_graph(40, 0.25, seed=seed)
        index = KCoreIndex(G)
        for k in range(index.n - 1):
            assert index.k_core(k + 1) <= index.k_core(k)

    @pytest.mark.parametrize("seed", [0, 1])
    def test_min_degree_inside_core(self, seed):
        """Every vertex of the k-core has at least k neighbors inside it."""
        G = nx.gnp_random_graph(40, 0.2, seed=seed)
        index = KCoreIndex(G)
        for k in range(index.degeneracy + 1):
            core = index.k_core(k)
            for v in core:
                assert sum(1 for u in G.neighbors(v) if u in core) >= k


class TestKCoreReduction:
    """Test k-core decomposition for clique enumeration."""

    def test_empty_graph(self):
        H = kcore_reduction(nx.Graph(), min_clique_size=3)
        assert H.number_of_nodes() == 0

    def test_single_node(self):
        G = nx.Graph()
        G.add_node(1)
        assert kcore_reduction(G, min_clique_size=2).number_of_nodes() == 0
        assert kcore_reduction(G, min_clique_size=1).number_of_nodes() == 1

    def test_triangle_with_pendant(self):
        G = nx.Graph([(1, 2), (2, 3), (3, 1), (3, 4)])
        H = kcore_reduction(G, min_clique_size=3)
        assert set(H.nodes) == {1, 2, 3}
        assert kcore_reduction(G, min_clique_size=4).number_of_nodes() == 0

    def test_returns_copy(self):
        G = nx.complete_graph(4)
        H = kcore_reduction(G, min_clique_size=3)
        H.remove_node(0)
        assert G.number_of_nodes() == 4

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_completeness(self, seed):
        """No clique of size >= m is lost by the reduction."""
        G = nx.gnp_random_graph(40, 0.3, seed=seed)
        m = 4
        H = kcore_reduction(G, min_clique_size=m)
        original = {frozenset(c) for c in nx.find_cliques(G) if len(c) >= m}
        reduced = {frozenset(c) for c in nx.find_cliques(H) if len(c) >= m}
        assert original == reduced
