"""
Lazy labeled induced subgraph isomorphism (VF3-style matching).

An induced subgraph isomorphism maps every pattern vertex to a distinct data
vertex with the same label such that two pattern vertices are adjacent if and
only if their images are adjacent. ``subgraph_isomorphism_iterator`` yields
every such mapping exactly once, one per ``next()`` call.

Engineering Design:
    - Label normalization: arbitrary hashable labels are translated once into
      dense class ids so all per-class bookkeeping is array indexed.
    - Static planning: pattern vertices are processed in a fixed order that
      prefers vertices tightly connected to the already ordered ones, then
      rare labels and high degrees. Every non-root vertex gets a parent, an
      earlier neighbor whose image restricts the candidate list.
    - Look-ahead: for each level the planner counts, per class, how many
      unprocessed pattern neighbors of the level vertex lie in the pattern
      frontier and how many lie beyond it. A data candidate must offer at
      least as many unmapped neighbors of each class in the data frontier
      (S2) and beyond it, or the branch is cut immediately.
    - Explicit search: one record per level holds the candidate list, the
      cursor into it and the undo information of the forward step, so the
      search resumes exactly where the previous solution was found.

Invariants:
    - The partial mapping is injective (mapped data vertices leave their
      class pool until the step is undone).
    - The mapping restricted to processed pattern vertices is an induced,
      label-preserving isomorphism onto its image.
    - S2 always equals the unmapped neighbors of the mapped data vertices.

References:
    - Carletti et al. (2017): "Challenging the Time Complexity of Exact
      Subgraph Isomorphism for Huge and Dense Graphs with VF3"

Examples:
    >>> import networkx as nx
    >>> from graphenum.algorithms.isomorphism import get_all_subgraph_isomorphisms
    >>>
    >>> triangle = nx.complete_graph(3)
    >>> data = nx.Graph([(0, 1), (1, 2), (2, 0), (2, 3)])
    >>> len(get_all_subgraph_isomorphisms(triangle, data))
    6
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Mapping, Optional, Set, Tuple

import networkx as nx
import numpy as np
from numpy.typing import NDArray

from graphenum.core.adjacency import Adjacency, neighbor_sets
from graphenum.errors import LabelMappingError

logger = logging.getLogger(__name__)

__all__ = [
    'SubgraphIsomorphismIterator',
    'subgraph_isomorphism_iterator',
    'get_all_subgraph_isomorphisms',
]


@dataclass
class _LevelState:
    """Search state of one level: candidates, cursor and undo record."""
    candidates: Optional[List[Hashable]] = None
    cursor: int = 0
    removed_from_frontier: bool = False
    added_to_frontier: List[Hashable] = field(default_factory=list)


@dataclass
class _MatchPlan:
    """Static preprocessing shared by every level of the search."""
    order: List[Hashable]
    parent: Dict[Hashable, Hashable]
    pattern_class: Dict[Hashable, int]
    data_class: Dict[Hashable, int]
    n_classes: int
    frontier_required: NDArray[np.intp]
    periphery_required: NDArray[np.intp]


class SubgraphIsomorphismIterator:
    """
    Single-pass iterator over induced subgraph isomorphisms pattern -> data.

    Yields dicts mapping every pattern vertex to a data vertex. Both graphs are
    snapshotted on construction; stopping early needs no cleanup.
    """

    def __init__(
        self,
        pattern: nx.Graph,
        data: nx.Graph,
        labels_pattern: Optional[Mapping[Hashable, Hashable]] = None,
        labels_data: Optional[Mapping[Hashable, Hashable]] = None,
    ):
        self._p_adj = neighbor_sets(pattern)
        self._d_adj = neighbor_sets(data)
        p_labels = _resolve_labels(self._p_adj, labels_pattern, "pattern")
        d_labels = _resolve_labels(self._d_adj, labels_data, "data")

        self.n_found = 0
        self._level = 0
        self._mapping: Dict[Hashable, Hashable] = {}
        self._mapped: Set[Hashable] = set()
        self._frontier: Set[Hashable] = set()

        self._exhausted = (
            not self._p_adj
            or not self._d_adj
            or len(self._p_adj) > len(self._d_adj)
        )
        if self._exhausted:
            logger.debug(
                f"Subgraph isomorphism: nothing to match "
                f"(pattern n={len(self._p_adj)}, data n={len(self._d_adj)})"
            )
            return

        self._plan = _plan_matching(self._p_adj, self._d_adj, p_labels, d_labels)
        self._pools: List[Set[Hashable]] = [set() for _ in range(self._plan.n_classes)]
        for w, c in self._plan.data_class.items():
            self._pools[c].add(w)
        self._levels = [_LevelState() for _ in self._plan.order]

        logger.debug(
            f"Subgraph isomorphism: pattern n={len(self._p_adj)}, "
            f"data n={len(self._d_adj)}, {self._plan.n_classes} label classes, "
            f"{len(self._p_adj) - len(self._plan.parent)} root vertices"
        )

    def __iter__(self) -> SubgraphIsomorphismIterator:
        return self

    def __next__(self) -> Dict[Hashable, Hashable]:
        while not self._exhausted:
            if self._level == -1:
                self._exhausted = True
                logger.debug(f"Subgraph isomorphism search done: {self.n_found} mappings")
                break
            mapping = self._branch_step()
            if mapping is not None:
                self.n_found += 1
                return mapping
        raise StopIteration

    def _branch_step(self) -> Optional[Dict[Hashable, Hashable]]:
        """
        Perform one transition of the search.

        Materializes the candidate list of the current level if needed, then
        either backtracks (candidates exhausted), skips an infeasible
        candidate, reports a complete mapping or descends one level.
        """
        level = self._level
        state = self._levels[level]
        u = self._plan.order[level]

        if state.candidates is None:
            state.candidates = self._pairing_candidates(u)
            state.cursor = 0

        if state.cursor >= len(state.candidates):
            state.candidates = None
            self._level -= 1
            if self._level >= 0:
                self._undo(self._level)
                self._levels[self._level].cursor += 1
            return None

        w = state.candidates[state.cursor]
        added = self._feasible(level, u, w)
        if added is None:
            state.cursor += 1
            return None

        if level + 1 == len(self._plan.order):
            state.cursor += 1
            solution = dict(self._mapping)
            solution[u] = w
            return solution

        self._apply(level, u, w, added)
        self._level += 1
        return None

    def _pairing_candidates(self, u: Hashable) -> List[Hashable]:
        pool = self._pools[self._plan.pattern_class[u]]
        if u in self._plan.parent:
            anchor = self._mapping[self._plan.parent[u]]
            return [w for w in self._d_adj[anchor] if w in pool]
        return list(pool)

    def _feasible(self, level: int, u: Hashable, w: Hashable) -> Optional[List[Hashable]]:
        """
        Check whether u -> w extends the partial mapping.

        Returns:
            The unmapped neighbors of w outside S2 (they join S2 if the pair
            is applied), or None if the pair is infeasible.
        """
        p_nbrs = self._p_adj[u]
        d_nbrs = self._d_adj[w]
        if len(d_nbrs) < len(p_nbrs):
            return None

        mapping = self._mapping
        if len(p_nbrs) + len(d_nbrs) < len(mapping):
            n_mapped_nbrs = 0
            for x in p_nbrs:
                if x in mapping:
                    if mapping[x] not in d_nbrs:
                        return None
                    n_mapped_nbrs += 1
            # any extra mapped neighbor of w would be an edge missing in the pattern
            if sum(1 for y in d_nbrs if y in self._mapped) != n_mapped_nbrs:
                return None
        else:
            for x, y in mapping.items():
                if (x in p_nbrs) != (y in d_nbrs):
                    return None

        frontier_classes: List[int] = []
        periphery_classes: List[int] = []
        added: List[Hashable] = []
        data_class = self._plan.data_class
        for y in d_nbrs:
            if y in self._mapped:
                continue
            if y in self._frontier:
                frontier_classes.append(data_class[y])
            else:
                periphery_classes.append(data_class[y])
                added.append(y)

        n_classes = self._plan.n_classes
        frontier_counts = np.bincount(np.array(frontier_classes, dtype=np.intp), minlength=n_classes)
        if np.any(frontier_counts < self._plan.frontier_required[level]):
            return None
        periphery_counts = np.bincount(np.array(periphery_classes, dtype=np.intp), minlength=n_classes)
        if np.any(periphery_counts < self._plan.periphery_required[level]):
            return None

        return added

    def _apply(self, level: int, u: Hashable, w: Hashable, added: List[Hashable]) -> None:
        state = self._levels[level]
        self._mapping[u] = w
        self._mapped.add(w)
        self._pools[self._plan.pattern_class[u]].discard(w)
        state.removed_from_frontier = w in self._frontier
        self._frontier.discard(w)
        state.added_to_frontier = added
        self._frontier.update(added)

    def _undo(self, level: int) -> None:
        """Exact inverse of ``_apply`` for the pair chosen at ``level``."""
        state = self._levels[level]
        u = self._plan.order[level]
        w = self._mapping.pop(u)
        self._mapped.discard(w)
        self._frontier.difference_update(state.added_to_frontier)
        if state.removed_from_frontier:
            self._frontier.add(w)
        self._pools[self._plan.pattern_class[u]].add(w)
        state.removed_from_frontier = False
        state.added_to_frontier = []


def _resolve_labels(
    adj: Adjacency,
    labels: Optional[Mapping[Hashable, Hashable]],
    graph_name: str,
) -> Dict[Hashable, Hashable]:
    """Label of every vertex of ``adj``; all vertices share one label if ``labels`` is None."""
    if labels is None:
        return dict.fromkeys(adj)
    resolved = {}
    for v in adj:
        try:
            resolved[v] = labels[v]
        except KeyError:
            raise LabelMappingError(v, graph_name) from None
    return resolved


def _plan_matching(
    p_adj: Adjacency,
    d_adj: Adjacency,
    p_labels: Dict[Hashable, Hashable],
    d_labels: Dict[Hashable, Hashable],
) -> _MatchPlan:
    class_ids: Dict[Hashable, int] = {}
    for label in list(p_labels.values()) + list(d_labels.values()):
        class_ids.setdefault(label, len(class_ids))
    pattern_class = {v: class_ids[label] for v, label in p_labels.items()}
    data_class = {w: class_ids[label] for w, label in d_labels.items()}
    n_classes = len(class_ids)

    order, parent = _processing_order(p_adj, d_adj, pattern_class, data_class, n_classes)
    frontier_required, periphery_required = _look_ahead_tables(p_adj, order, pattern_class, n_classes)

    return _MatchPlan(
        order=order,
        parent=parent,
        pattern_class=pattern_class,
        data_class=data_class,
        n_classes=n_classes,
        frontier_required=frontier_required,
        periphery_required=periphery_required,
    )


def _processing_order(
    p_adj: Adjacency,
    d_adj: Adjacency,
    pattern_class: Dict[Hashable, int],
    data_class: Dict[Hashable, int],
    n_classes: int,
) -> Tuple[List[Hashable], Dict[Hashable, Hashable]]:
    """
    Greedy processing order over the pattern and the parent of each vertex.

    Picks next the vertex with the most already-ordered neighbors; ties go to
    the vertex least likely to be matched by a random data vertex
    (P(label) * P(degree >= its degree)), then to the higher degree.
    """
    n_data = len(d_adj)
    class_probability = np.bincount(
        np.fromiter(data_class.values(), dtype=np.intp, count=n_data),
        minlength=n_classes,
    ) / n_data
    data_degrees = np.sort(np.fromiter((len(nbrs) for nbrs in d_adj.values()), dtype=np.intp, count=n_data))

    probability = {}
    for u, nbrs in p_adj.items():
        n_at_least = n_data - np.searchsorted(data_degrees, len(nbrs), side='left')
        probability[u] = class_probability[pattern_class[u]] * (n_at_least / n_data)

    connections = dict.fromkeys(p_adj, 0)
    remaining = dict.fromkeys(p_adj)
    order: List[Hashable] = []
    parent: Dict[Hashable, Hashable] = {}
    while remaining:
        u = max(remaining, key=lambda v: (connections[v], -probability[v], len(p_adj[v])))
        del remaining[u]
        order.append(u)
        for x in p_adj[u]:
            if x in remaining:
                connections[x] += 1
                parent.setdefault(x, u)

    return order, parent


def _look_ahead_tables(
    p_adj: Adjacency,
    order: List[Hashable],
    pattern_class: Dict[Hashable, int],
    n_classes: int,
) -> Tuple[NDArray[np.intp], NDArray[np.intp]]:
    """
    Per-level, per-class neighbor requirements of the level vertex.

    ``frontier[level][c]`` counts unprocessed neighbors of class c already
    adjacent to a processed vertex, ``periphery[level][c]`` the ones that are
    not. The frontier set is replayed along the processing order.
    """
    frontier_required = np.zeros((len(order), n_classes), dtype=np.intp)
    periphery_required = np.zeros((len(order), n_classes), dtype=np.intp)
    processed: Set[Hashable] = set()
    frontier: Set[Hashable] = set()
    for level, u in enumerate(order):
        for x in p_adj[u]:
            if x in processed:
                continue
            if x in frontier:
                frontier_required[level, pattern_class[x]] += 1
            else:
                periphery_required[level, pattern_class[x]] += 1
                frontier.add(x)
        frontier.discard(u)
        processed.add(u)
    return frontier_required, periphery_required


def subgraph_isomorphism_iterator(
    pattern: nx.Graph,
    data: nx.Graph,
    labels_pattern: Optional[Mapping[Hashable, Hashable]] = None,
    labels_data: Optional[Mapping[Hashable, Hashable]] = None,
) -> SubgraphIsomorphismIterator:
    """
    Iterate lazily over every induced subgraph isomorphism of pattern into data.

    Args:
        pattern: Pattern graph
        data: Data graph
        labels_pattern: Label of every pattern vertex (None: all vertices
            share one label)
        labels_data: Label of every data vertex (None: all vertices share
            one label)

    Returns:
        SubgraphIsomorphismIterator yielding dicts pattern vertex -> data vertex.
        An empty pattern or data graph yields nothing.

    Raises:
        LabelMappingError: If a vertex is missing from its label mapping.

    Examples:
        >>> import networkx as nx
        >>> pattern = nx.Graph([("a", "b")])
        >>> data = nx.path_graph(3)
        >>> labels_p = {"a": "x", "b": "y"}
        >>> labels_d = {0: "x", 1: "y", 2: "x"}
        >>> sorted(m["a"] for m in subgraph_isomorphism_iterator(pattern, data, labels_p, labels_d))
        [0, 2]
    """
    return SubgraphIsomorphismIterator(pattern, data, labels_pattern, labels_data)


def get_all_subgraph_isomorphisms(
    pattern: nx.Graph,
    data: nx.Graph,
    labels_pattern: Optional[Mapping[Hashable, Hashable]] = None,
    labels_data: Optional[Mapping[Hashable, Hashable]] = None,
) -> List[Dict[Hashable, Hashable]]:
    """Eager variant of ``subgraph_isomorphism_iterator``."""
    return list(subgraph_isomorphism_iterator(pattern, data, labels_pattern, labels_data))
