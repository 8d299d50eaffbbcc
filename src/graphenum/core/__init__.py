"""
Graph substrate shared by all algorithms.
"""

from graphenum.core.adjacency import (
    Adjacency,
    neighbor_sets,
    max_degree,
)

__all__ = [
    'Adjacency',
    'neighbor_sets',
    'max_degree',
]
