"""
File input/output for graphs, labels and enumeration results.
"""

from graphenum.io.loaders import load_graph, load_labels
from graphenum.io.writers import (
    write_cliques_csv,
    write_mappings_csv,
    write_core_numbers_csv,
    atomic_write_json,
)

__all__ = [
    'load_graph',
    'load_labels',
    'write_cliques_csv',
    'write_mappings_csv',
    'write_core_numbers_csv',
    'atomic_write_json',
]
