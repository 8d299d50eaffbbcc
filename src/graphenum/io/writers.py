"""
Writers for enumeration results.

Cliques and mappings are written as tidy CSV tables via pandas; run summaries
are written as JSON atomically (temp file in the target directory followed by
``os.replace()``), so an interrupted run never leaves a truncated summary.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Hashable, Iterable, Mapping, Set

import pandas as pd

__all__ = [
    'write_cliques_csv',
    'write_mappings_csv',
    'write_core_numbers_csv',
    'atomic_write_json',
]


def write_cliques_csv(cliques: Iterable[Set[Hashable]], path: Path) -> int:
    """
    Write cliques as one row per clique.

    Columns: ``clique_id``, ``size``, ``vertices`` (sorted, ``;`` separated).

    Returns:
        Number of cliques written.
    """
    rows = [
        {
            'clique_id': i,
            'size': len(clique),
            'vertices': ';'.join(sorted(str(v) for v in clique)),
        }
        for i, clique in enumerate(cliques)
    ]
    df = pd.DataFrame(rows, columns=['clique_id', 'size', 'vertices'])
    _ensure_parent(path)
    df.to_csv(path, index=False)
    return len(df)


def write_mappings_csv(mappings: Iterable[Mapping[Hashable, Hashable]], path: Path) -> int:
    """
    Write subgraph isomorphisms in long format.

    Columns: ``mapping_id``, ``pattern_vertex``, ``data_vertex``.

    Returns:
        Number of mappings written.
    """
    rows = []
    n_mappings = 0
    for i, mapping in enumerate(mappings):
        n_mappings += 1
        for pattern_vertex, data_vertex in mapping.items():
            rows.append({
                'mapping_id': i,
                'pattern_vertex': pattern_vertex,
                'data_vertex': data_vertex,
            })
    df = pd.DataFrame(rows, columns=['mapping_id', 'pattern_vertex', 'data_vertex'])
    _ensure_parent(path)
    df.to_csv(path, index=False)
    return n_mappings


def write_core_numbers_csv(core_numbers: Dict[Hashable, int], path: Path) -> None:
    """Write ``vertex,core_number`` rows, highest core first."""
    df = pd.DataFrame(
        {'vertex': list(core_numbers.keys()), 'core_number': list(core_numbers.values())}
    )
    df = df.sort_values('core_number', ascending=False, kind='stable')
    _ensure_parent(path)
    df.to_csv(path, index=False)


def atomic_write_json(path: str | os.PathLike, data: Any, *, indent: int = 2) -> None:
    """Write *data* as JSON atomically via temp-file + rename.

    Parameters
    ----------
    path:
        Destination file path.
    data:
        JSON-serializable object.
    indent:
        JSON indentation (default 2).
    """
    path = str(path)
    dir_path = os.path.dirname(path) or "."
    os.makedirs(dir_path, exist_ok=True)
    tmp_path: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w", dir=dir_path, suffix=".tmp", delete=False
        ) as tmp:
            tmp_path = tmp.name
            json.dump(data, tmp, indent=indent)
        os.replace(tmp_path, path)
    except BaseException:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


def _ensure_parent(path: Path) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
