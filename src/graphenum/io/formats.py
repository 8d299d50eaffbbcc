"""
Delimiter detection for edge list files.

Edge lists come either whitespace separated (``1 2``, ``a\tb``) or with an
explicit separator (``1,2``, ``1;2``). Whitespace is the default; an explicit
separator is only assumed when the content clearly uses one.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Optional

__all__ = ['sniff_delimiter']

_EXPLICIT_DELIMITERS = ',;|'


def sniff_delimiter(path: Path, sample_size: int = 8192) -> Optional[str]:
    """
    Auto-detect the delimiter of an edge list.

    Uses Python's csv.Sniffer on the sample with ``#`` comments removed, with a
    character count on the first content line as fallback.

    Args:
        path: Path to edge list file
        sample_size: Bytes to sample for detection

    Returns:
        ',', ';' or '|', or None for whitespace separated files.
    """
    with open(path, 'r', encoding='utf-8', errors='ignore') as f:
        sample = f.read(sample_size)

    # comments are dropped the same way the loader drops them
    lines = [line.split('#', 1)[0].strip() for line in sample.splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        return None

    try:
        dialect = csv.Sniffer().sniff('\n'.join(lines), delimiters=_EXPLICIT_DELIMITERS)
        return dialect.delimiter
    except csv.Error:
        pass

    counts = {d: lines[0].count(d) for d in _EXPLICIT_DELIMITERS}
    if max(counts.values()) == 0:
        return None
    return max(counts, key=counts.get)
