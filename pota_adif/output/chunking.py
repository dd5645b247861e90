"""Size-bounded partitioning of records for upload-limited sinks."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

# Largest document a Firestore-style store accepts, in bytes.
CHUNK_MAX_SIZE = 2_000_000


def json_size(value: Any) -> int:
    """Byte length of the compact JSON encoding of ``value``."""
    return len(json.dumps(value, separators=(",", ":")).encode("utf-8"))


def partition(records: Sequence[Mapping[str, Any]], max_size: int = CHUNK_MAX_SIZE) -> list[list[int]]:
    """Split ``records`` into batches of positions.

    Everything lands in one batch when the whole list fits in ``max_size``.
    Otherwise batches are filled greedily in order; a record larger than
    ``max_size`` on its own gets a batch to itself.
    """
    if max_size < 1:
        raise ValueError("max_size must be >= 1")
    if not records:
        return []
    if json_size(list(records)) <= max_size:
        return [list(range(len(records)))]

    batches: list[list[int]] = []
    current: list[int] = []
    current_size = 0
    for position, record in enumerate(records):
        size = json_size(record)
        if current and current_size + size > max_size:
            batches.append(current)
            current = []
            current_size = 0
        current.append(position)
        current_size += size
    if current:
        batches.append(current)
    return batches
