"""Duplicate QSO detection by composite-key fingerprint."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pota_adif.fields.tables import UNIQUE_KEY_FIELDS

ABSENT = "-"


def fingerprint(record: Mapping[str, Any]) -> str:
    """``|``-joined values of the unique-key fields, ``-`` for absent ones."""
    return "|".join(
        str(record[name]) if name in record else ABSENT for name in UNIQUE_KEY_FIELDS
    )


def find_duplicates(records: Mapping[int, Mapping[str, Any]]) -> dict[int, Any]:
    """Map of record id to record for every repeat of an earlier fingerprint.

    The first occurrence of each fingerprint is never reported.
    """
    seen: set[str] = set()
    duplicates: dict[int, Any] = {}
    for record_id, record in records.items():
        key = fingerprint(record)
        if key in seen:
            duplicates[record_id] = record
        else:
            seen.add(key)
    return duplicates
