"""Record restructuring: field-set projections and the POTA reference unroll.

A POTA contact may name several parks on either side, written as a comma
separated list (a "n-fer"), and any single reference may carry a location
suffix after ``@``, as in ``US-0001@US-CA``. Unrolling turns such a record
into one record per (activator park, hunter park) pairing and writes the
individual references to ``pota_my_park_ref`` / ``pota_park_ref`` with the
suffixes in ``pota_my_location`` / ``pota_location``.
"""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass, field
from enum import Enum
from itertools import product
from typing import Any

from pota_adif.fields.tables import KNOWN_FIELDS, POTA_FIELDS

Record = dict[str, Any]

UNROLLED_FROM = "pota_unrolled_from_rec"

# (reference field, legacy alias, derived park field, derived location field)
_ACTIVATOR = ("my_pota_ref", "my_sig_info", "pota_my_park_ref", "pota_my_location")
_HUNTER = ("pota_ref", "sig_info", "pota_park_ref", "pota_location")
_DERIVED_FIELDS = (_ACTIVATOR[2], _ACTIVATOR[3], _HUNTER[2], _HUNTER[3])


class MorphMode(str, Enum):
    """How ``Document.morph`` restructures records."""

    ADIF_STRICT = "adif_strict"
    POTA_ONLY = "pota_only"
    POTA_REFS = "pota_refs"


PROJECTIONS: dict[MorphMode, frozenset[str]] = {
    MorphMode.ADIF_STRICT: KNOWN_FIELDS,
    MorphMode.POTA_ONLY: POTA_FIELDS,
}


def project(record: Record, allowed: Collection[str]) -> Record:
    return {key: value for key, value in record.items() if key in allowed}


@dataclass
class UnrollResult:
    """Outcome of unrolling one record.

    When ``replace`` is set the original record must be removed and
    ``records`` appended in its place; otherwise the record was updated in
    place and ``records`` is empty.
    """

    replace: bool = False
    records: list[Record] = field(default_factory=list)


def _split_location(ref: str) -> tuple[str, str]:
    park, _, location = ref.partition("@")
    return park.strip(), location.strip()


def _side_refs(value: Any) -> list[str | None]:
    """Individual references of one side, or [None] when the side has none."""
    if value is None:
        return [None]
    text = str(value)
    if "," not in text:
        return [text]
    return [part.strip() for part in text.split(",") if part.strip()] or [None]


def _stamp(record: Record, ref: str | None, side: tuple[str, ...]) -> None:
    if ref is None:
        return
    _, _, park_field, location_field = side
    park, location = _split_location(ref)
    record[park_field] = park
    if location:
        record[location_field] = location
    else:
        record.pop(location_field, None)


def _stamp_in_place(record: Record, record_id: int, side: tuple[str, ...]) -> None:
    ref_field, _, park_field, location_field = side
    ref = record.get(ref_field)
    if ref is None:
        return
    ref = str(ref)
    if "@" in ref:
        _stamp(record, ref, side)
        record[UNROLLED_FROM] = record_id
    else:
        record[park_field] = ref
        record.pop(location_field, None)


def normalize_aliases(record: Record) -> None:
    """Copy ``*_sig_info`` into the matching ``*_pota_ref`` when that is absent."""
    for ref_field, alias, _, _ in (_ACTIVATOR, _HUNTER):
        if alias in record and ref_field not in record:
            record[ref_field] = record[alias]


def unroll_record(record_id: int, record: Record) -> UnrollResult:
    """Unroll the park references of one record.

    Aliases are normalized on ``record`` itself. A record with a multi-park
    reference on either side is replaced by the cartesian product of its
    activator and hunter references; each derived record is a fresh copy
    stamped with ``pota_unrolled_from_rec``. Otherwise the record gains its
    derived park fields in place.
    """
    normalize_aliases(record)
    mine = record.get(_ACTIVATOR[0])
    theirs = record.get(_HUNTER[0])
    mine_multi = mine is not None and "," in str(mine)
    theirs_multi = theirs is not None and "," in str(theirs)

    if not (mine_multi or theirs_multi):
        _stamp_in_place(record, record_id, _ACTIVATOR)
        _stamp_in_place(record, record_id, _HUNTER)
        return UnrollResult()

    my_refs = _side_refs(mine)
    their_refs = _side_refs(theirs)
    result = UnrollResult(replace=True)
    for my_ref, their_ref in product(my_refs, their_refs):
        derived = {key: value for key, value in record.items() if key not in _DERIVED_FIELDS}
        _stamp(derived, my_ref, _ACTIVATOR)
        _stamp(derived, their_ref, _HUNTER)
        derived[UNROLLED_FROM] = record_id
        result.records.append(derived)
    return result
