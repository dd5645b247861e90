"""Pipeline stage names, used as timer keys on a Document."""

from __future__ import annotations

from enum import Enum


class Stage(str, Enum):
    """Every timed stage of the ADIF pipeline."""

    PARSE = "parse"
    LINT = "lint"
    SANITIZE = "sanitize"
    VALIDATE = "validate"
    DEDUPE = "dedupe"
    MORPH = "morph"
    UNROLL_POTA_REFS = "unroll_pota_refs"
    CHUNK = "chunk"
    TO_ADIF = "to_adif"
    TO_JSON = "to_json"


TOTAL_TIMER = "total"
