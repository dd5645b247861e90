"""Structural lint of raw ADIF text, run before parsing."""

from __future__ import annotations

import re
from typing import Literal

from pota_adif.fields.tables import BASE_REQUIRED_FIELDS

BAD_FORM = "ADIF requires <eoh> and at least one <eor>"
DOCUMENT_KEY = "@"

_BASIC_SHAPE = re.compile(r"<eoh>.*<eor>", re.IGNORECASE | re.DOTALL)
_EOR = re.compile(r"<eor>", re.IGNORECASE)


def lint_pota(text: str) -> dict[int | str, list[str]]:
    """Report, per ``<eor>`` chunk index, the base required tags that are missing."""
    problems: dict[int | str, list[str]] = {}
    chunks = [(i, chunk) for i, chunk in enumerate(_EOR.split(text)) if chunk.strip()]
    if not chunks:
        return {DOCUMENT_KEY: [BAD_FORM]}
    for index, chunk in chunks:
        missing = [
            name
            for name in BASE_REQUIRED_FIELDS
            if not re.search(rf"<{name}:[0-9]*>", chunk, re.IGNORECASE)
        ]
        if missing:
            problems[index] = missing
    return problems


def lint(text: str, mode: Literal["default", "pota"] = "default") -> dict[int | str, list[str]]:
    """Empty dict when ``text`` looks like ADIF, else a map of problems.

    The ``"@"`` key carries document-level problems. In ``pota`` mode each
    record chunk is also checked for the base required fields.
    """
    text = text.strip()
    if not _BASIC_SHAPE.search(text):
        return {DOCUMENT_KEY: [BAD_FORM]}
    if mode == "pota":
        return lint_pota(text)
    return {}
