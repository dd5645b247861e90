"""ADIF tokenizer and parser.

The parser is deliberately lenient. ADIF files in the wild rarely follow the
grammar exactly, so tags are picked out with tolerant patterns instead of a
strict scanner:

- The header is everything before ``<eoh>``. Tags populate a header map by
  lower-cased name and any other text lands in ``headers["strings"]``.
- The record block is lower-cased as a whole, split on ``<eor>`` and each
  chunk yields one record of ``name -> value`` strings.
- A file without ``<eoh>`` is accepted when it starts with a tag and holds
  at least one ``<eor>``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping

from pota_adif.telemetry.errors import ErrorCode, MalformedInputError, emit_structured_error

logger = logging.getLogger(__name__)

Record = dict[str, Any]

# Letters, digits, "_", the run from space to "." (which includes "," and "-"),
# "/", ":" and "@".
_VALUE_CHARS = r"[a-z0-9_\x20-\x2e/:@]"

_EOH = re.compile(r"<eoh>", re.IGNORECASE)
_EOR = re.compile(r"<eor>", re.IGNORECASE)
_HEADER_TOKEN = re.compile(
    rf"<([a-z_]*):[^>]+>({_VALUE_CHARS}+)?|([^<\r\n]+)",
    re.IGNORECASE,
)
_RECORD_TAG = re.compile(
    rf"<([a-z0-9_]*):([^>]+)>({_VALUE_CHARS}+)?",
    re.IGNORECASE,
)


@dataclass
class ParseResult:
    """Headers and records extracted from one ADIF text.

    ``first_index`` / ``last_index`` point into ``records`` at the
    chronologically earliest and latest QSO, or are None when no record
    carries a usable ``qso_date`` and ``time_on``.
    """

    headers: dict[str, Any] = field(default_factory=dict)
    records: list[Record] = field(default_factory=list)
    first_index: int | None = None
    last_index: int | None = None


def qso_timestamp(record: Mapping[str, Any]) -> float | None:
    """UTC epoch seconds from ``qso_date`` + ``time_on``, or None if unusable."""
    if "qso_date" not in record or "time_on" not in record:
        return None
    date = re.sub(r"\D", "", str(record["qso_date"]))
    time = re.sub(r"\D", "", str(record["time_on"])).ljust(6, "0")
    try:
        stamp = datetime.strptime(date[:8] + time[:6], "%Y%m%d%H%M%S")
    except ValueError:
        return None
    return stamp.replace(tzinfo=timezone.utc).timestamp()


def parse_headers(text: str) -> dict[str, Any]:
    headers: dict[str, Any] = {}
    for match in _HEADER_TOKEN.finditer(text):
        name, value, loose = match.groups()
        if loose is not None:
            loose = loose.strip()
            if loose:
                headers.setdefault("strings", []).append(loose)
        elif name:
            headers[name.lower()] = (value or "").strip()
    return headers


def _bounded(length: str, value: str) -> str:
    size = length.split(":", 1)[0].strip()
    if size.isdigit():
        return value[: int(size)]
    return value


def parse_record(chunk: str) -> Record:
    """Extract ``<name:len>value`` tags of one record chunk, sorted by name."""
    fields: Record = {}
    for name, length, value in _RECORD_TAG.findall(chunk):
        value = _bounded(length, value).strip()
        if name and value:
            fields[name] = value
    return dict(sorted(fields.items()))


def parse_records(text: str, overrides: Mapping[str, str] | None = None) -> ParseResult:
    result = ParseResult()
    # Seeded so that future-dated QSOs never become "first".
    earliest = datetime.now(timezone.utc).timestamp()
    latest = 0.0

    for chunk in text.lower().split("<eor>"):
        chunk = chunk.strip()
        if not chunk:
            continue
        record = parse_record(chunk)
        if not record:
            continue
        if overrides:
            record.update(overrides)
        result.records.append(record)

        stamp = qso_timestamp(record)
        if stamp is None:
            continue
        index = len(result.records) - 1
        if stamp < earliest:
            earliest = stamp
            result.first_index = index
        if stamp > latest:
            latest = stamp
            result.last_index = index
    return result


def is_well_formed(raw: str) -> bool:
    if _EOH.search(raw):
        return True
    return bool(_EOR.search(raw)) and raw.strip().startswith("<")


def parse(raw: str, overrides: Mapping[str, str] | None = None) -> ParseResult:
    """Parse raw ADIF text.

    Raises MalformedInputError when the text has neither ``<eoh>`` nor a
    header-less record block.
    """
    if not is_well_formed(raw):
        emit_structured_error(
            logger,
            code=ErrorCode.PARSE_MALFORMED_INPUT,
            message="No <eoh> marker and no header-less record block",
            suppressed=False,
            stage="parse",
            details={"size": len(raw)},
        )
        raise MalformedInputError("Malformed input: expected <eoh> or a record block")

    parts = _EOH.split(raw, maxsplit=1)
    if len(parts) == 2:
        header_text, record_text = parts
    else:
        header_text, record_text = "", raw

    result = parse_records(record_text, overrides)
    result.headers = parse_headers(header_text)
    logger.debug(
        "Parsed ADIF text",
        extra={"records": len(result.records), "headers": len(result.headers)},
    )
    return result
