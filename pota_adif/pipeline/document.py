"""The Document aggregate: one ADIF log and everything the pipeline learns about it.

Records live in an insertion-ordered arena keyed by stable integer ids. An
id is assigned once, never reused, and disappears when its record is
removed, so keys in ``errors`` and ``duplicates`` keep pointing at the
record they were reported for even after later stages remove or append
records.

Every stage is a method that can be called on its own, in any order, or
skipped. Stage durations accumulate in ``timers`` (milliseconds).
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pota_adif.fields.tables import BASE_REQUIRED_FIELDS, POTA_OPTIONAL_FIELDS, POTA_REQUIRED_FIELDS
from pota_adif.output.adif_writer import render_adif
from pota_adif.output.chunking import CHUNK_MAX_SIZE, partition
from pota_adif.output.json_writer import render_json
from pota_adif.pipeline import linter, parser
from pota_adif.pipeline.dedupe import find_duplicates
from pota_adif.pipeline.morph import PROJECTIONS, MorphMode, project, unroll_record
from pota_adif.pipeline.sanitizer import filter_record, sanitize_record
from pota_adif.pipeline.source import Source, load_source, read_file
from pota_adif.pipeline.stages import TOTAL_TIMER, Stage
from pota_adif.pipeline.validator import DEFAULT_MAX_QSO_RATE, check_duration, validate_record

logger = logging.getLogger(__name__)

Record = dict[str, Any]

DOCUMENT_KEY = "@"
QPS_MARKER = "qps"


class DocumentMode(str, Enum):
    """Validation profile of a Document."""

    DEFAULT = "default"
    POTA = "pota"


class Document:
    """A single ADIF log moving through the pipeline."""

    def __init__(
        self,
        data: str | Path | None = None,
        *,
        mode: DocumentMode | str = DocumentMode.DEFAULT,
        check_qps: bool = True,
        max_qso_rate: float = DEFAULT_MAX_QSO_RATE,
    ) -> None:
        self.mode = DocumentMode(mode)
        self.check_qps = check_qps
        self.max_qso_rate = max_qso_rate

        self.raw = ""
        self.filename = ""
        self.path = ""
        self.size = 0

        self.headers: dict[str, Any] = {}
        self.errors: dict[int | str, list[str]] = {}
        self.duplicates: dict[int, Record] = {}
        self.sources: list[list[str]] = []
        self.chunks: list[list[int]] = []
        self.overrides: dict[str, str] = {}
        self.first_id: int | None = None
        self.last_id: int | None = None

        self._records: dict[int, Record] = {}
        self._next_id = 0
        self._timers: dict[str, float] = {}

        if data:
            self.from_source(data)

    # --- Input ---

    def attach_source(self, source: Source) -> None:
        """Adopt ``source`` as the raw text to parse and its provenance."""
        self.raw = source.text
        self.filename = source.filename
        self.path = source.path
        self.size = source.size

    def from_source(self, data: str | Path) -> None:
        """Load raw ADIF text, or the file ``data`` names."""
        self.attach_source(load_source(data))

    def from_file(self, path: str | Path) -> None:
        self.attach_source(read_file(path))

    def from_string(self, text: str) -> None:
        self.attach_source(Source(text=text, size=len(text.encode("utf-8"))))

    # --- Settings ---

    def set_mode(self, mode: DocumentMode | str) -> None:
        self.mode = DocumentMode(mode)

    def override_field(self, name: str, value: str) -> None:
        """Force ``name`` to ``value`` on every record of the next parse."""
        self.overrides[name.strip().lower()] = value.strip()

    # --- Timers ---

    @contextmanager
    def timed(self, name: str | Stage) -> Iterator[None]:
        start = time.perf_counter_ns()
        try:
            yield
        finally:
            self.add_timer(name, (time.perf_counter_ns() - start) / 1e6)

    def add_timer(self, name: str | Stage, value: float) -> None:
        key = str(getattr(name, "value", name)).strip().lower()
        self._timers[key] = round(self._timers.get(key, 0.0) + value, 3)

    def get_timer(self, name: str | Stage) -> float:
        return self._timers.get(str(getattr(name, "value", name)).strip().lower(), 0.0)

    def get_timers(self) -> dict[str, float]:
        """All stage timers plus their computed ``total``."""
        timers = {name: value for name, value in self._timers.items() if name != TOTAL_TIMER}
        timers[TOTAL_TIMER] = round(sum(timers.values()), 3)
        return timers

    # --- Headers ---

    def add_header(self, *parts: str) -> None:
        """``add_header(line)`` adds a free-form line, ``add_header(name, value)`` a tag."""
        if len(parts) == 1:
            self.headers.setdefault("strings", []).append(parts[0].strip())
        elif len(parts) == 2:
            self.headers[parts[0].strip().lower()] = parts[1].strip()
        else:
            raise TypeError("add_header() takes a line or a name and a value")

    def get_headers(self, name: str | None = None) -> Any:
        if name is None:
            return dict(self.headers)
        return self.headers.get(name.strip().lower(), "")

    # --- Records ---

    @property
    def count(self) -> int:
        return len(self._records)

    @property
    def records(self) -> Mapping[int, Record]:
        """Read-only view of the arena, in insertion order."""
        return MappingProxyType(self._records)

    def entries(self) -> list[Record]:
        return list(self._records.values())

    def add_record(self, record: Mapping[str, Any]) -> int:
        record_id = self._next_id
        self._next_id += 1
        self._records[record_id] = dict(record)
        return record_id

    def add_records(self, records: Iterable[Mapping[str, Any]]) -> list[int]:
        return [self.add_record(record) for record in records]

    def remove_record(self, record_id: int) -> Record:
        return self._records.pop(record_id)

    @property
    def first_record(self) -> Record | None:
        return self._records.get(self.first_id) if self.first_id is not None else None

    @property
    def last_record(self) -> Record | None:
        return self._records.get(self.last_id) if self.last_id is not None else None

    # --- Stages ---

    def lint(self) -> dict[int | str, list[str]]:
        with self.timed(Stage.LINT):
            return linter.lint(self.raw, self.mode.value)

    def parse(self) -> None:
        """Replace the records and headers with those parsed from ``raw``."""
        with self.timed(Stage.PARSE):
            result = parser.parse(self.raw, self.overrides)
            self._records = {}
            self._next_id = 0
            ids = self.add_records(result.records)
            self.headers = result.headers
            self.first_id = ids[result.first_index] if result.first_index is not None else None
            self.last_id = ids[result.last_index] if result.last_index is not None else None
        logger.info("Parsed document", extra={"source_file": self.filename, "count": self.count})

    def sanitize(self) -> None:
        with self.timed(Stage.SANITIZE):
            for record_id, record in self._records.items():
                self._records[record_id] = sanitize_record(record)

    def validate(self) -> None:
        """Rebuild ``errors`` from the current records.

        In POTA mode the POTA required set applies, and invalid optional
        fields are dropped from the record instead of being reported.
        """
        pota = self.mode is DocumentMode.POTA
        required = POTA_REQUIRED_FIELDS if pota else BASE_REQUIRED_FIELDS
        with self.timed(Stage.VALIDATE):
            self.errors = {}
            for record_id, record in self._records.items():
                result = validate_record(record, required)
                if result is True:
                    continue
                if pota:
                    record, result = filter_record(record, result, POTA_OPTIONAL_FIELDS)
                    self._records[record_id] = record
                if result:
                    self.errors[record_id] = result
            if self.check_qps and not check_duration(self._records.values(), self.max_qso_rate):
                self.errors.setdefault(DOCUMENT_KEY, []).append(QPS_MARKER)
        logger.debug("Validated document", extra={"errors": len(self.errors)})

    def dedupe(self) -> None:
        """Move every repeat of an earlier fingerprint into ``duplicates``."""
        with self.timed(Stage.DEDUPE):
            found = find_duplicates(self._records)
            for record_id in found:
                del self._records[record_id]
            self.duplicates.update(found)
        logger.debug("Deduplicated document", extra={"duplicates": len(found)})

    def morph(self, mode: MorphMode | str = MorphMode.ADIF_STRICT) -> None:
        mode = MorphMode(mode)
        with self.timed(Stage.MORPH):
            if mode is MorphMode.POTA_REFS:
                self.unroll_pota_refs()
            else:
                allowed = PROJECTIONS[mode]
                for record_id, record in self._records.items():
                    self._records[record_id] = project(record, allowed)

    def unroll_pota_refs(self) -> None:
        """Expand multi-park references into one record per park pairing."""
        with self.timed(Stage.UNROLL_POTA_REFS):
            for record_id, record in list(self._records.items()):
                result = unroll_record(record_id, record)
                if result.replace:
                    self.remove_record(record_id)
                    self.add_records(result.records)

    def chunk(self, max_size: int = CHUNK_MAX_SIZE) -> None:
        """Group record ids into batches whose JSON stays within ``max_size`` bytes."""
        with self.timed(Stage.CHUNK):
            ids = list(self._records)
            batches = partition(list(self._records.values()), max_size)
            self.chunks = [[ids[position] for position in batch] for batch in batches]

    # --- Output ---

    def to_adif(self, **options: Any) -> str:
        return render_adif(self, **options)

    def to_json(self, pretty: bool = False) -> str:
        return render_json(self, pretty=pretty)
