"""JSON report models and rendering of a Document."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

from pota_adif.pipeline.stages import Stage

if TYPE_CHECKING:
    from pota_adif.pipeline.document import Document


class ReportMeta(BaseModel):
    """Counts and provenance for a rendered document."""

    sources: list[list[str]] | None = None
    count: int = Field(ge=0)
    duplicates: int = Field(ge=0)
    errors: int = Field(ge=0)
    chunks: int | None = None


class DocumentReport(BaseModel):
    """The full JSON view of a Document.

    ``entries`` is a flat list of records, or a list of record batches when
    the document was chunked. Keys of ``duplicates`` and ``errors`` are
    record ids, plus ``"@"`` for document-level errors.
    """

    timers: dict[str, float] = Field(default_factory=dict)
    meta: ReportMeta
    headers: dict[str, Any] = Field(default_factory=dict)
    entries: list[Any] = Field(default_factory=list)
    duplicates: dict[str, dict[str, Any]] | None = None
    errors: dict[str, list[str]] | None = None


def build_report(document: Document) -> DocumentReport:
    records = document.records
    meta = ReportMeta(
        sources=document.sources or None,
        count=document.count,
        duplicates=len(document.duplicates),
        errors=len(document.errors),
    )
    if document.chunks:
        meta.chunks = len(document.chunks)
        entries: list[Any] = [
            [records[record_id] for record_id in chunk if record_id in records]
            for chunk in document.chunks
        ]
    else:
        entries = list(records.values())

    return DocumentReport(
        timers=document.get_timers(),
        meta=meta,
        headers=document.headers,
        entries=entries,
        duplicates={str(k): v for k, v in document.duplicates.items()} or None,
        errors={str(k): v for k, v in document.errors.items()} or None,
    )


def render_json(document: Document, pretty: bool = False) -> str:
    """Render ``document`` as JSON; the ``to_json`` timer covers building the report."""
    start = time.perf_counter_ns()
    report = build_report(document)
    document.add_timer(Stage.TO_JSON, (time.perf_counter_ns() - start) / 1e6)
    report.timers = document.get_timers()
    return report.model_dump_json(indent=4 if pretty else None, exclude_none=True) + "\n"
