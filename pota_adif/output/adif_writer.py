"""ADIF text rendering of a Document."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from pota_adif.pipeline.stages import Stage

if TYPE_CHECKING:
    from pota_adif.pipeline.document import Document

ADIF_VERSION = "3.1.6"
PROGRAM_ID = "POTA-ADIF"
PROGRAM_VERSION = "2.0.0"


def format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "Y" if value else "N"
    return str(value).strip()


def format_tag(name: str, value: Any) -> str:
    text = format_value(value)
    return f"<{name.strip().lower()}:{len(text)}>{text}"


def render_header(
    sources: Iterable[Iterable[str]] = (),
    *,
    adif_version: str = ADIF_VERSION,
    program_id: str = PROGRAM_ID,
    program_version: str = PROGRAM_VERSION,
    created: datetime | None = None,
) -> str:
    """Provenance lines, the generated header tags, ``<eoh>`` and a blank line."""
    created = created or datetime.now(timezone.utc)
    lines = [f"Source [{', '.join(source)}]" for source in sources]
    lines += [
        format_tag("adif_version", adif_version),
        format_tag("created_timestamp", created.strftime("%Y%m%d %H%M%S")),
        format_tag("programid", program_id),
        format_tag("programversion", program_version),
        "<eoh>",
    ]
    return "\n".join(lines) + "\n\n"


def render_record(record: Mapping[str, Any]) -> str:
    tags = [format_tag(name, value) for name, value in record.items()]
    return "\n".join(tags + ["<eor>"])


def render_adif(
    document: Document,
    *,
    adif_version: str = ADIF_VERSION,
    program_id: str = PROGRAM_ID,
    program_version: str = PROGRAM_VERSION,
    created: datetime | None = None,
) -> str:
    """Render ``document`` as ADIF text and record the time taken under ``to_adif``."""
    with document.timed(Stage.TO_ADIF):
        header = render_header(
            document.sources,
            adif_version=adif_version,
            program_id=program_id,
            program_version=program_version,
            created=created,
        )
        body = "\n\n".join(render_record(record) for record in document.records.values())
    return header + body + ("\n" if body else "")
