"""Input acquisition: raw ADIF text or a path to a file holding it."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from pota_adif.telemetry.errors import ErrorCode, InputSourceError, emit_structured_error

logger = logging.getLogger(__name__)

_EOR = re.compile(r"<eor>", re.IGNORECASE)


@dataclass(frozen=True)
class Source:
    """A text blob plus where it came from."""

    text: str
    filename: str = ""
    path: str = ""
    size: int = 0


def is_adif_text(data: str) -> bool:
    return _EOR.search(data) is not None


def read_file(path: str | Path) -> Source:
    """Read an ADIF file as UTF-8, replacing undecodable bytes."""
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        emit_structured_error(
            logger,
            code=ErrorCode.INPUT_SOURCE_UNREADABLE,
            message=str(exc),
            suppressed=False,
            stage="load",
            details={"path": str(path)},
        )
        raise InputSourceError(f"Invalid or unreadable file: {path}") from exc
    return Source(
        text=raw.decode("utf-8", errors="replace"),
        filename=path.name,
        path=str(path.parent),
        size=len(raw),
    )


def load_source(data: str | Path) -> Source:
    """Classify ``data`` as raw ADIF text or as a file path, and load it."""
    if isinstance(data, str) and is_adif_text(data):
        return Source(text=data, size=len(data.encode("utf-8")))
    path = Path(data)
    try:
        is_file = path.is_file()
    except (OSError, ValueError):
        is_file = False
    if not is_file:
        emit_structured_error(
            logger,
            code=ErrorCode.INPUT_SOURCE_UNREADABLE,
            message="Input is neither ADIF text nor a readable file",
            suppressed=False,
            stage="load",
            details={"path": str(path)[:200]},
        )
        raise InputSourceError(f"Invalid or unreadable file: {str(path)[:200]}")
    return read_file(path)
