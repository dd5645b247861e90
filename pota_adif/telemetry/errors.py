"""Error types and structured error telemetry helpers."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any


class AdifError(Exception):
    """Base class for unrecoverable pipeline errors."""


class MalformedInputError(AdifError):
    """Raised when text has no recognizable header or record markers."""


class InputSourceError(AdifError):
    """Raised when an input source is missing or cannot be read."""


class ErrorCode(str, Enum):
    """Canonical error codes for operational telemetry."""

    PARSE_MALFORMED_INPUT = "PARSE_MALFORMED_INPUT"
    INPUT_SOURCE_UNREADABLE = "INPUT_SOURCE_UNREADABLE"
    OUTPUT_PERSIST_FAILED = "OUTPUT_PERSIST_FAILED"


def emit_structured_error(
    logger: logging.Logger,
    *,
    code: ErrorCode,
    message: str,
    suppressed: bool,
    stage: str | None = None,
    details: dict[str, Any] | None = None,
) -> None:
    """Emit a structured telemetry event via logging."""
    logger.error(
        "pota_adif_error",
        extra={
            "error_code": code,
            "error_message": message,
            "suppressed": suppressed,
            "stage": stage,
            "details": details or {},
        },
    )
