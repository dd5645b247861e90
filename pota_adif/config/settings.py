"""pota-adif configuration settings."""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pota_adif.output.adif_writer import ADIF_VERSION, PROGRAM_ID, PROGRAM_VERSION
from pota_adif.output.chunking import CHUNK_MAX_SIZE
from pota_adif.pipeline.document import DocumentMode
from pota_adif.pipeline.morph import MorphMode
from pota_adif.pipeline.validator import DEFAULT_MAX_QSO_RATE


def _bool_env(var_name: str, default: bool) -> bool:
    raw = os.getenv(var_name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


class PipelineConfig(BaseModel):
    """Which stages run and how."""

    model_config = ConfigDict(validate_default=True)

    mode: DocumentMode = Field(
        default_factory=lambda: os.getenv("POTA_ADIF_MODE", "default").strip().lower()
    )
    check_qps: bool = Field(default_factory=lambda: _bool_env("POTA_ADIF_CHECK_QPS", True))
    max_qso_rate: float = Field(default=DEFAULT_MAX_QSO_RATE, gt=0)
    sanitize_records: bool = True
    validate_records: bool = True
    dedupe_records: bool = True
    morph: MorphMode | None = None
    chunk_records: bool = False
    chunk_max_size: int = Field(
        default_factory=lambda: os.getenv("POTA_ADIF_CHUNK_MAX_SIZE", str(CHUNK_MAX_SIZE)).strip()
    )
    overrides: dict[str, str] = Field(default_factory=dict)

    @field_validator("chunk_max_size")
    @classmethod
    def _validate_chunk_max_size(cls, value: int) -> int:
        if value < 1:
            raise ValueError("POTA_ADIF_CHUNK_MAX_SIZE must be >= 1")
        return value

    @field_validator("overrides")
    @classmethod
    def _normalize_overrides(cls, value: dict[str, str]) -> dict[str, str]:
        normalized = {}
        for name, forced in value.items():
            name = name.strip().lower()
            if not name:
                raise ValueError("override field name cannot be empty")
            normalized[name] = forced.strip()
        return normalized


class OutputConfig(BaseModel):
    """Rendering of the processed document."""

    adif_version: str = ADIF_VERSION
    program_id: str = PROGRAM_ID
    program_version: str = PROGRAM_VERSION
    pretty: bool = False


class AdifConfig(BaseModel):
    """Root configuration for a pota-adif run."""

    model_config = ConfigDict(validate_default=True)

    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    log_level: str = Field(default_factory=lambda: os.getenv("POTA_ADIF_LOG_LEVEL", "INFO"))

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level
