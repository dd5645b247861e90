"""Pipeline Manager: loads ADIF documents, merges them and runs the stages.

Stages run in a fixed order, and each can be switched off in PipelineConfig:

1. Parse: every loaded document, independently
2. Merge: several documents become one, with provenance per source
3. Process: sanitize, validate, dedupe, morph, chunk
4. Persist: rendered output written atomically
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from pota_adif.config.settings import AdifConfig
from pota_adif.output.adif_writer import render_adif
from pota_adif.output.json_writer import render_json
from pota_adif.pipeline.document import Document, DocumentMode
from pota_adif.pipeline.morph import MorphMode
from pota_adif.pipeline.source import Source, load_source, read_file
from pota_adif.pipeline.stages import Stage
from pota_adif.telemetry.errors import ErrorCode, emit_structured_error

logger = logging.getLogger(__name__)

OutputFormat = Literal["adif", "json"]

DEFAULT_ORDER: tuple[Stage, ...] = (
    Stage.SANITIZE,
    Stage.VALIDATE,
    Stage.DEDUPE,
    Stage.MORPH,
    Stage.CHUNK,
)

# Unroll before validating so the POTA required set sees pota_my_park_ref,
# and dedupe before unrolling so n-fer siblings are not taken for duplicates.
POTA_ORDER: tuple[Stage, ...] = (
    Stage.SANITIZE,
    Stage.DEDUPE,
    Stage.UNROLL_POTA_REFS,
    Stage.VALIDATE,
    Stage.MORPH,
    Stage.CHUNK,
)


class PipelineManager:
    """Owns the documents of one run and drives them through the pipeline.

    Contract: persist is atomic. Either the full output is written or the
    destination is left untouched.
    """

    def __init__(self, config: AdifConfig | None = None) -> None:
        self._config = config or AdifConfig()
        self._documents: list[Document] = []

    @property
    def config(self) -> AdifConfig:
        return self._config

    @property
    def documents(self) -> list[Document]:
        return list(self._documents)

    # --- Stage 1: Load & Parse ---

    def _new_document(self, source: Source) -> int:
        settings = self._config.pipeline
        document = Document(
            mode=settings.mode,
            check_qps=settings.check_qps,
            max_qso_rate=settings.max_qso_rate,
        )
        document.attach_source(source)
        for name, value in settings.overrides.items():
            document.override_field(name, value)
        self._documents.append(document)
        return len(self._documents) - 1

    def load_file(self, path: str | Path) -> int:
        """Queue the ADIF file at ``path``. Returns its document index."""
        return self._new_document(read_file(path))

    def load_string(self, text: str) -> int:
        return self._new_document(Source(text=text, size=len(text.encode("utf-8"))))

    def load(self, data: str | Path) -> int:
        """Queue raw ADIF text, or the file ``data`` names."""
        return self._new_document(load_source(data))

    def parse(self) -> None:
        for document in self._documents:
            document.parse()

    # --- Stage 2: Merge ---

    def merge(self) -> Document:
        """A single document is returned as-is; several are combined into a new one."""
        if not self._documents:
            raise ValueError("No documents loaded")
        if len(self._documents) == 1:
            return self._documents[0]

        settings = self._config.pipeline
        merged = Document(
            mode=settings.mode,
            check_qps=settings.check_qps,
            max_qso_rate=settings.max_qso_rate,
        )
        for document in self._documents:
            merged.add_timer(Stage.PARSE, document.get_timer(Stage.PARSE))
            source = [f"fn={document.filename}", f"ec={document.count}"]
            program_id = document.get_headers("programid")
            if program_id:
                source.append(f"pn={program_id}")
            program_version = document.get_headers("programversion")
            if program_version:
                source.append(f"pv={program_version}")
            merged.sources.append(source)
            merged.add_records(document.entries())
        logger.info(
            "Merged documents",
            extra={"documents": len(self._documents), "count": merged.count},
        )
        return merged

    # --- Stage 3: Process ---

    def process(self, document: Document) -> Document:
        """Run every enabled stage on ``document`` in the order its mode requires."""
        settings = self._config.pipeline
        pota = document.mode is DocumentMode.POTA
        for stage in POTA_ORDER if pota else DEFAULT_ORDER:
            if stage is Stage.SANITIZE and settings.sanitize_records:
                document.sanitize()
            elif stage is Stage.VALIDATE and settings.validate_records:
                document.validate()
            elif stage is Stage.DEDUPE and settings.dedupe_records:
                document.dedupe()
            elif stage is Stage.UNROLL_POTA_REFS:
                document.morph(MorphMode.POTA_REFS)
            elif stage is Stage.MORPH and settings.morph is not None:
                if not (pota and settings.morph is MorphMode.POTA_REFS):
                    document.morph(settings.morph)
            elif stage is Stage.CHUNK and settings.chunk_records:
                document.chunk(settings.chunk_max_size)
        logger.info(
            "Processed document",
            extra={
                "count": document.count,
                "errors": len(document.errors),
                "duplicates": len(document.duplicates),
            },
        )
        return document

    def run(self) -> Document:
        """Parse, merge and process everything loaded so far."""
        self.parse()
        return self.process(self.merge())

    # --- Stage 4: Persist ---

    def render(self, document: Document, fmt: OutputFormat = "adif") -> str:
        output = self._config.output
        if fmt == "json":
            return render_json(document, pretty=output.pretty)
        return render_adif(
            document,
            adif_version=output.adif_version,
            program_id=output.program_id,
            program_version=output.program_version,
        )

    def persist(self, document: Document, path: str | Path, fmt: OutputFormat = "adif") -> Path:
        """Atomically write the rendered ``document`` to ``path``.

        Contract: either the full output is written or none of it is.
        """
        path = Path(path)
        text = self.render(document, fmt)

        # Write to a temp file, then rename over the destination
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            temp_path.write_text(text, encoding="utf-8")
            temp_path.replace(path)
        except OSError as exc:
            if temp_path.exists():
                temp_path.unlink()
            emit_structured_error(
                logger,
                code=ErrorCode.OUTPUT_PERSIST_FAILED,
                message=str(exc),
                suppressed=False,
                stage="persist",
                details={"path": str(path), "format": fmt},
            )
            raise
        return path
