"""Command-line entry point: clean, validate and convert ADIF logs."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from pota_adif.config.settings import AdifConfig, OutputConfig, PipelineConfig
from pota_adif.output.chunking import CHUNK_MAX_SIZE
from pota_adif.pipeline.document import DocumentMode
from pota_adif.pipeline.manager import PipelineManager
from pota_adif.pipeline.morph import MorphMode
from pota_adif.telemetry.errors import AdifError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_LINT = 1
EXIT_ERROR = 2


def _override(text: str) -> tuple[str, str]:
    name, sep, value = text.partition("=")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"expected FIELD=VALUE, got {text!r}")
    return name, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pota-adif",
        description="Parse, clean, validate and deduplicate ADIF logbooks.",
    )
    parser.add_argument("inputs", nargs="+", help="ADIF files to read, or - for stdin")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in DocumentMode],
        default=None,
        help="Validation profile (default: POTA_ADIF_MODE or 'default')",
    )
    parser.add_argument("--no-qps", action="store_true", help="Skip the QSO-rate plausibility check")
    parser.add_argument("--no-sanitize", action="store_true", help="Skip field normalization")
    parser.add_argument("--no-validate", action="store_true", help="Skip validation")
    parser.add_argument("--no-dedupe", action="store_true", help="Keep duplicate QSOs")
    parser.add_argument(
        "--morph",
        choices=[m.value for m in MorphMode],
        default=None,
        help="Project records onto a field set, or unroll POTA references",
    )
    parser.add_argument(
        "--override",
        type=_override,
        action="append",
        default=[],
        metavar="FIELD=VALUE",
        help="Force FIELD to VALUE on every record (repeatable)",
    )
    parser.add_argument(
        "--chunk",
        type=int,
        nargs="?",
        const=CHUNK_MAX_SIZE,
        default=None,
        metavar="BYTES",
        help=f"Batch JSON entries by size (default batch size: {CHUNK_MAX_SIZE})",
    )
    parser.add_argument("--format", choices=["adif", "json"], default="adif", help="Output format")
    parser.add_argument("--pretty", action="store_true", help="Indent JSON output")
    parser.add_argument("--output", "-o", default=None, help="Write to this path instead of stdout")
    parser.add_argument("--lint", action="store_true", help="Only lint the inputs and report problems")
    parser.add_argument("--log-level", default=None, help="Logging level (default: POTA_ADIF_LOG_LEVEL or INFO)")
    return parser


def build_config(args: argparse.Namespace) -> AdifConfig:
    pipeline = {
        "check_qps": not args.no_qps,
        "sanitize_records": not args.no_sanitize,
        "validate_records": not args.no_validate,
        "dedupe_records": not args.no_dedupe,
        "morph": args.morph,
        "chunk_records": args.chunk is not None,
        "overrides": dict(args.override),
    }
    if args.mode is not None:
        pipeline["mode"] = args.mode
    if args.chunk is not None:
        pipeline["chunk_max_size"] = args.chunk
    root = {
        "pipeline": PipelineConfig(**pipeline),
        "output": OutputConfig(pretty=args.pretty),
    }
    if args.log_level is not None:
        root["log_level"] = args.log_level
    return AdifConfig(**root)


def _load_inputs(manager: PipelineManager, inputs: list[str]) -> None:
    for name in inputs:
        if name == "-":
            manager.load_string(sys.stdin.read())
        else:
            manager.load_file(name)


def _lint(manager: PipelineManager, inputs: list[str]) -> int:
    report = {}
    for name, document in zip(inputs, manager.documents):
        problems = document.lint()
        if problems:
            report[name] = {str(key): value for key, value in problems.items()}
    print(json.dumps(report, indent=2))
    return EXIT_LINT if report else EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = build_config(args)
    except (ValidationError, ValueError) as exc:
        print(f"error: invalid configuration: {exc}", file=sys.stderr)
        return EXIT_ERROR

    logging.basicConfig(level=config.log_level, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    manager = PipelineManager(config)
    try:
        _load_inputs(manager, args.inputs)
        if args.lint:
            return _lint(manager, args.inputs)
        document = manager.run()
        if args.output:
            manager.persist(document, args.output, args.format)
            logger.info("Wrote output", extra={"path": args.output, "count": document.count})
        else:
            sys.stdout.write(manager.render(document, args.format))
    except (AdifError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
