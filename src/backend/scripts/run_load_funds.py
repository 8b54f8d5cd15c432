from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Iterator, Optional, Sequence


def _ensure_backend_on_path() -> None:
    backend_dir = Path(__file__).resolve().parents[1]
    if str(backend_dir) not in sys.path:
        sys.path.insert(0, str(backend_dir))


def _iter_lines(path: Path) -> Iterator[bytes]:
    # Raw bytes: a line that is not valid UTF-8 is dropped by the dispatcher, not fatal here.
    with path.open("rb") as handle:
        for line in handle:
            yield line


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Evaluate fund-load events (one JSON object per line) against velocity limits."
    )
    parser.add_argument(
        "--input",
        help="Path to the input events file (default: LOAD_FUNDS_INPUT_PATH or input.txt).",
    )
    parser.add_argument(
        "--output",
        help="Write decisions to this file instead of stdout.",
    )
    parser.add_argument(
        "--show-errors",
        action="store_true",
        help="Echo dropped-event diagnostics to stderr.",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error", "critical"],
        help="Log level for structured logs on stderr (default: LOAD_FUNDS_LOG_LEVEL or warning).",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a JSON run summary to stderr when done.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    _ensure_backend_on_path()

    from adapters.memory_store import InMemoryVelocityStore
    from common.logging_setup import configure_logging
    from common.velocity_engine import VelocityRuleEngine
    from pipelines.dispatch import LoadDispatcher
    from pipelines.settings import get_settings
    from pipelines.sinks import StreamOutcomeSink

    args = build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except ValueError as exc:
        raise SystemExit(f"Invalid configuration: {exc}")

    configure_logging(args.log_level or settings.log_level)

    input_path = Path(args.input or settings.input_path)
    if not input_path.is_file():
        raise SystemExit(f"Input file not found: {input_path}")

    engine = VelocityRuleEngine(InMemoryVelocityStore(), limits=settings.limits)
    err_stream = sys.stderr if args.show_errors else None

    try:
        if args.output:
            with open(args.output, "w", encoding="utf-8") as out:
                dispatcher = LoadDispatcher(engine, StreamOutcomeSink(out, err_stream))
                summary = dispatcher.run(_iter_lines(input_path))
        else:
            dispatcher = LoadDispatcher(engine, StreamOutcomeSink(sys.stdout, err_stream))
            summary = dispatcher.run(_iter_lines(input_path))
    except OSError as exc:
        raise SystemExit(f"Failed to read input {input_path}: {exc}")

    if args.summary:
        print(json.dumps(summary.model_dump(mode="json")), file=sys.stderr)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
