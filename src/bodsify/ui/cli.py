from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Mapping
from datetime import UTC, datetime
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING, cast

from dotenv import load_dotenv

from bodsify.app import convert_report_to_json
from bodsify.config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

STDIO = "-"


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Convert an AHU beneficial-ownership report into BODS statements"
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=STDIO,
        help="Path to the report JSON, or '-' for standard input (default: %(default)s)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=STDIO,
        help="Path to write statements to, or '-' for standard output (default: %(default)s)",
    )
    parser.add_argument(
        "--as-of",
        type=_as_of_timestamp,
        help="ISO-8601 timestamp (UTC) used as retrieval, publication and closure date",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log per-transaction reconciliation details",
    )
    return parser.parse_args(list(argv))


def _as_of_timestamp(value: str) -> datetime:
    """Parse ``--as-of``; naive values are taken as UTC."""

    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an ISO-8601 timestamp: {value!r}") from exc
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def _read_payload(source: str) -> Mapping[str, object]:
    text = sys.stdin.read() if source == STDIO else Path(source).read_text(encoding="utf-8")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Report is not valid JSON: {exc}") from exc
    if not isinstance(payload, Mapping):
        raise ValueError("Report must be a JSON object")  # noqa: TRY004
    return cast("Mapping[str, object]", payload)


def _write_output(target: str, document: str) -> None:
    if target == STDIO:
        sys.stdout.write(document)
        sys.stdout.flush()
        return
    Path(target).write_text(document, encoding="utf-8")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(verbose=parsed_args.verbose)

    try:
        payload = _read_payload(parsed_args.input)
        document = convert_report_to_json(payload, as_of=parsed_args.as_of)
    except ValueError:
        log.exception("Invalid input")
        sys.exit(2)
    except Exception:  # noqa: BLE001
        log.exception("Fatal error during conversion")
        sys.exit(1)

    try:
        _write_output(parsed_args.output, document)
    except OSError:
        log.exception("Could not write statements")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
