"""CLI entry point for computing USP / PES over JSONL conversation histories."""


import argparse
import json
import sys
from collections.abc import Iterable
from pathlib import Path

from .log import get_logger, setup_logging
from .metrics import Message, MetricsResult, compute_metrics
from .version import PACKAGE_VERSION

logger = get_logger("metrics_cli")

EXIT_OK = 0
EXIT_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    """Construct the ``scg-metrics`` argument parser."""
    parser = argparse.ArgumentParser(
        prog="scg-metrics",
        description="Compute USP and PES load for conversation histories.",
        epilog=(
            "Each INPUT is a JSONL file (or '-' for stdin) holding one message "
            "object per line with a string 'text' field and optional 'id', "
            "'timestamp' and 'sender'."
        ),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=PACKAGE_VERSION,
        help="Show package version and exit.",
    )
    parser.add_argument(
        "inputs",
        nargs="+",
        metavar="INPUT",
        help="Conversation history JSONL file(s), or '-' for stdin.",
    )
    parser.add_argument(
        "-j", "--json",
        action="store_true",
        default=False,
        help="Output results as JSON.",
    )
    return parser


def _parse_history(lines: Iterable[str], source: str) -> list[Message]:
    """Parse JSONL message rows into an ordered history."""
    messages: list[Message] = []
    for line_number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped:
            continue
        try:
            payload = json.loads(stripped)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{source}:{line_number}: invalid JSON: {exc.msg}") from exc

        if not isinstance(payload, dict):
            raise TypeError(f"{source}:{line_number}: row must be a JSON object")

        try:
            messages.append(Message.from_dict(payload, default_id=str(line_number)))
        except (TypeError, ValueError) as exc:
            raise type(exc)(f"{source}:{line_number}: {exc}") from exc
    return messages


def _load_history(raw: str) -> tuple[str, list[Message]]:
    """Load one history from a path or stdin and return it with its label."""
    if raw == "-":
        return "<stdin>", _parse_history(sys.stdin.read().splitlines(), "<stdin>")
    path = Path(raw)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        return str(path), _parse_history(handle, str(path))


def _format_metrics_line(label: str, metrics: MetricsResult) -> str:
    payload = metrics.to_payload()
    return (
        f"{label}: USP {payload['usp_score']} [{payload['usp_label']}] "
        f"PES {payload['pes_load']} [{payload['pes_label']}] "
        f"({payload['word_count']} words)"
    )


def metrics_main(argv: list[str] | None = None) -> int:
    """Run ``scg-metrics`` and return a process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging()

    results: list[dict] = []
    for raw in args.inputs:
        try:
            label, history = _load_history(raw)
        except (OSError, UnicodeDecodeError, TypeError, ValueError) as exc:
            print(f"scg-metrics: {exc}", file=sys.stderr)
            return EXIT_ERROR

        metrics = compute_metrics(history)
        logger.debug(
            "Computed conversation metrics",
            extra={"source": label},
        )
        if args.json:
            payload = metrics.to_payload()
            payload["source"] = label
            payload["message_count"] = len(history)
            results.append(payload)
        else:
            print(_format_metrics_line(label, metrics), flush=True)

    if args.json:
        out = results if len(results) > 1 else results[0]
        json.dump(out, sys.stdout, indent=2)
        sys.stdout.write("\n")

    return EXIT_OK


def main() -> None:
    """Call :func:`metrics_main` and exit."""
    sys.exit(metrics_main())
