"""CLI entry point for the ``scg`` message risk checker.

Usage examples::

    # Check files by name
    scg inbox/*.txt

    # Check inline text
    scg "Please wire money to this account today"

    # Check from stdin
    pbpaste | scg -

    # Machine-readable JSON output
    scg -j message.txt

    # Verbose: show each trigger and why it is risky
    scg -v message.txt

    # Stricter scoring
    scg -m paranoid message.txt

    # Use a custom JSONL rule config
    scg -c config.jsonl message.txt

    # Exit 1 if any input scores at or above 60
    scg -t 60 inbox/*.txt

    # Quiet mode: only print sources at or above the threshold
    scg -q -t 60 inbox/*.txt
"""


import argparse
import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, TextIO, TypeAlias

from .analysis import HYPERPARAMETERS, AnalysisMode, Hyperparameters
from .engine import analyze
from .log import get_logger, setup_logging
from .rules import Pipeline
from .version import PACKAGE_VERSION

logger = get_logger("cli")

EXIT_OK = 0
EXIT_THRESHOLD_FAILURE = 1
EXIT_ERROR = 2

_RISK_SYMBOLS: dict[str, str] = {
    "low": ".",
    "medium": "!",
    "high": "!!!",
}

InputValue: TypeAlias = str | Path


@dataclass(frozen=True)
class InputTarget:
    """Typed representation of a CLI input target."""

    kind: Literal["file", "stdin", "text"]
    value: InputValue
    label: str


def _format_score_line(
    label: str,
    result: dict,
    *,
    show_counts: bool = False,
) -> str:
    """Build a one-line summary for a single analyzed input."""
    score = result["score"]
    risk = result["risk_level"]
    n_triggers = len(result["triggers"])
    sym = _RISK_SYMBOLS.get(risk, "?")
    line = f"{label}: {score}/100 [{risk}] ({n_triggers} triggers) {sym}"
    if show_counts:
        active = {k: v for k, v in result["counts"].items() if v}
        if active:
            parts = " ".join(f"{k}={v}" for k, v in active.items())
            line += f"  ({parts})"
    return line


def _print_triggers(result: dict, file: TextIO = sys.stdout) -> None:
    """Print each trigger with its explanation."""
    for t in result["triggers"]:
        print(
            f"  {t['type']}/{t['severity']}: {t['pattern']!r}  {t['context']}",
            file=file,
        )
        print(f"    - {t['educational_info']}", file=file)


def _analyze_text(
    text: str,
    label: str,
    mode: AnalysisMode,
    hyperparameters: Hyperparameters,
    pipeline: Pipeline,
) -> dict:
    """Run analysis and attach the source label."""
    result = analyze(
        text, mode, hyperparameters=hyperparameters, pipeline=pipeline
    ).to_payload()
    result["source"] = label
    return result


def _analyze_file(
    path: Path,
    mode: AnalysisMode,
    hyperparameters: Hyperparameters,
    pipeline: Pipeline,
) -> dict:
    """Read a file and analyze its contents."""
    text = path.read_text(encoding="utf-8")
    return _analyze_text(text, str(path), mode, hyperparameters, pipeline)


def _build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser."""
    p = argparse.ArgumentParser(
        prog="scg",
        description="Check messages for scam, urgency and coercion patterns.",
        epilog="Pass file paths, '-' for stdin, or quoted inline text.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=PACKAGE_VERSION,
        help="Show package version and exit.",
    )
    p.add_argument(
        "inputs",
        nargs="+",
        metavar="INPUT",
        help="Inputs to check: files, '-' for stdin, or quoted inline text.",
    )
    p.add_argument(
        "-m", "--mode",
        choices=[mode.value for mode in AnalysisMode],
        default=AnalysisMode.BALANCED.value,
        help="Scoring sensitivity (default: balanced).",
    )
    p.add_argument(
        "-j", "--json",
        action="store_true",
        default=False,
        help="Output results as JSON.",
    )
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Show individual triggers and their explanations.",
    )
    p.add_argument(
        "-q", "--quiet",
        action="store_true",
        default=False,
        help="Only print sources at or above the threshold.",
    )
    p.add_argument(
        "-t", "--threshold",
        type=int,
        default=0,
        metavar="SCORE",
        help="Risk threshold (0-100). Exit 1 if any input scores at or above this.",
    )
    p.add_argument(
        "-c", "--config",
        default=None,
        metavar="JSONL",
        help="Path to JSONL rule configuration. Defaults to packaged settings.",
    )
    p.add_argument(
        "-s", "--score-only",
        action="store_true",
        default=False,
        help="Print score only.",
    )
    p.add_argument(
        "--counts",
        action="store_true",
        default=False,
        help="Show per-category trigger counts in the summary line.",
    )
    return p


def _is_inline_text_argument(value: str) -> bool:
    """Return whether a positional argument should be treated as inline text."""
    return any(ch.isspace() for ch in value)


def _resolve_inputs(args: argparse.Namespace) -> list[InputTarget]:
    """Resolve positional args into typed input targets."""
    inputs: list[InputTarget] = []
    for index, raw in enumerate(args.inputs, start=1):
        if raw == "-":
            inputs.append(InputTarget(kind="stdin", value=raw, label="<stdin>"))
            continue
        candidate_path = Path(raw)
        if candidate_path.is_file():
            inputs.append(
                InputTarget(kind="file", value=candidate_path, label=str(candidate_path))
            )
            continue
        if _is_inline_text_argument(raw):
            inputs.append(InputTarget(kind="text", value=raw, label=f"<text:{index}>"))
            continue
        inputs.append(InputTarget(kind="file", value=candidate_path, label=str(candidate_path)))
    return inputs


def _hits_threshold(result: dict, threshold: int) -> bool:
    return threshold > 0 and result["score"] >= threshold


def _emit_result(result: dict, args: argparse.Namespace) -> None:
    """Print one analyzed result immediately."""
    if args.quiet and not _hits_threshold(result, args.threshold):
        return
    if args.score_only:
        print(result["score"], flush=True)
        return

    print(
        _format_score_line(result["source"], result, show_counts=args.counts),
        flush=True,
    )
    if args.verbose and result["triggers"]:
        _print_triggers(result)


def cli_main(argv: list[str] | None = None) -> int:
    """Entry point for the ``scg`` command.

    Args:
        argv: Argument list (defaults to sys.argv[1:]).

    Returns:
        Exit code suitable for ``sys.exit``.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging()

    try:
        pipeline = Pipeline.from_jsonl(args.config)
    except (OSError, KeyError, TypeError, ValueError) as exc:
        print(f"scg: {exc}", file=sys.stderr)
        return EXIT_ERROR

    inputs = _resolve_inputs(args)
    mode = AnalysisMode(args.mode)
    hp = HYPERPARAMETERS

    results: list[dict] = []
    threshold_hit = False

    for target in inputs:
        if target.kind == "stdin":
            text = sys.stdin.read()
            result = _analyze_text(text, target.label, mode, hp, pipeline)
        elif target.kind == "text":
            assert isinstance(target.value, str)
            result = _analyze_text(target.value, target.label, mode, hp, pipeline)
        else:
            assert isinstance(target.value, Path)
            path = target.value
            if not path.is_file():
                print(f"scg: {path}: No such file", file=sys.stderr)
                continue
            try:
                result = _analyze_file(path, mode, hp, pipeline)
            except (OSError, UnicodeDecodeError) as exc:
                logger.debug("Skipping unreadable input", extra={"source": str(path)})
                print(f"scg: {path}: {exc}", file=sys.stderr)
                continue

        results.append(result)
        if _hits_threshold(result, args.threshold):
            threshold_hit = True

        if not args.json:
            _emit_result(result, args)

    if not results:
        return EXIT_ERROR

    if args.json:
        out = results if len(results) > 1 else results[0]
        json.dump(out, sys.stdout, indent=2)
        sys.stdout.write("\n")

    if threshold_hit:
        return EXIT_THRESHOLD_FAILURE

    return EXIT_OK


def main() -> None:
    """Thin wrapper that calls ``sys.exit`` with the CLI return code."""
    sys.exit(cli_main())
