"""MCP server exposing message risk analysis and conversation metrics."""


import argparse
import json
from pathlib import Path

from mcp.server.fastmcp import FastMCP

from .analysis import AnalysisMode
from .engine import DEFAULT_PIPELINE, analyze
from .log import get_logger, setup_logging
from .metrics import Message, compute_metrics
from .rules import Pipeline
from .version import PACKAGE_VERSION

MCP_SERVER_NAME = "scam-guard"
mcp_server = FastMCP(MCP_SERVER_NAME)
ACTIVE_PIPELINE = DEFAULT_PIPELINE

logger = get_logger("server")


def _analysis_payload(text: str, mode: str) -> dict:
    """Analyze with the active pipeline, or describe a bad mode."""
    try:
        analysis_mode = AnalysisMode(mode)
    except ValueError:
        known = ", ".join(m.value for m in AnalysisMode)
        return {"error": f"Unknown mode '{mode}'. Expected one of: {known}"}
    return analyze(text, analysis_mode, pipeline=ACTIVE_PIPELINE).to_payload()


@mcp_server.tool()
def check_message(text: str, mode: str = "balanced") -> str:
    """Analyze a message for scam and coercion risk.

    Returns a JSON object with a 0-100 risk score, a risk level, a short
    summary, per-category counts, and each detected trigger with an
    explanation of why it is risky. ``mode`` is paranoid, balanced, or vent.
    """
    return json.dumps(_analysis_payload(text, mode), indent=2)


@mcp_server.tool()
def check_message_file(file_path: str, mode: str = "balanced") -> str:
    """Analyze a text file for scam and coercion risk.

    Reads the file at the given path and runs the same analysis as
    check_message.
    """
    path = Path(file_path)
    if not path.is_file():
        return json.dumps({"error": f"File not found: {file_path}"})

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read %s: %s", file_path, exc, extra={"source": file_path})
        return json.dumps({"error": f"Could not read file: {exc}"})

    result = _analysis_payload(text, mode)
    result["file"] = file_path
    return json.dumps(result, indent=2)


@mcp_server.tool()
def conversation_metrics(messages: list[dict]) -> str:
    """Compute USP and PES load over a conversation history.

    Each message is an object with a string ``text`` and optional ``id``,
    ``timestamp``, and ``sender`` (user or system). Returns a JSON object with
    both scores, their labels, and the keyword counts behind them.
    """
    try:
        history = [
            Message.from_dict(raw, default_id=str(index))
            for index, raw in enumerate(messages)
        ]
    except (TypeError, ValueError) as exc:
        return json.dumps({"error": f"Invalid message: {exc}"})
    return json.dumps(compute_metrics(history).to_payload(), indent=2)


def _build_parser() -> argparse.ArgumentParser:
    """Construct the MCP server CLI parser."""
    parser = argparse.ArgumentParser(
        prog="scam-guard",
        description="Run the scam-guard MCP server on stdio.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=PACKAGE_VERSION,
        help="Show package version and exit.",
    )
    parser.add_argument(
        "-c", "--config",
        default=None,
        metavar="JSONL",
        help="Path to JSONL rule configuration. Defaults to packaged settings.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run the scam-guard MCP server on stdio."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging()
    global ACTIVE_PIPELINE
    ACTIVE_PIPELINE = Pipeline.from_jsonl(args.config)
    mcp_server.run()
