"""Tests for the ``scam-guard`` MCP server tools and launcher CLI."""


import json
from pathlib import Path

import pytest

from scam_guard import server


@pytest.fixture
def _restore_active_pipeline(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(server, "ACTIVE_PIPELINE", server.ACTIVE_PIPELINE)


def test_main_loads_default_pipeline_when_config_not_provided(
    monkeypatch, _restore_active_pipeline
) -> None:
    """Server launch should load packaged pipeline defaults by default."""
    loaded_paths: list[str | None] = []
    sentinel_pipeline = object()
    run_calls: list[bool] = []

    def fake_from_jsonl(cls, path: str | None = None):  # noqa: ANN001
        loaded_paths.append(path)
        return sentinel_pipeline

    monkeypatch.setattr(server.Pipeline, "from_jsonl", classmethod(fake_from_jsonl))
    monkeypatch.setattr(server.mcp_server, "run", lambda: run_calls.append(True))

    server.main([])

    assert loaded_paths == [None]
    assert run_calls == [True]
    assert server.ACTIVE_PIPELINE is sentinel_pipeline


def test_main_loads_custom_pipeline_when_config_is_provided(
    monkeypatch, _restore_active_pipeline
) -> None:
    """Server launch should load a custom pipeline when ``-c`` is passed."""
    loaded_paths: list[str | None] = []
    sentinel_pipeline = object()
    run_calls: list[bool] = []
    config_path = "/tmp/custom-settings.jsonl"

    def fake_from_jsonl(cls, path: str | None = None):  # noqa: ANN001
        loaded_paths.append(path)
        return sentinel_pipeline

    monkeypatch.setattr(server.Pipeline, "from_jsonl", classmethod(fake_from_jsonl))
    monkeypatch.setattr(server.mcp_server, "run", lambda: run_calls.append(True))

    server.main(["-c", config_path])

    assert loaded_paths == [config_path]
    assert run_calls == [True]
    assert server.ACTIVE_PIPELINE is sentinel_pipeline


def test_check_message_returns_analysis_json() -> None:
    """The check tool should return the serialized analysis."""
    payload = json.loads(server.check_message("Please wire money to this account."))

    assert payload["score"] == 100
    assert payload["risk_level"] == "high"
    assert payload["mode"] == "balanced"
    assert payload["triggers"][0]["type"] == "financial"


def test_check_message_respects_mode() -> None:
    """The mode argument should scale the score."""
    payload = json.loads(server.check_message("Click here to continue.", mode="vent"))
    assert payload["score"] == 15


def test_check_message_reports_unknown_mode() -> None:
    """Unknown modes come back as an error payload."""
    payload = json.loads(server.check_message("hello", mode="reckless"))
    assert "Unknown mode 'reckless'" in payload["error"]


def test_check_message_file_reads_file(tmp_path: Path) -> None:
    """The file tool should analyze file contents and echo the path."""
    sample = tmp_path / "message.txt"
    sample.write_text("Click here to continue.", encoding="utf-8")

    payload = json.loads(server.check_message_file(str(sample)))

    assert payload["file"] == str(sample)
    assert payload["score"] == 25


def test_check_message_file_reports_missing_file(tmp_path: Path) -> None:
    """Missing files produce an error payload instead of raising."""
    missing = tmp_path / "missing.txt"
    payload = json.loads(server.check_message_file(str(missing)))
    assert payload == {"error": f"File not found: {missing}"}


def test_conversation_metrics_tool() -> None:
    """The metrics tool should score a list of message objects."""
    payload = json.loads(
        server.conversation_metrics(
            [{"text": "I feel confident and proud and grateful", "sender": "user"}]
        )
    )
    assert payload["usp_score"] == 100
    assert payload["usp_label"] == "Excellent"


def test_conversation_metrics_tool_handles_empty_history() -> None:
    """An empty history returns the neutral baseline."""
    payload = json.loads(server.conversation_metrics([]))
    assert (payload["usp_score"], payload["pes_load"]) == (50, 0)


def test_conversation_metrics_tool_reports_invalid_messages() -> None:
    """Invalid messages come back as an error payload."""
    payload = json.loads(server.conversation_metrics([{"id": "1"}]))
    assert payload["error"].startswith("Invalid message:")
