"""Tests for the ``scg-metrics`` CLI."""


import io
import json
from pathlib import Path

import pytest

from scam_guard import metrics_cli


def _write_history(path: Path, rows: list[object]) -> Path:
    path.write_text(
        "\n".join(json.dumps(row) for row in rows) + "\n",
        encoding="utf-8",
    )
    return path


def test_prints_one_line_per_history(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Each history file should get a USP / PES summary line."""
    history = _write_history(
        tmp_path / "chat.jsonl",
        [
            {"id": "a", "text": "I feel confident", "sender": "user"},
            {"id": "b", "text": "and proud and grateful", "sender": "system"},
        ],
    )

    exit_code = metrics_cli.metrics_main([str(history)])

    assert exit_code == metrics_cli.EXIT_OK
    assert capsys.readouterr().out.strip() == (
        f"{history}: USP 100 [Excellent] PES 0 [Minimal] (7 words)"
    )


def test_json_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """``-j`` should print the metrics payload with its source."""
    history = _write_history(
        tmp_path / "chat.jsonl",
        [{"text": "I am anxious and panic and afraid of threat"}],
    )

    exit_code = metrics_cli.metrics_main(["-j", str(history)])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == metrics_cli.EXIT_OK
    assert payload["source"] == str(history)
    assert payload["message_count"] == 1
    assert payload["pes_load"] == 100
    assert payload["pes_label"] == "Critical"
    assert payload["negative_hits"] == 3


def test_empty_history_reports_baseline(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A file with no messages falls back to the neutral baseline."""
    history = tmp_path / "empty.jsonl"
    history.write_text("\n", encoding="utf-8")

    metrics_cli.metrics_main([str(history)])

    assert "USP 50 [Moderate] PES 0 [Minimal] (0 words)" in capsys.readouterr().out


def test_reads_stdin(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """``-`` should read the history from stdin."""
    monkeypatch.setattr("sys.stdin", io.StringIO('{"text": "happy"}\n'))

    exit_code = metrics_cli.metrics_main(["-"])

    assert exit_code == metrics_cli.EXIT_OK
    assert capsys.readouterr().out.startswith("<stdin>: USP 100")


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("{not json\n", "chat.jsonl:1: invalid JSON"),
        ('["text"]\n', "chat.jsonl:1: row must be a JSON object"),
        ('{"id": "x"}\n', "chat.jsonl:1: message must contain string 'text'"),
        ('{"text": "hi"}\n{"text": "hi", "sender": "bot"}\n', "chat.jsonl:2:"),
    ],
)
def test_malformed_history_exits_with_error(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    content: str,
    message: str,
) -> None:
    """Malformed rows should be reported with their location."""
    history = tmp_path / "chat.jsonl"
    history.write_text(content, encoding="utf-8")

    exit_code = metrics_cli.metrics_main([str(history)])

    assert exit_code == metrics_cli.EXIT_ERROR
    err = capsys.readouterr().err
    assert err.startswith("scg-metrics: ")
    assert message in err


def test_missing_file_exits_with_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A missing history file is an error."""
    exit_code = metrics_cli.metrics_main([str(tmp_path / "nope.jsonl")])

    assert exit_code == metrics_cli.EXIT_ERROR
    assert "File not found" in capsys.readouterr().err
