"""Tests for USP / PES conversation metrics."""


import pytest

from scam_guard.metrics import (
    NEGATIVE_KEYWORDS,
    POSITIVE_KEYWORDS,
    Message,
    combine_messages,
    compute_metrics,
    pes_label,
    usp_label,
)


def _messages(*texts: str) -> list[Message]:
    return [Message(id=str(index), text=text) for index, text in enumerate(texts)]


def test_empty_history_returns_neutral_baseline() -> None:
    """No messages means a neutral USP and no PES load."""
    for history in ([], None):
        result = compute_metrics(history)
        assert (result.usp_score, result.pes_load) == (50, 0)


def test_positive_history_saturates_usp() -> None:
    """Dense positive vocabulary should push USP to its ceiling."""
    result = compute_metrics(_messages("I feel confident and proud and grateful"))

    assert result.usp_score == 100
    assert result.pes_load == 0
    assert result.positive_hits == 3
    assert result.word_count == 7


def test_negative_history_raises_pes_load() -> None:
    """Negative vocabulary should produce a positive PES load."""
    result = compute_metrics(_messages("I am anxious and panic and afraid of threat"))

    assert result.negative_hits == 3
    assert result.word_count == 9
    assert result.pes_load > 0
    assert result.pes_load == 100


def test_sparse_keywords_follow_density_formula() -> None:
    """One keyword per hundred words adds one gain step to the baseline."""
    filler = " ".join(["filler"] * 99)
    positive = compute_metrics(_messages(f"{filler} happy"))
    negative = compute_metrics(_messages(f"{filler} lost"))

    assert (positive.usp_score, positive.pes_load) == (60, 0)
    assert (negative.usp_score, negative.pes_load) == (50, 15)
    assert usp_label(positive.usp_score) == "Moderate"
    assert pes_label(negative.pes_load) == "Low"


def test_density_is_pooled_across_messages() -> None:
    """Word count and hits are measured over the whole conversation."""
    filler = " ".join(["filler"] * 49)
    result = compute_metrics(_messages(f"{filler} happy", filler + " filler"))

    assert result.word_count == 100
    assert result.usp_score == 60


def test_keywords_match_case_insensitively_on_whole_words() -> None:
    """Keywords are matched as whole words regardless of case."""
    result = compute_metrics(_messages("HAPPY days, unhappy nights, happiness"))
    assert result.positive_hits == 1


def test_multi_word_keyword_can_span_message_seam() -> None:
    """Messages are joined with a space, so phrases may cross a boundary."""
    result = compute_metrics(_messages("I have", "to go"))

    assert combine_messages(_messages("I have", "to go")) == "i have to go"
    assert result.negative_hits == 1


def test_words_are_not_glued_across_message_seam() -> None:
    """A word split across two messages is not rejoined."""
    result = compute_metrics(_messages("hap", "py"))
    assert result.positive_hits == 0


def test_whitespace_only_history_has_no_words() -> None:
    """Whitespace-only messages still count as a history with no words."""
    result = compute_metrics(_messages("   ", "\n"))
    assert (result.usp_score, result.pes_load, result.word_count) == (50, 0, 0)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "confident " * 500,
        "anxious panic fear " * 500,
        "confident anxious " * 200,
        "nothing to see here",
    ],
)
def test_metrics_are_bounded(text: str) -> None:
    """Both metrics stay within 0-100."""
    result = compute_metrics(_messages(text))
    assert 0 <= result.usp_score <= 100
    assert 0 <= result.pes_load <= 100


def test_keyword_lists_have_expected_sizes() -> None:
    """Vocabulary sizes are fixed."""
    assert len(POSITIVE_KEYWORDS) == 45
    assert len(NEGATIVE_KEYWORDS) == 56
    assert len(set(POSITIVE_KEYWORDS) & set(NEGATIVE_KEYWORDS)) == 0


@pytest.mark.parametrize(
    ("score", "expected"),
    [
        (100, "Excellent"),
        (80, "Excellent"),
        (79, "Strong"),
        (65, "Strong"),
        (64, "Moderate"),
        (50, "Moderate"),
        (49, "Low"),
        (35, "Low"),
        (34, "Critical"),
        (0, "Critical"),
    ],
)
def test_usp_label_thresholds(score: int, expected: str) -> None:
    """USP labels switch at 80, 65, 50 and 35."""
    assert usp_label(score) == expected


@pytest.mark.parametrize(
    ("load", "expected"),
    [
        (100, "Critical"),
        (75, "Critical"),
        (74, "High"),
        (50, "High"),
        (49, "Moderate"),
        (25, "Moderate"),
        (24, "Low"),
        (10, "Low"),
        (9, "Minimal"),
        (0, "Minimal"),
    ],
)
def test_pes_label_thresholds(load: int, expected: str) -> None:
    """PES labels switch at 75, 50, 25 and 10."""
    assert pes_label(load) == expected


def test_message_from_dict_applies_defaults() -> None:
    """Only text is required when building a message from JSON."""
    message = Message.from_dict({"text": "hello"}, default_id="7")
    assert message == Message(id="7", text="hello", timestamp=0, sender="user")


@pytest.mark.parametrize(
    ("raw", "error"),
    [
        ({}, TypeError),
        ({"text": 3}, TypeError),
        ({"text": "hi", "timestamp": "noon"}, TypeError),
        ({"text": "hi", "timestamp": True}, TypeError),
        ({"text": "hi", "sender": "bot"}, ValueError),
    ],
)
def test_message_from_dict_rejects_bad_fields(
    raw: dict[str, object], error: type[Exception]
) -> None:
    """Wrongly typed or unknown fields are rejected."""
    with pytest.raises(error):
        Message.from_dict(raw)


def test_payload_includes_labels() -> None:
    """Serialized metrics carry both scores and their labels."""
    payload = compute_metrics(_messages("I feel confident and proud and grateful")).to_payload()
    assert payload["usp_score"] == 100
    assert payload["usp_label"] == "Excellent"
    assert payload["pes_load"] == 0
    assert payload["pes_label"] == "Minimal"


def test_word_count_splits_on_separators_but_not_bom() -> None:
    """Information separators split words, a byte-order mark does not."""
    assert compute_metrics(_messages("calm\u001fday")).word_count == 2
    assert compute_metrics(_messages("calm\ufeffday")).word_count == 1
