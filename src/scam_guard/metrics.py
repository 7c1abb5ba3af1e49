"""USP / PES conversation metrics.

USP (Unconditional Self-Pride) estimates positive self-regard from the
density of positive keywords across a conversation; PES (Primal Energy System)
load estimates stress and threat activation from negative keyword density.
Both are computed over the whole history joined into one lower-cased string,
so counts are not deduplicated across messages.
Words are the tokens of ``str.split()``: the separators U+001C-U+001F split
words, a byte-order mark does not.
"""


import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Literal, TypeAlias

from .analysis import HYPERPARAMETERS, Hyperparameters, clamp_score

Sender: TypeAlias = Literal["user", "system"]

_SENDERS: frozenset[str] = frozenset({"user", "system"})

POSITIVE_KEYWORDS: tuple[str, ...] = (
    "confident",
    "proud",
    "capable",
    "strong",
    "worthy",
    "valuable",
    "empowered",
    "resilient",
    "independent",
    "self-assured",
    "authentic",
    "grateful",
    "peaceful",
    "calm",
    "balanced",
    "centered",
    "grounded",
    "love",
    "joy",
    "happy",
    "content",
    "satisfied",
    "fulfilled",
    "growth",
    "progress",
    "success",
    "achievement",
    "accomplish",
    "trust",
    "believe",
    "faith",
    "hope",
    "optimistic",
    "positive",
    "healthy",
    "well",
    "good",
    "great",
    "excellent",
    "wonderful",
    "safe",
    "secure",
    "protected",
    "supported",
    "validated",
)

NEGATIVE_KEYWORDS: tuple[str, ...] = (
    "anxious",
    "worried",
    "stressed",
    "overwhelmed",
    "panic",
    "fear",
    "angry",
    "frustrated",
    "irritated",
    "annoyed",
    "rage",
    "furious",
    "sad",
    "depressed",
    "hopeless",
    "helpless",
    "worthless",
    "useless",
    "shame",
    "guilt",
    "embarrassed",
    "humiliated",
    "inadequate",
    "threat",
    "danger",
    "risk",
    "unsafe",
    "vulnerable",
    "exposed",
    "urgent",
    "emergency",
    "crisis",
    "critical",
    "desperate",
    "must",
    "have to",
    "need to",
    "required",
    "forced",
    "obligated",
    "failure",
    "mistake",
    "wrong",
    "bad",
    "terrible",
    "awful",
    "alone",
    "isolated",
    "abandoned",
    "rejected",
    "excluded",
    "confused",
    "lost",
    "uncertain",
    "doubt",
    "question",
)


def _compile_keywords(keywords: tuple[str, ...]) -> tuple[re.Pattern[str], ...]:
    return tuple(
        re.compile(rf"\b{re.escape(keyword)}\b", re.IGNORECASE) for keyword in keywords
    )


_POSITIVE_RES = _compile_keywords(POSITIVE_KEYWORDS)
_NEGATIVE_RES = _compile_keywords(NEGATIVE_KEYWORDS)


@dataclass(frozen=True)
class Message:
    """One chat message in a conversation history."""

    id: str
    text: str
    timestamp: int | float = 0
    sender: Sender = "user"

    @classmethod
    def from_dict(cls, raw: Mapping[str, object], *, default_id: str = "") -> "Message":
        """Validate a JSON object and build a message from it.

        ``text`` is required. ``id`` falls back to ``default_id``, ``timestamp``
        to 0, and ``sender`` to ``"user"``.

        Raises:
            TypeError: If a field has the wrong type.
            ValueError: If ``sender`` is not ``"user"`` or ``"system"``.
        """
        text = raw.get("text")
        if not isinstance(text, str):
            raise TypeError("message must contain string 'text'")

        timestamp = raw.get("timestamp", 0)
        if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
            raise TypeError(
                f"'timestamp' must be a number, got {type(timestamp).__name__}"
            )

        sender = raw.get("sender", "user")
        if sender not in _SENDERS:
            raise ValueError(f"'sender' must be 'user' or 'system', got {sender!r}")

        message_id = raw.get("id", default_id)
        return cls(
            id=str(message_id),
            text=text,
            timestamp=timestamp,
            sender=sender,  # type: ignore[arg-type]
        )


@dataclass(frozen=True)
class MetricsResult:
    """USP and PES scores plus the counts they were derived from."""

    usp_score: int
    pes_load: int
    word_count: int = 0
    positive_hits: int = 0
    negative_hits: int = 0

    def to_payload(self) -> dict[str, object]:
        """Serialize metrics, with labels, for tool output."""
        return {
            "usp_score": self.usp_score,
            "usp_label": usp_label(self.usp_score),
            "pes_load": self.pes_load,
            "pes_label": pes_label(self.pes_load),
            "word_count": self.word_count,
            "positive_hits": self.positive_hits,
            "negative_hits": self.negative_hits,
        }


def combine_messages(messages: Sequence[Message]) -> str:
    """Join lower-cased message texts with single spaces, in order."""
    return " ".join(message.text.lower() for message in messages)


def count_keyword_hits(text: str, patterns: tuple[re.Pattern[str], ...]) -> int:
    """Count whole-word matches of every keyword pattern in ``text``."""
    return sum(len(pattern.findall(text)) for pattern in patterns)


def compute_metrics(
    messages: Sequence[Message] | None,
    hyperparameters: Hyperparameters = HYPERPARAMETERS,
) -> MetricsResult:
    """Compute USP and PES load for a conversation history.

    An empty or missing history returns the neutral baseline (USP at its
    midpoint, no PES load) rather than zeros.
    """
    hp = hyperparameters
    if not messages:
        return MetricsResult(usp_score=hp.empty_usp_score, pes_load=hp.empty_pes_load)

    combined = combine_messages(messages)
    positive_hits = count_keyword_hits(combined, _POSITIVE_RES)
    negative_hits = count_keyword_hits(combined, _NEGATIVE_RES)
    word_count = len(combined.split())

    if word_count > 0:
        normalized_positive = positive_hits / word_count * hp.density_basis
        normalized_negative = negative_hits / word_count * hp.density_basis
    else:
        normalized_positive = 0.0
        normalized_negative = 0.0

    return MetricsResult(
        usp_score=clamp_score(hp.usp_baseline + normalized_positive * hp.usp_gain, hp),
        pes_load=clamp_score(normalized_negative * hp.pes_gain, hp),
        word_count=word_count,
        positive_hits=positive_hits,
        negative_hits=negative_hits,
    )


def usp_label(score: int, hp: Hyperparameters = HYPERPARAMETERS) -> str:
    """Map a USP score onto its descriptive label."""
    if score >= hp.usp_excellent_min:
        return "Excellent"
    if score >= hp.usp_strong_min:
        return "Strong"
    if score >= hp.usp_moderate_min:
        return "Moderate"
    if score >= hp.usp_low_min:
        return "Low"
    return "Critical"


def pes_label(load: int, hp: Hyperparameters = HYPERPARAMETERS) -> str:
    """Map a PES load onto its descriptive label."""
    if load >= hp.pes_critical_min:
        return "Critical"
    if load >= hp.pes_high_min:
        return "High"
    if load >= hp.pes_moderate_min:
        return "Moderate"
    if load >= hp.pes_low_min:
        return "Low"
    return "Minimal"
