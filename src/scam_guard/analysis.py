"""Core analysis models and scoring helpers for scam-guard."""


import math
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TypeAlias

from .sanitize import sanitize

Counts: TypeAlias = dict[str, int]
TriggerPayload: TypeAlias = dict[str, object]


class AnalysisMode(StrEnum):
    """Sensitivity preset scaling the aggregate risk score."""

    PARANOID = "paranoid"
    BALANCED = "balanced"
    VENT = "vent"


class Category(StrEnum):
    """Pattern categories, declared in the order they are checked."""

    FINANCIAL = "financial"
    URGENCY = "urgency"
    COERCION = "coercion"
    SUSPICIOUS = "suspicious"


class Severity(StrEnum):
    """Severity attached to every pattern rule."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class RiskLevel(StrEnum):
    """Coarse label derived from the final score."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class Hyperparameters:
    """Fixed multipliers, weights, and thresholds used by both scorers."""

    paranoid_multiplier: float = 1.5
    balanced_multiplier: float = 1.0
    vent_multiplier: float = 0.6

    low_weight: int = 10
    medium_weight: int = 25
    high_weight: int = 50
    critical_weight: int = 100

    score_min: int = 0
    score_max: int = 100
    risk_high_min: int = 60
    risk_medium_min: int = 30

    density_basis: float = 100.0
    usp_baseline: float = 50.0
    usp_gain: float = 10.0
    pes_gain: float = 15.0
    empty_usp_score: int = 50
    empty_pes_load: int = 0

    usp_excellent_min: int = 80
    usp_strong_min: int = 65
    usp_moderate_min: int = 50
    usp_low_min: int = 35
    pes_critical_min: int = 75
    pes_high_min: int = 50
    pes_moderate_min: int = 25
    pes_low_min: int = 10


HYPERPARAMETERS = Hyperparameters()


@dataclass(frozen=True)
class DetectedTrigger:
    """One matched risk pattern, with its user-facing rationale."""

    type: Category
    pattern: str
    severity: Severity
    context: str
    educational_info: str

    @property
    def dedup_key(self) -> str:
        """Key under which repeated matches collapse within one analysis."""
        return f"{self.type}:{self.context}:{self.pattern.lower()}"

    def to_payload(self) -> TriggerPayload:
        """Serialize a trigger for tool output."""
        return {
            "type": self.type.value,
            "pattern": self.pattern,
            "severity": self.severity.value,
            "context": self.context,
            "educational_info": self.educational_info,
        }


@dataclass(frozen=True)
class AnalysisDocument:
    """Raw input paired with the sanitized text rules match against."""

    raw_text: str
    text: str

    @classmethod
    def from_text(cls, text: str) -> "AnalysisDocument":
        """Sanitize ``text`` and wrap both views."""
        return cls(raw_text=text, text=sanitize(text))


@dataclass
class RuleResult:
    """Output payload emitted by a single rule invocation."""

    triggers: list[DetectedTrigger] = field(default_factory=list)


@dataclass(frozen=True)
class AnalysisState:
    """Immutable accumulator carrying deduplicated rule output."""

    triggers: tuple[DetectedTrigger, ...]
    seen_keys: frozenset[str]
    counts: Counts

    @classmethod
    def initial(cls) -> "AnalysisState":
        """Construct an empty state with every category count at zero."""
        return cls(triggers=(), seen_keys=frozenset(), counts=initial_counts())

    def merge(self, result: RuleResult) -> "AnalysisState":
        """Merge one rule result, dropping triggers whose key was already seen."""
        triggers = list(self.triggers)
        seen = set(self.seen_keys)
        counts = dict(self.counts)
        for trigger in result.triggers:
            key = trigger.dedup_key
            if key in seen:
                continue
            seen.add(key)
            triggers.append(trigger)
            counts[trigger.type.value] = counts.get(trigger.type.value, 0) + 1

        return AnalysisState(
            triggers=tuple(triggers),
            seen_keys=frozenset(seen),
            counts=counts,
        )


@dataclass(frozen=True)
class AnalysisResult:
    """Final score and evidence for one analyzed message."""

    score: int
    triggers: tuple[DetectedTrigger, ...]
    mode: AnalysisMode
    risk_level: RiskLevel
    summary: str
    counts: Counts

    @property
    def patterns(self) -> list[str]:
        """One display line per trigger, e.g. ``Label: "matched text"``."""
        return [f'{trigger.context}: "{trigger.pattern}"' for trigger in self.triggers]

    def to_payload(self) -> dict[str, object]:
        """Serialize the result for CLI and tool output."""
        return {
            "score": self.score,
            "risk_level": self.risk_level.value,
            "mode": self.mode.value,
            "summary": self.summary,
            "counts": dict(self.counts),
            "patterns": self.patterns,
            "triggers": [trigger.to_payload() for trigger in self.triggers],
        }


def initial_counts() -> Counts:
    """Create the per-category counter map used by the analyzer."""
    return {category.value: 0 for category in Category}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going up."""
    return math.floor(value + 0.5)


def clamp_score(value: float, hp: Hyperparameters) -> int:
    """Round and bound a raw score to ``[score_min, score_max]``."""
    return max(hp.score_min, min(hp.score_max, round_half_up(value)))


def severity_weight(severity: Severity, hp: Hyperparameters) -> int:
    """Return the score contribution of one trigger at ``severity``."""
    if severity is Severity.LOW:
        return hp.low_weight
    if severity is Severity.MEDIUM:
        return hp.medium_weight
    if severity is Severity.HIGH:
        return hp.high_weight
    if severity is Severity.CRITICAL:
        return hp.critical_weight
    raise ValueError(f"Unknown severity: {severity!r}")


def mode_multiplier(mode: AnalysisMode, hp: Hyperparameters) -> float:
    """Return the score multiplier for an analysis mode."""
    if mode is AnalysisMode.PARANOID:
        return hp.paranoid_multiplier
    if mode is AnalysisMode.BALANCED:
        return hp.balanced_multiplier
    if mode is AnalysisMode.VENT:
        return hp.vent_multiplier
    raise ValueError(f"Unknown analysis mode: {mode!r}")


def score_from_triggers(
    triggers: tuple[DetectedTrigger, ...] | list[DetectedTrigger],
    mode: AnalysisMode,
    hp: Hyperparameters,
) -> int:
    """Sum severity weights, scale by mode, and bound to 0-100."""
    raw_score = sum(severity_weight(trigger.severity, hp) for trigger in triggers)
    return clamp_score(raw_score * mode_multiplier(mode, hp), hp)


def risk_level_for_score(score: int, hp: Hyperparameters) -> RiskLevel:
    """Map a numeric score onto a coarse risk level."""
    if score >= hp.risk_high_min:
        return RiskLevel.HIGH
    if score >= hp.risk_medium_min:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def summarize(trigger_count: int) -> str:
    """Build the one-line user-facing summary."""
    if trigger_count == 0:
        return "No suspicious patterns detected. Stay vigilant."
    plural = "s" if trigger_count > 1 else ""
    return (
        f"Detected {trigger_count} suspicious pattern{plural}. "
        "Review carefully before responding."
    )


def empty_result(mode: AnalysisMode) -> AnalysisResult:
    """Build the fixed result returned for blank input."""
    return AnalysisResult(
        score=0,
        triggers=(),
        mode=mode,
        risk_level=RiskLevel.LOW,
        summary="",
        counts=initial_counts(),
    )
