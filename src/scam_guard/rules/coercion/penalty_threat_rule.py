"""Detect threatened penalties for non-compliance ("a fine will be added")."""


import re

from scam_guard.analysis import Category
from scam_guard.rules.base import PatternRule

_PENALTY_THREAT_RE = re.compile(
    r"\b(?:penalty|fine|fee|charge|consequences)\s+(?:if|unless|will\s+be)",
    re.IGNORECASE,
)


class PenaltyThreatRule(PatternRule):
    """Flag penalties, fines, or consequences tied to a condition."""

    name = "penalty_threat"
    category = Category.COERCION
    pattern = _PENALTY_THREAT_RE

    def example_violations(self) -> list[str]:
        """Return samples that should trigger penalty-threat matches."""
        return [
            "A penalty will be applied to your account.",
            "There will be consequences if you ignore this.",
        ]

    def example_non_violations(self) -> list[str]:
        """Return samples that should avoid penalty-threat matches."""
        return [
            "The weather is fine today.",
            "Everything went well at the clinic.",
        ]
