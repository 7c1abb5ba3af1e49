"""Detect unsolicited congratulations and selection language."""


import re

from scam_guard.analysis import Category
from scam_guard.rules.base import PatternRule

_CONGRATULATION_RE = re.compile(
    r"\b(?:congratulations|congrats|selected|chosen|qualified)\b",
    re.IGNORECASE,
)


class CongratulationRule(PatternRule):
    """Flag "congratulations, you have been selected" openers."""

    name = "congratulation"
    category = Category.SUSPICIOUS
    pattern = _CONGRATULATION_RE

    def example_violations(self) -> list[str]:
        """Return samples that should trigger congratulation matches."""
        return [
            "Congratulations, you are our lucky winner!",
            "You have been selected for a special reward.",
        ]

    def example_non_violations(self) -> list[str]:
        """Return samples that should avoid congratulation matches."""
        return [
            "The team met on Monday.",
            "She is a certified nurse.",
        ]
