"""Detect explicit short response windows ("within 24 hours")."""


import re

from scam_guard.analysis import Category
from scam_guard.rules.base import PatternRule

_TIME_WINDOW_RE = re.compile(
    r"\b(?:within|in\s+the\s+next)\s+(?:\d+\s+)?(?:hour|minute|day)s?",
    re.IGNORECASE,
)


class TimeWindowRule(PatternRule):
    """Flag numeric deadlines measured in minutes, hours, or days."""

    name = "time_window"
    category = Category.URGENCY
    pattern = _TIME_WINDOW_RE

    def example_violations(self) -> list[str]:
        """Return samples that should trigger time-window matches."""
        return [
            "Respond within 24 hours.",
            "Pay in the next 2 days or lose access.",
        ]

    def example_non_violations(self) -> list[str]:
        """Return samples that should avoid time-window matches."""
        return [
            "The park is within walking distance.",
            "Office hours are nine to five.",
        ]
