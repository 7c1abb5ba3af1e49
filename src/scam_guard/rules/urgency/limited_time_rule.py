"""Detect limited-time and last-chance phrasing.

Objective: Identify stock offer-pressure phrases: "limited time", "act now",
"today only", "expires tonight", "last chance", "final notice".

Example Rule Violations:
    - "Limited time offer for members."
    - "This is your final notice."

Example Non-Violations:
    - "The library is open all week."
    - "We spent a long time on the design."

Severity: High.
"""


import re

from scam_guard.analysis import Category
from scam_guard.rules.base import PatternRule

_LIMITED_TIME_RE = re.compile(
    r"\b(?:limited\s+time|act\s+now|today\s+only|"
    r"expires?\s+(?:today|tonight|soon)|last\s+chance|"
    r"final\s+(?:notice|warning))",
    re.IGNORECASE,
)


class LimitedTimeRule(PatternRule):
    """Flag time-limited offer pressure."""

    name = "limited_time"
    category = Category.URGENCY
    pattern = _LIMITED_TIME_RE

    def example_violations(self) -> list[str]:
        """Return samples that should trigger limited-time matches."""
        return [
            "Limited time offer for members.",
            "This is your final notice.",
        ]

    def example_non_violations(self) -> list[str]:
        """Return samples that should avoid limited-time matches."""
        return [
            "The library is open all week.",
            "We spent a long time on the design.",
        ]
