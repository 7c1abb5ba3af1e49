"""Detect obligation words welded to a response verb.

Objective: Catch demands like "you must respond", "you need to verify", or
"required to confirm" that frame a reply as compulsory.

Example Rule Violations:
    - "You must respond by Friday."
    - "You need to verify this today."

Example Non-Violations:
    - "We must plan the trip together."
      Obligation word without a response verb.
    - "I have to buy groceries."

Severity: High.
"""


import re

from scam_guard.analysis import Category
from scam_guard.rules.base import PatternRule

_DEMAND_ACTION_RE = re.compile(
    r"\b(?:must|have\s+to|need\s+to|required\s+to)\s+"
    r"(?:respond|reply|call|click|verify|confirm|act)",
    re.IGNORECASE,
)


class DemandActionRule(PatternRule):
    """Flag coercive demands for immediate action."""

    name = "demand_action"
    category = Category.COERCION
    pattern = _DEMAND_ACTION_RE

    def example_violations(self) -> list[str]:
        """Return samples that should trigger demand-action matches."""
        return [
            "You must respond by Friday.",
            "You need to verify this today.",
        ]

    def example_non_violations(self) -> list[str]:
        """Return samples that should avoid demand-action matches."""
        return [
            "We must plan the trip together.",
            "I have to buy groceries.",
        ]
