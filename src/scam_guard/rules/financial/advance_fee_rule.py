"""Detect fees demanded before a prize or payout is released.

Objective: Find a fee noun, a requirement word, and a release condition in
sequence, e.g. "fee required before release" or "tax needed to claim".

Example Rule Violations:
    - "A processing fee required before release of your funds."
    - "A small tax needed to claim your winnings."

Example Non-Violations:
    - "There is no fee for this service."
    - "Payment received, thank you."

Severity: High; upfront payment for a promised payout is the classic
advance-fee pattern.
"""


import re

from scam_guard.analysis import Category
from scam_guard.rules.base import PatternRule

_ADVANCE_FEE_RE = re.compile(
    r"\b(?:fee|tax|charge|payment)\s+(?:required|needed|must\s+pay)\s+"
    r"(?:before|to\s+(?:claim|receive|unlock))",
    re.IGNORECASE,
)


class AdvanceFeeRule(PatternRule):
    """Flag upfront fees attached to a promised release of money."""

    name = "advance_fee"
    category = Category.FINANCIAL
    pattern = _ADVANCE_FEE_RE

    def example_violations(self) -> list[str]:
        """Return samples that should trigger advance-fee matches."""
        return [
            "A processing fee required before release of your funds.",
            "A small tax needed to claim your winnings.",
        ]

    def example_non_violations(self) -> list[str]:
        """Return samples that should avoid advance-fee matches."""
        return [
            "There is no fee for this service.",
            "Payment received, thank you.",
        ]
