"""Detect guaranteed or risk-free investment language.

Objective: Catch investment nouns paired with a promise that removes risk
("profit guaranteed", "returns risk-free", "ROI 100%").

Example Rule Violations:
    - "This investment guaranteed to double in a month."
    - "Returns risk-free on every deposit."

Example Non-Violations:
    - "The investment carries normal market risk."
    - "Returns are processed within thirty days."

Severity: Critical.
"""


import re

from scam_guard.analysis import Category
from scam_guard.rules.base import PatternRule

_GUARANTEED_RETURN_RE = re.compile(
    r"\b(?:investment|profit|returns?|roi)\s+"
    r"(?:guaranteed|assured|risk[- ]?free|100%)",
    re.IGNORECASE,
)


class GuaranteedReturnRule(PatternRule):
    """Flag investment offers that promise certain returns."""

    name = "guaranteed_return"
    category = Category.FINANCIAL
    pattern = _GUARANTEED_RETURN_RE

    def example_violations(self) -> list[str]:
        """Return samples that should trigger guaranteed-return matches."""
        return [
            "This investment guaranteed to double in a month.",
            "Returns risk-free on every deposit.",
        ]

    def example_non_violations(self) -> list[str]:
        """Return samples that should avoid guaranteed-return matches."""
        return [
            "The investment carries normal market risk.",
            "Returns are processed within thirty days.",
        ]
