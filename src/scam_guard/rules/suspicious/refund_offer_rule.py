"""Detect unexpected refund and compensation offers.

Objective: Flag "refund", "reimbursement", "compensation", "owed", and
"entitled". Promises of money owed are a common lure.

Example Rule Violations:
    - "You are entitled to a tax refund."
    - "Your compensation is pending."

Example Non-Violations:
    - "The package arrived on time."
    - "The film is titled Night Train."

Severity: Medium.
"""


import re

from scam_guard.analysis import Category
from scam_guard.rules.base import PatternRule

_REFUND_OFFER_RE = re.compile(
    r"\b(?:refund|reimbursement|compensation|owed|entitled)\b",
    re.IGNORECASE,
)


class RefundOfferRule(PatternRule):
    """Flag unexpected refund or compensation language."""

    name = "refund_offer"
    category = Category.SUSPICIOUS
    pattern = _REFUND_OFFER_RE

    def example_violations(self) -> list[str]:
        """Return samples that should trigger refund-offer matches."""
        return [
            "You are entitled to a tax refund.",
            "Your compensation is pending.",
        ]

    def example_non_violations(self) -> list[str]:
        """Return samples that should avoid refund-offer matches."""
        return [
            "The package arrived on time.",
            "The film is titled Night Train.",
        ]
