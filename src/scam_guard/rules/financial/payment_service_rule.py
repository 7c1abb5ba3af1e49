"""Detect mentions of hard-to-reverse payment services."""


import re

from scam_guard.analysis import Category
from scam_guard.rules.base import PatternRule

_PAYMENT_SERVICE_RE = re.compile(
    r"\b(?:paypal|venmo|cashapp|zelle|western\s+union|moneygram)\b",
    re.IGNORECASE,
)


class PaymentServiceRule(PatternRule):
    """Flag named payment services (PayPal, Venmo, Zelle, Western Union...)."""

    name = "payment_service"
    category = Category.FINANCIAL
    pattern = _PAYMENT_SERVICE_RE

    def example_violations(self) -> list[str]:
        """Return samples that should trigger payment-service matches."""
        return [
            "Send it through Western Union tonight.",
            "My Venmo handle is below.",
        ]

    def example_non_violations(self) -> list[str]:
        """Return samples that should avoid payment-service matches."""
        return [
            "I paid by bank transfer last week.",
            "The union meeting starts at five.",
        ]
