"""Detect direct requests to send or wire money.

Objective: Flag imperative transfer verbs followed by money, currency, or
crypto nouns ("send money", "wire me funds", "pay bitcoin").

Example Rule Violations:
    - "Please wire money to the account below."
      Transfer verb directly followed by a money noun.
    - "Just send me $200 and it is sorted."
      Transfer request with an optional "me" before the currency sign.

Example Non-Violations:
    - "I sent the package yesterday."
      Past tense delivery, no money noun.
    - "Money management is a useful skill."
      Mentions money without a transfer request.

Severity: Critical; a direct payment request from an unknown sender is the
core of most scams.
"""


import re

from scam_guard.analysis import Category
from scam_guard.rules.base import PatternRule

_MONEY_TRANSFER_RE = re.compile(
    r"\b(?:send|wire|transfer|pay)\s+(?:me\s+)?"
    r"(?:money|\$|usd|bitcoin|btc|crypto|funds)",
    re.IGNORECASE,
)


class MoneyTransferRule(PatternRule):
    """Flag direct money-transfer requests."""

    name = "money_transfer"
    category = Category.FINANCIAL
    pattern = _MONEY_TRANSFER_RE

    def example_violations(self) -> list[str]:
        """Return samples that should trigger transfer-request matches."""
        return [
            "Please wire money to the account below.",
            "Just send me $200 and it is sorted.",
        ]

    def example_non_violations(self) -> list[str]:
        """Return samples that should avoid transfer-request matches."""
        return [
            "I sent the package yesterday.",
            "Money management is a useful skill.",
        ]
