"""Detect claims that an account, card, or service has been shut off.

Objective: Catch impersonation openers like "suspended account" or "blocked
card" that frighten the reader into following a link or calling back.

Example Rule Violations:
    - "We have detected a suspended account in your name."
    - "Your frozen card needs attention."

Example Non-Violations:
    - "Your account has been updated."
    - "The lake is frozen solid."

Severity: Critical.
"""


import re

from scam_guard.analysis import Category
from scam_guard.rules.base import PatternRule

_ACCOUNT_THREAT_RE = re.compile(
    r"\b(?:suspended|locked|blocked|frozen|terminated|cancelled)\s+"
    r"(?:account|service|card)",
    re.IGNORECASE,
)


class AccountThreatRule(PatternRule):
    """Flag account-suspension threats."""

    name = "account_threat"
    category = Category.URGENCY
    pattern = _ACCOUNT_THREAT_RE

    def example_violations(self) -> list[str]:
        """Return samples that should trigger account-threat matches."""
        return [
            "We have detected a suspended account in your name.",
            "Your frozen card needs attention.",
        ]

    def example_non_violations(self) -> list[str]:
        """Return samples that should avoid account-threat matches."""
        return [
            "Your account has been updated.",
            "The lake is frozen solid.",
        ]
