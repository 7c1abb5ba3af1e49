"""Detect phishing-style requests to verify an account or identity.

Objective: Identify "verify your account", "confirm your identity", "update
your details" and similar. These are the usual opener of a credential
harvesting page.

Example Rule Violations:
    - "Please verify your account to keep access."
    - "Confirm your identity to continue."

Example Non-Violations:
    - "I will confirm the booking tomorrow."
    - "Update the slides before the meeting."

Severity: High.
"""


import re

from scam_guard.analysis import Category
from scam_guard.rules.base import PatternRule

_VERIFICATION_REQUEST_RE = re.compile(
    r"\b(?:verify|confirm|update|validate)\s+(?:your\s+)?"
    r"(?:account|identity|information|details|credentials)",
    re.IGNORECASE,
)


class VerificationRequestRule(PatternRule):
    """Flag phishing verification requests."""

    name = "verification_request"
    category = Category.SUSPICIOUS
    pattern = _VERIFICATION_REQUEST_RE

    def example_violations(self) -> list[str]:
        """Return samples that should trigger verification-request matches."""
        return [
            "Please verify your account to keep access.",
            "Confirm your identity to continue.",
        ]

    def example_non_violations(self) -> list[str]:
        """Return samples that should avoid verification-request matches."""
        return [
            "I will confirm the booking tomorrow.",
            "Update the slides before the meeting.",
        ]
