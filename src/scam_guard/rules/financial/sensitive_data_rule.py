"""Detect requests for banking or identity details.

Objective: Identify a credential or identity noun followed by a word asking
for its contents, such as "bank details", "password verification", or
"social security number".

Example Rule Violations:
    - "Reply with your bank details to continue."
      Asks for account contents over a message.
    - "We need your social security number on file."
      Asks for an identity number.

Example Non-Violations:
    - "The bank opens at nine on weekdays."
      Mentions a bank without asking for data.
    - "Choose a long password for the router."
      Advice about passwords, not a request for one.

Severity: Critical; legitimate services do not collect these by text.
"""


import re

from scam_guard.analysis import Category
from scam_guard.rules.base import PatternRule

_SENSITIVE_DATA_RE = re.compile(
    r"\b(?:bank|account|credit\s+card|password|pin|ssn|social\s+security)\s+"
    r"(?:number|details|info|verification)",
    re.IGNORECASE,
)


class SensitiveDataRule(PatternRule):
    """Flag requests for sensitive financial or identity information."""

    name = "sensitive_data"
    category = Category.FINANCIAL
    pattern = _SENSITIVE_DATA_RE

    def example_violations(self) -> list[str]:
        """Return samples that should trigger sensitive-data matches."""
        return [
            "Reply with your bank details to continue.",
            "We need your social security number on file.",
        ]

    def example_non_violations(self) -> list[str]:
        """Return samples that should avoid sensitive-data matches."""
        return [
            "The bank opens at nine on weekdays.",
            "Choose a long password for the router.",
        ]
