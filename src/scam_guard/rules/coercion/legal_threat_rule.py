"""Detect legal and law-enforcement intimidation vocabulary.

Objective: Flag words such as "lawsuit", "arrest", "warrant", "police", or
"attorney". Real courts and police do not open proceedings by text message,
so any of these in an unsolicited message is a strong signal.

Example Rule Violations:
    - "A warrant has been issued in your name."
    - "We will take legal action tomorrow."

Example Non-Violations:
    - "The garden party starts at noon."
    - "My cousin studies music theory."

Severity: Critical.
"""


import re

from scam_guard.analysis import Category
from scam_guard.rules.base import PatternRule

_LEGAL_THREAT_RE = re.compile(
    r"\b(?:legal\s+action|lawsuit|arrest|warrant|police|authorities|court|"
    r"lawyer|attorney)\b",
    re.IGNORECASE,
)


class LegalThreatRule(PatternRule):
    """Flag legal-threat intimidation."""

    name = "legal_threat"
    category = Category.COERCION
    pattern = _LEGAL_THREAT_RE

    def example_violations(self) -> list[str]:
        """Return samples that should trigger legal-threat matches."""
        return [
            "A warrant has been issued in your name.",
            "We will take legal action tomorrow.",
        ]

    def example_non_violations(self) -> list[str]:
        """Return samples that should avoid legal-threat matches."""
        return [
            "The garden party starts at noon.",
            "My cousin studies music theory.",
        ]
