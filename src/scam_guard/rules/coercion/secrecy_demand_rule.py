"""Detect demands to keep a conversation secret.

Objective: Identify isolation tactics: "don't tell", "keep this secret",
"confidential", "private matter". Both straight and typographic apostrophes
are accepted in "don't".

Example Rule Violations:
    - "Don't tell your family about this."
    - "Keep this secret between us."

Example Non-Violations:
    - "Please tell your family I said hello."
    - "The recipe is no secret."

Severity: Critical; secrecy cuts the target off from people who would warn
them.
"""


import re

from scam_guard.analysis import Category
from scam_guard.rules.base import PatternRule

_SECRECY_DEMAND_RE = re.compile(
    r"\b(?:don['\u2019]?t\s+(?:tell|share|show)|keep\s+(?:this\s+)?secret|"
    r"confidential|private\s+matter)",
    re.IGNORECASE,
)


class SecrecyDemandRule(PatternRule):
    """Flag requests to keep things secret."""

    name = "secrecy_demand"
    category = Category.COERCION
    pattern = _SECRECY_DEMAND_RE

    def example_violations(self) -> list[str]:
        """Return samples that should trigger secrecy matches."""
        return [
            "Don't tell your family about this.",
            "Keep this secret between us.",
        ]

    def example_non_violations(self) -> list[str]:
        """Return samples that should avoid secrecy matches."""
        return [
            "Please tell your family I said hello.",
            "The recipe is no secret.",
        ]
