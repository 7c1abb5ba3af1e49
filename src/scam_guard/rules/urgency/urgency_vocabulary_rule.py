"""Detect generic urgency vocabulary.

Objective: Catch words that push the reader to act before thinking, such as
"urgent", "immediately", "ASAP", "hurry", "expires", or "deadline". Words
are matched as prefixes, so "urgently" and "quickly" count too.

Example Rule Violations:
    - "This is urgent, reply immediately."
      Two pressure words in one sentence.
    - "Your voucher expires at midnight."
      Expiry framing.

Example Non-Violations:
    - "Let's meet for breakfast on Sunday."
      "fast" inside another word does not start at a word boundary.
    - "The report looks complete."
      No pressure vocabulary.

Severity: High; artificial urgency is the most common pressure tactic.
"""


import re

from scam_guard.analysis import Category
from scam_guard.rules.base import PatternRule

_URGENCY_RE = re.compile(
    r"\b(?:urgent|emergency|immediately|asap|right\s+now|hurry|quick|fast|"
    r"expire[sd]?|deadline)",
    re.IGNORECASE,
)


class UrgencyVocabularyRule(PatternRule):
    """Flag urgency pressure words."""

    name = "urgency_vocabulary"
    category = Category.URGENCY
    pattern = _URGENCY_RE

    def example_violations(self) -> list[str]:
        """Return samples that should trigger urgency-word matches."""
        return [
            "This is urgent, reply immediately.",
            "Your voucher expires at midnight.",
        ]

    def example_non_violations(self) -> list[str]:
        """Return samples that should avoid urgency-word matches."""
        return [
            "Let's meet for breakfast on Sunday.",
            "The report looks complete.",
        ]
