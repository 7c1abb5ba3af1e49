"""Detect imperatives to click or open something.

Objective: Catch "click here", "tap this link", "open the attachment"-style
prompts that steer the reader toward an unverified destination.

Example Rule Violations:
    - "Click here to continue."
    - "Please open this document today."

Example Non-Violations:
    - "The shop is open late on Fridays."
    - "Tap water is safe to drink."

Severity: Medium; links themselves are common, the imperative is the signal.
"""


import re

from scam_guard.analysis import Category
from scam_guard.rules.base import PatternRule

_LINK_REQUEST_RE = re.compile(
    r"\b(?:click|tap|open)\s+(?:here|this|link|attachment|file)",
    re.IGNORECASE,
)


class LinkRequestRule(PatternRule):
    """Flag click/open-link imperatives."""

    name = "link_request"
    category = Category.SUSPICIOUS
    pattern = _LINK_REQUEST_RE

    def example_violations(self) -> list[str]:
        """Return samples that should trigger link-request matches."""
        return [
            "Click here to continue.",
            "Please open this document today.",
        ]

    def example_non_violations(self) -> list[str]:
        """Return samples that should avoid link-request matches."""
        return [
            "The shop is open late on Fridays.",
            "Tap water is safe to drink.",
        ]
