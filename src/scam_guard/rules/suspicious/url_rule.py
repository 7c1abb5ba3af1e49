"""Detect bare URLs.

Objective: Record every ``http(s)://`` or ``www.`` address. Each distinct URL
becomes its own trigger; repeats of the same URL collapse.

Example Rule Violations:
    - "Visit https://example.com/login now."
    - "Go to www.example.com today."

Example Non-Violations:
    - "Visit our office downtown."
    - "The website is listed on the card."

Severity: Low; a URL alone is weak evidence.
"""


import re

from scam_guard.analysis import Category
from scam_guard.rules.base import PatternRule

_URL_RE = re.compile(r"https?://\S+|www\.\S+", re.IGNORECASE)


class UrlRule(PatternRule):
    """Flag URLs embedded in the message."""

    name = "url"
    category = Category.SUSPICIOUS
    pattern = _URL_RE

    def example_violations(self) -> list[str]:
        """Return samples that should trigger URL matches."""
        return [
            "Visit https://example.com/login now.",
            "Go to www.example.com today.",
        ]

    def example_non_violations(self) -> list[str]:
        """Return samples that should avoid URL matches."""
        return [
            "Visit our office downtown.",
            "The website is listed on the card.",
        ]
