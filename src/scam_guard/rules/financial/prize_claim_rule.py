"""Detect prize and lottery claims that mention an amount.

Objective: Catch a winning/prize keyword followed later on the same line by
an amount marker ("million", "thousand", "USD", or a dollar sign).

Example Rule Violations:
    - "You won 5 million dollars in our annual draw."
      Unsolicited win announcement with an amount.
    - "Claim your reward of $500 before Friday."
      Reward claim with a dollar figure.

Example Non-Violations:
    - "Our team won the match on Sunday."
      A win with no amount attached.
    - "The prize is a signed book."
      Prize without money.

Severity: High. The gap between keyword and amount is bounded to one line of
at most ``_MAX_GAP_CHARS`` characters so matching stays linear in practice on
long adversarial input.
"""


import re

from scam_guard.analysis import Category
from scam_guard.rules.base import PatternRule

_MAX_GAP_CHARS = 200

_PRIZE_CLAIM_RE = re.compile(
    r"\b(?:won|winner|prize|lottery|jackpot|claim|reward)\b"
    rf".{{0,{_MAX_GAP_CHARS}}}"
    r"(?:\b(?:million|thousand|usd)|\$)",
    re.IGNORECASE,
)


class PrizeClaimRule(PatternRule):
    """Flag lottery, prize, and reward claims that name an amount."""

    name = "prize_claim"
    category = Category.FINANCIAL
    pattern = _PRIZE_CLAIM_RE

    def example_violations(self) -> list[str]:
        """Return samples that should trigger prize-claim matches."""
        return [
            "You won 5 million dollars in our annual draw.",
            "Claim your reward of $500 before Friday.",
        ]

    def example_non_violations(self) -> list[str]:
        """Return samples that should avoid prize-claim matches."""
        return [
            "Our team won the match on Sunday.",
            "The prize is a signed book.",
        ]
