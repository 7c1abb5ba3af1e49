"""Urgency rules."""

from .account_threat_rule import AccountThreatRule
from .limited_time_rule import LimitedTimeRule
from .time_window_rule import TimeWindowRule
from .urgency_vocabulary_rule import UrgencyVocabularyRule

__all__ = [
    "AccountThreatRule",
    "LimitedTimeRule",
    "TimeWindowRule",
    "UrgencyVocabularyRule",
]
