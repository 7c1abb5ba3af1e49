"""Suspicious-content rules."""

from .congratulation_rule import CongratulationRule
from .link_request_rule import LinkRequestRule
from .refund_offer_rule import RefundOfferRule
from .url_rule import UrlRule
from .verification_request_rule import VerificationRequestRule

__all__ = [
    "CongratulationRule",
    "LinkRequestRule",
    "RefundOfferRule",
    "UrlRule",
    "VerificationRequestRule",
]
