"""Financial rules."""

from .advance_fee_rule import AdvanceFeeRule
from .guaranteed_return_rule import GuaranteedReturnRule
from .money_transfer_rule import MoneyTransferRule
from .payment_service_rule import PaymentServiceRule
from .prize_claim_rule import PrizeClaimRule
from .sensitive_data_rule import SensitiveDataRule

__all__ = [
    "AdvanceFeeRule",
    "GuaranteedReturnRule",
    "MoneyTransferRule",
    "PaymentServiceRule",
    "PrizeClaimRule",
    "SensitiveDataRule",
]
