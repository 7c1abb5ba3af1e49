"""Coercion rules."""

from .demand_action_rule import DemandActionRule
from .legal_threat_rule import LegalThreatRule
from .penalty_threat_rule import PenaltyThreatRule
from .secrecy_demand_rule import SecrecyDemandRule

__all__ = [
    "DemandActionRule",
    "LegalThreatRule",
    "PenaltyThreatRule",
    "SecrecyDemandRule",
]
