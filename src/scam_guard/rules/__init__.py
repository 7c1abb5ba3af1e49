"""Rule framework exports."""

from .base import PatternRule, PatternRuleConfig, Rule, RuleConfig
from .pipeline import Pipeline, build_default_rules, run_rule_pipeline
from .registry import DEFAULT_RULE_TYPES, RuleList

__all__ = [
    "DEFAULT_RULE_TYPES",
    "PatternRule",
    "PatternRuleConfig",
    "Pipeline",
    "Rule",
    "RuleConfig",
    "RuleList",
    "build_default_rules",
    "run_rule_pipeline",
]
