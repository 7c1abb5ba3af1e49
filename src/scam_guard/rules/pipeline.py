"""Rule pipeline orchestration and JSONL serialization helpers."""


import json
from collections.abc import Iterable, Mapping
from importlib.resources import files
from pathlib import Path

from scam_guard.analysis import AnalysisDocument, AnalysisState, Category
from scam_guard.log import get_logger

from .base import Rule, RuleConfig
from .registry import RuleList, resolve_rule_type, rule_type_name

logger = get_logger("rules.pipeline")

_RULE_TYPE_FIELD = "rule_type"
_CONFIG_FIELD = "config"


class Pipeline:
    """Ordered rule pipeline with JSONL load/save.

    Rules run grouped by category in ``Category`` declaration order; within a
    category they run in the order they were given.
    """

    def __init__(self, rules: list[Rule[RuleConfig]]) -> None:
        """Initialize a pipeline from an ordered list of instantiated rules."""
        self.rules = list(rules)

    @classmethod
    def from_jsonl(cls, path: str | Path | None = None) -> "Pipeline":
        """Build a pipeline from a JSONL rule-settings file.

        Args:
            path: JSONL path. If omitted, loads packaged defaults.
        """
        raw_lines = _read_jsonl_lines(path)
        rules = _parse_rules_from_jsonl(raw_lines)
        if not rules:
            source = "<package default>" if path is None else str(path)
            raise ValueError(f"JSONL rule configuration is empty: {source}")
        return cls(rules)

    def to_jsonl(self, path: str | Path) -> None:
        """Write this pipeline's rule settings to a JSONL file."""
        output_path = Path(path)
        with output_path.open("w", encoding="utf-8") as handle:
            for rule in self.rules:
                payload = {
                    _RULE_TYPE_FIELD: rule_type_name(type(rule)),
                    _CONFIG_FIELD: rule.to_dict(),
                }
                handle.write(json.dumps(payload, sort_keys=True))
                handle.write("\n")

    def rules_for(self, category: Category) -> list[Rule[RuleConfig]]:
        """Return the configured rules of one category, in order."""
        return [rule for rule in self.rules if rule.category is category]

    def forward(self, document: AnalysisDocument) -> AnalysisState:
        """Apply all rules category by category and merge their outputs.

        A rule that raises contributes nothing; the failure is logged and the
        remaining rules still run.
        """
        state = AnalysisState.initial()
        for category in Category:
            for rule in self.rules_for(category):
                try:
                    result = rule.forward(document)
                except Exception:  # noqa: BLE001 - isolate per-rule failures
                    logger.exception(
                        "Pattern matching failed for rule %s",
                        rule.name,
                        extra={"rule": rule.name, "category": category.value},
                    )
                    continue
                state = state.merge(result)
        return state


def build_default_rules() -> RuleList:
    """Return default configured rules from packaged JSONL settings."""
    return list(Pipeline.from_jsonl().rules)


def run_rule_pipeline(
    document: AnalysisDocument,
    rules: list[Rule[RuleConfig]],
) -> AnalysisState:
    """Apply an ordered list of instantiated rules and merge outputs."""
    return Pipeline(rules).forward(document)


def _read_jsonl_lines(path: str | Path | None) -> list[str]:
    """Read raw JSONL lines from a path or packaged defaults."""
    if path is None:
        raw_text = (
            files("scam_guard.rules")
            .joinpath("assets/default.jsonl")
            .read_text(encoding="utf-8")
        )
        return raw_text.splitlines()
    return Path(path).read_text(encoding="utf-8").splitlines()


def _parse_rules_from_jsonl(lines: Iterable[str]) -> RuleList:
    """Parse and instantiate rules from JSONL lines."""
    rules: RuleList = []
    for line_number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped:
            continue

        try:
            payload = json.loads(stripped)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON on line {line_number}: {exc.msg}") from exc

        if not isinstance(payload, dict):
            raise TypeError(f"Line {line_number} must be a JSON object")

        rule_type_raw = payload.get(_RULE_TYPE_FIELD)
        if not isinstance(rule_type_raw, str):
            raise TypeError(
                f"Line {line_number} must contain string '{_RULE_TYPE_FIELD}'"
            )

        config_raw = payload.get(_CONFIG_FIELD)
        if not isinstance(config_raw, Mapping):
            raise TypeError(f"Line {line_number} must contain object '{_CONFIG_FIELD}'")

        rule_type = resolve_rule_type(rule_type_raw)
        try:
            rules.append(rule_type.from_dict(config_raw))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid config on line {line_number}: {exc}") from exc

    return rules
