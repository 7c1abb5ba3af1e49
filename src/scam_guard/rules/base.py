"""Shared base types for rule definitions."""


import re
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import ClassVar, Generic, Mapping, TypeVar, cast, get_args, get_origin

from scam_guard.analysis import AnalysisDocument, Category, DetectedTrigger, RuleResult, Severity


@dataclass(frozen=True)
class RuleConfig:
    """Base config container inherited by concrete rule configs."""

    def to_dict(self) -> dict[str, object]:
        """Serialize the config dataclass to a plain dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(
        cls: type["ConfigFromDictT"], raw: Mapping[str, object]
    ) -> "ConfigFromDictT":
        """Instantiate a config dataclass from a plain dictionary."""
        return cls(**dict(raw))


ConfigT = TypeVar("ConfigT", bound=RuleConfig)
ConfigFromDictT = TypeVar("ConfigFromDictT", bound=RuleConfig)
RuleFromDictT = TypeVar("RuleFromDictT", bound="Rule[RuleConfig]")


class Rule(ABC, Generic[ConfigT]):
    """Base rule class exposing a forward pass over one document."""

    name: str = "rule"
    category: Category = Category.SUSPICIOUS

    def __init__(self, config: ConfigT) -> None:
        """Initialize a rule with explicit configuration."""
        self.config = config

    def to_dict(self) -> dict[str, object]:
        """Serialize this rule's config as a plain dictionary."""
        return self.config.to_dict()

    @classmethod
    def from_dict(
        cls: type["RuleFromDictT"], raw: Mapping[str, object]
    ) -> "RuleFromDictT":
        """Instantiate a rule from a plain config dictionary."""
        config_type = cls._resolve_config_type()
        config = config_type.from_dict(raw)
        return cls(config)

    @classmethod
    def _resolve_config_type(cls) -> type[RuleConfig]:
        """Infer the concrete config type from ``Rule[Config]`` in the MRO."""
        for klass in cls.__mro__:
            for base in klass.__dict__.get("__orig_bases__", ()):
                if get_origin(base) is not Rule:
                    continue
                args = get_args(base)
                if len(args) == 1:
                    config_type = args[0]
                    if isinstance(config_type, type) and issubclass(
                        config_type, RuleConfig
                    ):
                        return cast(type[RuleConfig], config_type)
        raise TypeError(
            f"Could not infer config type for rule class {cls.__name__}. "
            "Ensure it subclasses Rule[ConcreteConfig]."
        )

    @abstractmethod
    def forward(self, document: AnalysisDocument) -> RuleResult:
        """Apply the rule and return its triggers."""

    @abstractmethod
    def example_violations(self) -> list[str]:
        """Return text samples that should trigger this rule."""

    @abstractmethod
    def example_non_violations(self) -> list[str]:
        """Return text samples that should not trigger this rule."""


@dataclass(frozen=True)
class PatternRuleConfig(RuleConfig):
    """Severity and user-facing copy for one pattern rule."""

    severity: Severity
    context: str
    education: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "severity", Severity(self.severity))


class PatternRule(Rule[PatternRuleConfig]):
    """Rule that reports every non-overlapping match of one regex.

    Subclasses set ``name``, ``category`` and a compiled, case-insensitive
    ``pattern``; matching runs against the sanitized document text.
    """

    pattern: ClassVar[re.Pattern[str]]

    def forward(self, document: AnalysisDocument) -> RuleResult:
        """Emit one trigger per match, keeping the matched text's case."""
        return RuleResult(
            triggers=[
                self.trigger_for(match.group(0))
                for match in self.pattern.finditer(document.text)
            ]
        )

    def trigger_for(self, matched: str) -> DetectedTrigger:
        """Build the trigger recorded for one matched substring."""
        return DetectedTrigger(
            type=self.category,
            pattern=matched,
            severity=self.config.severity,
            context=self.config.context,
            educational_info=self.config.education,
        )
