"""Shared models for git-commit-lint."""
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Severity(IntEnum):
    OFF = 0
    WARNING = 1
    ERROR = 2


class Applicability(str, Enum):
    ALWAYS = "always"
    NEVER = "never"


@dataclass(frozen=True)
class CommitMessage:
    """A commit message split into its conventional-commit parts.

    ``header``, ``body`` and ``footer`` are slices of ``raw`` in document
    order. Parts that are not present are ``None``; a message without a
    body never has a footer.
    """
    raw: str
    header: str
    type: Optional[str] = None
    scope: Optional[str] = None
    subject: Optional[str] = None
    body: Optional[str] = None
    footer: Optional[str] = None
    parse_warnings: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def lines(self) -> List[str]:
        return self.raw.split("\n")


class RuleSetting(BaseModel):
    """One entry of the rule table: ``[severity, applicability, parameter?]``."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    applicability: Applicability = Applicability.ALWAYS
    parameter: Any = None

    @field_validator("severity", mode="before")
    @classmethod
    def _check_severity(cls, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"severity must be 0, 1 or 2, got {value!r}")
        return value

    @classmethod
    def from_entry(cls, entry: Any) -> "RuleSetting":
        """Build a setting from the list form used in config files."""
        if isinstance(entry, RuleSetting):
            return entry
        if not isinstance(entry, (list, tuple)) or not 1 <= len(entry) <= 3:
            raise ValueError(
                "rule entry must be [severity, applicability, parameter?]"
            )
        values = dict(zip(("severity", "applicability", "parameter"), entry))
        return cls(**values)

    def to_entry(self) -> List[Any]:
        entry: List[Any] = [int(self.severity), self.applicability.value]
        if self.parameter is not None:
            entry.append(list(self.parameter) if isinstance(self.parameter, tuple) else self.parameter)
        return entry


# Read-only, ordered mapping of rule name to setting.
RuleConfig = Mapping[str, RuleSetting]


def freeze_rules(rules: Mapping[str, RuleSetting]) -> RuleConfig:
    return MappingProxyType(dict(rules))


@dataclass(frozen=True)
class Violation:
    name: str
    severity: Severity
    message: str


class LintOutcome(BaseModel):
    """Result of linting a single commit message."""

    input: str
    valid: bool
    errors: List[Violation] = Field(default_factory=list)
    warnings: List[Violation] = Field(default_factory=list)
    ignored: bool = Field(default=False, description="Message matched an ignore pattern and was not evaluated")
    parse_warnings: List[str] = Field(default_factory=list)

    @property
    def header(self) -> str:
        return self.input.split("\n", 1)[0]


class LintSummary(BaseModel):
    """Aggregate over all messages of one run."""

    outcomes: List[LintOutcome] = Field(default_factory=list)
    strict: bool = False

    @property
    def error_count(self) -> int:
        return sum(len(outcome.errors) for outcome in self.outcomes)

    @property
    def warning_count(self) -> int:
        return sum(len(outcome.warnings) for outcome in self.outcomes)

    @property
    def valid(self) -> bool:
        return all(outcome.valid for outcome in self.outcomes)
