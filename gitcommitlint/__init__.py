"""Conventional commit message linting."""

__version__ = "0.3.0"

from .config import Config, ConfigError, default_config
from .core import CommitLinter, is_ignored
from .evaluator import evaluate
from .models import (
    Applicability,
    CommitMessage,
    LintOutcome,
    LintSummary,
    RuleSetting,
    Severity,
    Violation,
)
from .parser import parse

__all__ = [
    'Applicability',
    'CommitLinter',
    'CommitMessage',
    'Config',
    'ConfigError',
    'LintOutcome',
    'LintSummary',
    'RuleSetting',
    'Severity',
    'Violation',
    'default_config',
    'evaluate',
    'is_ignored',
    'parse',
]
