"""Core functionality for git-commit-lint."""
import asyncio
import re
from typing import Iterable, List, Optional

from .config import Config, default_config
from .evaluator import evaluate
from .models import LintOutcome, LintSummary, Severity
from .observers import LintObserver
from .parser import parse

DEFAULT_IGNORES: List[re.Pattern] = [
    re.compile(pattern, re.MULTILINE)
    for pattern in (
        r"^((Merge pull request(.*?))|(Merge (.*?) into (.*?))|(Merge branch (.*?)))(?:\r?\n)*$",
        r"^(Merge tag (.*?))(?:\r?\n)*$",
        r"^(R|r)evert (.*)",
        r"^(fixup|squash)!",
        r"^(Merged (.*?)(in|into) (.*)|Merged PR (.*): (.*))",
        r"^Merge remote-tracking branch(\s*)(.*)",
        r"^Automatic merge(.*)",
        r"^Auto-merged (.*?) into (.*)",
    )
]


def is_ignored(text: str, config: Config) -> bool:
    """Check whether a message should be skipped instead of linted."""
    if config.default_ignores and any(pattern.match(text) for pattern in DEFAULT_IGNORES):
        return True
    return any(re.search(pattern, text) for pattern in config.ignores)


class CommitLinter:
    """Lints commit messages against a loaded configuration.

    The configuration is read once at construction; the linter itself keeps
    no per-message state, so ``lint`` may be called from several threads.
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or default_config()
        self.rules = self.config.rule_config
        self.observers: List[LintObserver] = []

    def add_observer(self, observer: LintObserver) -> None:
        self.observers.append(observer)

    def remove_observer(self, observer: LintObserver) -> None:
        self.observers.remove(observer)

    def lint(self, text: str) -> LintOutcome:
        """Lint a single raw commit message."""
        if is_ignored(text, self.config):
            return LintOutcome(input=text, valid=True, ignored=True)

        message = parse(text)
        violations = evaluate(message, self.rules)
        errors = [v for v in violations if v.severity == Severity.ERROR]
        warnings = [v for v in violations if v.severity == Severity.WARNING]
        valid = not errors and not (self.config.strict and warnings)

        return LintOutcome(
            input=text,
            valid=valid,
            errors=errors,
            warnings=warnings,
            parse_warnings=list(message.parse_warnings),
        )

    async def lint_many(self, texts: Iterable[str]) -> LintSummary:
        """Lint several messages concurrently and notify observers.

        Outcomes keep the order of ``texts``.
        """
        outcomes = await asyncio.gather(
            *(asyncio.to_thread(self.lint, text) for text in texts)
        )

        for outcome in outcomes:
            for observer in self.observers:
                await observer.on_message_linted(outcome)

        summary = LintSummary(outcomes=list(outcomes), strict=self.config.strict)
        for observer in self.observers:
            await observer.on_run_completed(summary)
        return summary
