"""Rule evaluation for parsed commit messages."""
from typing import List

from .models import CommitMessage, RuleConfig, Severity, Violation
from .rules import RULES


def evaluate(message: CommitMessage, config: RuleConfig) -> List[Violation]:
    """Check ``message`` against every enabled rule in ``config``.

    Rules run in registry order regardless of the order of ``config``, and
    all of them run: one failure does not stop the others. Disabled rules
    (severity 0) are skipped without calling their check. ``config`` must
    already be validated by the loader.

    Args:
        message: The parsed commit message
        config: Mapping of rule name to setting

    Returns:
        List[Violation]: Violations in evaluation order
    """
    violations: List[Violation] = []
    for name, rule in RULES.items():
        setting = config.get(name)
        if setting is None or setting.severity == Severity.OFF:
            continue
        violation = rule.check(message, setting)
        if violation is not None:
            violations.append(violation)
    return violations
