"""Base class for lint rules.

Every rule states a natural condition about a commit message (``type is one
of ...``, ``header is at most N characters``). The configured applicability
decides how the condition is enforced: ``always`` reports a violation when the
condition does not hold, ``never`` reports one when it does.
"""
from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple

from ..models import Applicability, CommitMessage, RuleSetting, Violation
from .case import CASES


class Rule(ABC):
    """Abstract base class for rules."""

    name: str = ""
    takes_parameter: bool = True

    def validate_parameter(self, parameter: Any) -> Any:
        """Check and normalize the configured parameter.

        Raises:
            ValueError: If the parameter has the wrong type or value
        """
        return parameter

    @abstractmethod
    def condition(self, message: CommitMessage, parameter: Any) -> Optional[bool]:
        """Evaluate the rule's condition; ``None`` means there is nothing to check."""
        pass

    @abstractmethod
    def describe(self, message: CommitMessage, parameter: Any, must: str) -> str:
        """Human readable violation text, ``must`` is "must" or "must not"."""
        pass

    def check(self, message: CommitMessage, setting: RuleSetting) -> Optional[Violation]:
        holds = self.condition(message, setting.parameter)
        if holds is None:
            return None
        always = setting.applicability is Applicability.ALWAYS
        if holds == always:
            return None
        must = "must" if always else "must not"
        return Violation(
            name=self.name,
            severity=setting.severity,
            message=self.describe(message, setting.parameter, must),
        )


def string_list(parameter: Any) -> Tuple[str, ...]:
    if isinstance(parameter, str) or not isinstance(parameter, (list, tuple)):
        raise ValueError(f"expected a list of strings, got {parameter!r}")
    if not all(isinstance(item, str) for item in parameter):
        raise ValueError(f"expected a list of strings, got {parameter!r}")
    return tuple(parameter)


def case_list(parameter: Any) -> Tuple[str, ...]:
    cases = (parameter,) if isinstance(parameter, str) else string_list(parameter)
    unknown = [case for case in cases if case not in CASES]
    if unknown or not cases:
        raise ValueError(
            f"unknown case {', '.join(unknown) or '(empty)'}; expected one of {', '.join(CASES)}"
        )
    return cases


def length(parameter: Any) -> int:
    if isinstance(parameter, bool) or not isinstance(parameter, int) or parameter < 0:
        raise ValueError(f"expected a non-negative integer, got {parameter!r}")
    return parameter


def text(parameter: Any) -> str:
    if not isinstance(parameter, str):
        raise ValueError(f"expected a string, got {parameter!r}")
    return parameter
