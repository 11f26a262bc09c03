"""Rule registry.

Rules are evaluated in the order they are declared in ``RULES``; the first
six make up the default rule table.
"""

from .base import Rule
from .body import (
    BodyEmptyRule,
    BodyLeadingBlankRule,
    BodyMaxLineLengthRule,
    FooterEmptyRule,
    FooterLeadingBlankRule,
    FooterMaxLineLengthRule,
)
from .case import CASES, is_case
from .header import (
    HeaderMaxLengthRule,
    HeaderTrimRule,
    ScopeCaseRule,
    ScopeEnumRule,
    SubjectCaseRule,
    SubjectEmptyRule,
    SubjectFullStopRule,
    TypeCaseRule,
    TypeEmptyRule,
    TypeEnumRule,
)

RULES = {
    rule.name: rule
    for rule in (
        TypeEnumRule(),
        HeaderMaxLengthRule(),
        SubjectFullStopRule(),
        SubjectCaseRule(),
        BodyLeadingBlankRule(),
        FooterLeadingBlankRule(),
        TypeCaseRule(),
        TypeEmptyRule(),
        ScopeEnumRule(),
        ScopeCaseRule(),
        SubjectEmptyRule(),
        HeaderTrimRule(),
        BodyEmptyRule(),
        BodyMaxLineLengthRule(),
        FooterEmptyRule(),
        FooterMaxLineLengthRule(),
    )
}


def get_rule(name: str) -> Rule:
    """Look up a rule by name.

    Raises:
        KeyError: If no rule with that name exists
    """
    return RULES[name]


__all__ = [
    'CASES',
    'RULES',
    'Rule',
    'get_rule',
    'is_case',
]
