"""Rules on the header line: type, scope, subject and length."""
import re
from typing import Any, Optional, Tuple

from ..models import CommitMessage
from .base import Rule, case_list, length, string_list, text
from .case import is_case

SCOPE_DELIMITERS = re.compile(r"[/\\,]")


def _in_cases(value: str, cases: Tuple[str, ...]) -> bool:
    return any(is_case(value, case) for case in cases)


def _case_names(cases: Tuple[str, ...]) -> str:
    return cases[0] if len(cases) == 1 else f"one of [{', '.join(cases)}]"


class TypeEnumRule(Rule):
    name = "type-enum"

    def validate_parameter(self, parameter: Any) -> Tuple[str, ...]:
        return string_list(parameter)

    def condition(self, message: CommitMessage, parameter: Tuple[str, ...]) -> Optional[bool]:
        # A missing type is never a member.
        return message.type is not None and message.type in parameter

    def describe(self, message: CommitMessage, parameter: Tuple[str, ...], must: str) -> str:
        return f"type {must} be one of [{', '.join(parameter)}]"


class TypeCaseRule(Rule):
    name = "type-case"

    def validate_parameter(self, parameter: Any) -> Tuple[str, ...]:
        return case_list(parameter)

    def condition(self, message: CommitMessage, parameter: Tuple[str, ...]) -> Optional[bool]:
        if not message.type:
            return None
        return _in_cases(message.type, parameter)

    def describe(self, message: CommitMessage, parameter: Tuple[str, ...], must: str) -> str:
        return f"type {must} be {_case_names(parameter)}"


class TypeEmptyRule(Rule):
    name = "type-empty"
    takes_parameter = False

    def condition(self, message: CommitMessage, parameter: Any) -> Optional[bool]:
        return not message.type

    def describe(self, message: CommitMessage, parameter: Any, must: str) -> str:
        return f"type {must} be empty"


class ScopeEnumRule(Rule):
    name = "scope-enum"

    def validate_parameter(self, parameter: Any) -> Tuple[str, ...]:
        return string_list(parameter)

    def condition(self, message: CommitMessage, parameter: Tuple[str, ...]) -> Optional[bool]:
        if not message.scope or not parameter:
            return None
        scopes = [scope.strip() for scope in SCOPE_DELIMITERS.split(message.scope)]
        return all(scope in parameter for scope in scopes)

    def describe(self, message: CommitMessage, parameter: Tuple[str, ...], must: str) -> str:
        return f"scope {must} be one of [{', '.join(parameter)}]"


class ScopeCaseRule(Rule):
    name = "scope-case"

    def validate_parameter(self, parameter: Any) -> Tuple[str, ...]:
        return case_list(parameter)

    def condition(self, message: CommitMessage, parameter: Tuple[str, ...]) -> Optional[bool]:
        if not message.scope:
            return None
        scopes = [scope.strip() for scope in SCOPE_DELIMITERS.split(message.scope)]
        return all(_in_cases(scope, parameter) for scope in scopes)

    def describe(self, message: CommitMessage, parameter: Tuple[str, ...], must: str) -> str:
        return f"scope {must} be {_case_names(parameter)}"


class SubjectFullStopRule(Rule):
    name = "subject-full-stop"

    def validate_parameter(self, parameter: Any) -> str:
        return text(parameter)

    def condition(self, message: CommitMessage, parameter: str) -> Optional[bool]:
        if message.subject is None:
            return False
        return message.subject.rstrip().endswith(parameter)

    def describe(self, message: CommitMessage, parameter: str, must: str) -> str:
        return f"subject {must} end with full stop '{parameter}'"


class SubjectCaseRule(Rule):
    name = "subject-case"

    def validate_parameter(self, parameter: Any) -> Tuple[str, ...]:
        return case_list(parameter)

    def condition(self, message: CommitMessage, parameter: Tuple[str, ...]) -> Optional[bool]:
        if not message.subject:
            return None
        return _in_cases(message.subject, parameter)

    def describe(self, message: CommitMessage, parameter: Tuple[str, ...], must: str) -> str:
        return f"subject {must} be {_case_names(parameter)}"


class SubjectEmptyRule(Rule):
    name = "subject-empty"
    takes_parameter = False

    def condition(self, message: CommitMessage, parameter: Any) -> Optional[bool]:
        return not message.subject

    def describe(self, message: CommitMessage, parameter: Any, must: str) -> str:
        return f"subject {must} be empty"


class HeaderMaxLengthRule(Rule):
    name = "header-max-length"

    def validate_parameter(self, parameter: Any) -> int:
        return length(parameter)

    def condition(self, message: CommitMessage, parameter: int) -> Optional[bool]:
        return len(message.header) <= parameter

    def describe(self, message: CommitMessage, parameter: int, must: str) -> str:
        return (
            f"header {must} be at most {parameter} characters, "
            f"current length is {len(message.header)}"
        )


class HeaderTrimRule(Rule):
    name = "header-trim"
    takes_parameter = False

    def condition(self, message: CommitMessage, parameter: Any) -> Optional[bool]:
        return message.header == message.header.strip()

    def describe(self, message: CommitMessage, parameter: Any, must: str) -> str:
        return f"header {must} be trimmed of surrounding whitespace"
