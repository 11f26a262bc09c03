"""Rules on the body and footer blocks."""
from typing import Any, Optional

from ..models import CommitMessage
from .base import Rule, length


def _longest_line(block: str) -> int:
    return max(len(line) for line in block.split("\n"))


class BodyLeadingBlankRule(Rule):
    """The body must be separated from the header by an empty line."""

    name = "body-leading-blank"
    takes_parameter = False

    def condition(self, message: CommitMessage, parameter: Any) -> Optional[bool]:
        if message.body is None:
            return None
        return message.lines[1] == ""

    def describe(self, message: CommitMessage, parameter: Any, must: str) -> str:
        return f"body {must} have leading blank line"


class BodyEmptyRule(Rule):
    name = "body-empty"
    takes_parameter = False

    def condition(self, message: CommitMessage, parameter: Any) -> Optional[bool]:
        return message.body is None

    def describe(self, message: CommitMessage, parameter: Any, must: str) -> str:
        return f"body {must} be empty"


class BodyMaxLineLengthRule(Rule):
    name = "body-max-line-length"

    def validate_parameter(self, parameter: Any) -> int:
        return length(parameter)

    def condition(self, message: CommitMessage, parameter: int) -> Optional[bool]:
        if message.body is None:
            return None
        return _longest_line(message.body) <= parameter

    def describe(self, message: CommitMessage, parameter: int, must: str) -> str:
        return f"body's lines {must} be at most {parameter} characters"


class FooterLeadingBlankRule(Rule):
    """The footer must be separated from the body by an empty line."""

    name = "footer-leading-blank"
    takes_parameter = False

    def condition(self, message: CommitMessage, parameter: Any) -> Optional[bool]:
        if message.footer is None:
            return None
        # The footer is always the tail of the cleaned message.
        before = message.raw[: len(message.raw) - len(message.footer)]
        return before.endswith("\n\n")

    def describe(self, message: CommitMessage, parameter: Any, must: str) -> str:
        return f"footer {must} have leading blank line"


class FooterEmptyRule(Rule):
    name = "footer-empty"
    takes_parameter = False

    def condition(self, message: CommitMessage, parameter: Any) -> Optional[bool]:
        return message.footer is None

    def describe(self, message: CommitMessage, parameter: Any, must: str) -> str:
        return f"footer {must} be empty"


class FooterMaxLineLengthRule(Rule):
    name = "footer-max-line-length"

    def validate_parameter(self, parameter: Any) -> int:
        return length(parameter)

    def condition(self, message: CommitMessage, parameter: int) -> Optional[bool]:
        if message.footer is None:
            return None
        return _longest_line(message.footer) <= parameter

    def describe(self, message: CommitMessage, parameter: int, must: str) -> str:
        return f"footer's lines {must} be at most {parameter} characters"
