"""Split raw commit messages into header, body and footer."""
import re
from typing import List, Optional

from .models import CommitMessage

HEADER_PATTERN = re.compile(r"^(\w*)(?:\((.*)\))?!?: (.*)$")
TRAILER_PATTERN = re.compile(r"^(?:BREAKING[ -]CHANGE|[A-Za-z][\w-]*)(?:: | #)\S")
SCISSORS = "# ------------------------ >8 ------------------------"
COMMENT_CHAR = "#"


def clean_message(text: str) -> str:
    """Apply git's default cleanup: drop comments, scissors and surrounding blank lines.

    Trailing whitespace is stripped from every line except the header, which
    is kept verbatim for the header rules.
    """
    text = text.replace("\r\n", "\n")
    lines: List[str] = []
    for line in text.split("\n"):
        if line.startswith(SCISSORS):
            break
        if line.startswith(COMMENT_CHAR):
            continue
        lines.append(line)
    header_index = next((i for i, line in enumerate(lines) if line.strip()), None)
    lines = [line if i == header_index else line.rstrip() for i, line in enumerate(lines)]
    return "\n".join(lines).strip("\n")


def _join(lines: List[str]) -> Optional[str]:
    while lines and not lines[-1].strip():
        lines = lines[:-1]
    return "\n".join(lines) if lines else None


def _footer_start(lines: List[str], body_start: int) -> Optional[int]:
    """Index of the trailing block of trailer lines, if the message ends in one.

    Indented lines continue the trailer above them. The block must leave at
    least one body line before it.
    """
    footer_start = None
    index = len(lines) - 1
    while index > body_start:
        line = lines[index]
        if TRAILER_PATTERN.match(line):
            footer_start = index
        elif not (line[:1].isspace() and line.strip()):
            break
        index -= 1
    return footer_start


def parse(text: str) -> CommitMessage:
    """Parse a commit message.

    Never raises: anything that can't be decomposed is reported through
    ``parse_warnings`` and left as ``None``.
    """
    raw = clean_message(text or "")
    lines = raw.split("\n")
    header = lines[0]
    warnings: List[str] = []

    commit_type = scope = subject = None
    if not header.strip():
        warnings.append("message has no header")
    else:
        match = HEADER_PATTERN.match(header)
        if match:
            commit_type, scope, subject = match.groups()
            commit_type = commit_type or None
            subject = subject or None
        else:
            warnings.append("header does not match 'type(scope): subject'")

    start = 1
    while start < len(lines) and not lines[start].strip():
        start += 1

    body = footer = None
    if start < len(lines):
        footer_start = _footer_start(lines, start)
        body = _join(lines[start:footer_start])
        if footer_start is not None:
            footer = _join(lines[footer_start:])

    return CommitMessage(
        raw=raw,
        header=header,
        type=commit_type,
        scope=scope,
        subject=subject,
        body=body,
        footer=footer,
        parse_warnings=tuple(warnings),
    )
