"""Tests for the commit linter."""
from unittest.mock import AsyncMock, Mock

import pytest

from gitcommitlint.config import Config
from gitcommitlint.core import CommitLinter, is_ignored
from gitcommitlint.models import LintSummary, Severity
from gitcommitlint.observers import LintObserver


@pytest.fixture
def linter():
    return CommitLinter()


@pytest.fixture
def mock_observer():
    observer = Mock(spec=LintObserver)
    observer.on_message_linted = AsyncMock()
    observer.on_run_completed = AsyncMock()
    return observer


def test_lint_valid_message(linter):
    outcome = linter.lint("feat: add login")

    assert outcome.valid is True
    assert outcome.errors == []
    assert outcome.warnings == []
    assert outcome.ignored is False


def test_lint_invalid_message(linter):
    outcome = linter.lint("Feat: add login.")

    assert outcome.valid is False
    assert [v.name for v in outcome.errors] == ["type-enum", "subject-full-stop"]
    assert outcome.warnings == []
    assert outcome.header == "Feat: add login."


def test_lint_warnings_only_is_valid(linter):
    outcome = linter.lint("feat: Add login")

    assert outcome.valid is True
    assert [v.name for v in outcome.warnings] == ["subject-case"]
    assert outcome.warnings[0].severity == Severity.WARNING


def test_lint_strict_fails_on_warnings():
    linter = CommitLinter(Config(strict=True))

    assert linter.lint("feat: Add login").valid is False
    assert linter.lint("feat: add login").valid is True


def test_lint_records_parse_warnings(linter):
    outcome = linter.lint("no conventional header")

    assert outcome.valid is False
    assert outcome.parse_warnings


@pytest.mark.parametrize("text", [
    "Merge branch 'main' into feature",
    "Merge pull request #12 from user/branch",
    "Merge tag 'v1.0.0'",
    "Revert \"feat: add login\"",
    "fixup! feat: add login",
    "squash! feat: add login",
    "Automatic merge from CI",
    "Auto-merged main into feature",
    "Merge remote-tracking branch 'origin/main'",
])
def test_default_ignores(linter, text):
    outcome = linter.lint(text)

    assert outcome.ignored is True
    assert outcome.valid is True
    assert outcome.errors == []


def test_default_ignores_can_be_disabled():
    config = Config(default_ignores=False)

    assert not is_ignored("Merge branch 'main' into feature", config)
    assert CommitLinter(config).lint("Merge branch 'main' into feature").valid is False


def test_custom_ignores():
    config = Config(ignores=[r"^WIP\b"])

    assert is_ignored("WIP do not merge", config)
    assert not is_ignored("feat: WIP support", config)


def test_revert_type_is_not_ignored(linter):
    assert linter.lint("revert: feat: add login").ignored is False


@pytest.mark.asyncio
async def test_lint_many_keeps_order(linter):
    texts = ["feat: add login", "Feat: add login.", "fix: handle timeout", "nonsense"]

    summary = await linter.lint_many(texts)

    assert isinstance(summary, LintSummary)
    assert [outcome.input for outcome in summary.outcomes] == texts
    assert summary.valid is False
    assert summary.error_count == 3
    assert summary.warning_count == 0


@pytest.mark.asyncio
async def test_lint_many_notifies_observers(linter, mock_observer):
    linter.add_observer(mock_observer)

    summary = await linter.lint_many(["feat: add login", "fix: handle timeout"])

    assert mock_observer.on_message_linted.await_count == 2
    first = mock_observer.on_message_linted.await_args_list[0].args[0]
    assert first.input == "feat: add login"
    mock_observer.on_run_completed.assert_awaited_once_with(summary)


@pytest.mark.asyncio
async def test_remove_observer(linter, mock_observer):
    linter.add_observer(mock_observer)
    linter.remove_observer(mock_observer)

    await linter.lint_many(["feat: add login"])

    mock_observer.on_message_linted.assert_not_awaited()


@pytest.mark.asyncio
async def test_lint_many_matches_sequential_lint(linter):
    texts = [f"feat: change {index}" if index % 2 else f"Bad {index}." for index in range(20)]

    summary = await linter.lint_many(texts)

    assert summary.outcomes == [linter.lint(text) for text in texts]
