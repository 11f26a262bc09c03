"""Observer pattern for lint runs."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .models import LintOutcome, LintSummary, Violation


class LintObserver(ABC):
    """Abstract base class for lint observers."""

    @abstractmethod
    async def on_message_linted(self, outcome: LintOutcome) -> None:
        """Called once per linted message, in input order."""
        pass

    @abstractmethod
    async def on_run_completed(self, summary: LintSummary) -> None:
        """Called after every message of a run has been linted."""
        pass


class ConsoleReportObserver(LintObserver):
    """Observer that reports violations to the console."""

    def __init__(
        self,
        console: Optional[Console] = None,
        verbose: bool = False,
        help_url: Optional[str] = None,
    ):
        self.console = console or Console()
        self.verbose = verbose
        self.help_url = help_url

    def _print_violation(self, violation: Violation, style: str, sign: str) -> None:
        self.console.print(
            f"[{style}]{sign}[/{style}]   {escape(violation.message)} [dim]\\[{violation.name}][/dim]"
        )

    async def on_message_linted(self, outcome: LintOutcome) -> None:
        if outcome.ignored:
            if self.verbose:
                self.console.print(f"[dim]⧗   ignored: {escape(outcome.header)}[/dim]")
            return
        if not (outcome.errors or outcome.warnings) and not self.verbose:
            return

        self.console.print(f"⧗   input: {escape(outcome.header)}")
        for note in outcome.parse_warnings:
            self.console.print(f"[dim]    {escape(note)}[/dim]")
        for violation in outcome.errors:
            self._print_violation(violation, "red", "✖")
        for violation in outcome.warnings:
            self._print_violation(violation, "yellow", "⚠")

        problems = len(outcome.errors) + len(outcome.warnings)
        sign = "[green]✔[/green]" if outcome.valid else "[red]✖[/red]"
        self.console.print(f"\n{sign}   found {problems} problems, {len(outcome.warnings)} warnings\n")

    async def on_run_completed(self, summary: LintSummary) -> None:
        if summary.valid:
            if self.verbose:
                self.console.print(
                    f"[green]All {len(summary.outcomes)} commit messages passed[/green]"
                )
            return
        if self.help_url:
            self.console.print(f"ⓘ   Get help: {self.help_url}")


class FileLogObserver(LintObserver):
    """Observer that logs lint results to a file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        # Ensure the parent directory exists
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    async def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a", encoding="utf-8") as f:
            f.write(f"{timestamp} - {message}\n")

    async def on_message_linted(self, outcome: LintOutcome) -> None:
        if outcome.ignored:
            await self._log(f"Ignored: {outcome.header}")
            return
        status = "Passed" if outcome.valid else "Failed"
        await self._log(f"{status}: {outcome.header}")
        for violation in outcome.errors + outcome.warnings:
            await self._log(
                f"  {violation.severity.name.lower()} [{violation.name}] {violation.message}"
            )

    async def on_run_completed(self, summary: LintSummary) -> None:
        status = "passed" if summary.valid else "failed"
        await self._log(
            f"Run {status}: {len(summary.outcomes)} messages, "
            f"{summary.error_count} errors, {summary.warning_count} warnings"
        )
