#!/usr/bin/env python3
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.markup import escape

from .config import DEFAULT_CONFIG_FILENAME, Config, ConfigError
from .core import CommitLinter
from .history import DEFAULT_EDIT_FILE, read_commit_messages, read_edit_message
from .observers import ConsoleReportObserver, FileLogObserver

console = Console()

LINT_FAILED_EXIT_CODE = 1
CONFIG_ERROR_EXIT_CODE = 9


def display_config(config: Config, config_path: Optional[Path]) -> None:
    """Print the effective rule table."""
    console.print("\n[bold]Effective Configuration:[/bold]")
    if config_path is not None:
        console.print(f"[dim]Config file: {config_path.as_posix()}[/dim]")
    else:
        console.print("[dim]Using default values (no config file found)[/dim]")
    if config.extends:
        console.print(f"[dim]Extends: {', '.join(config.extends)}[/dim]")

    console.print(f"\n{'Rule':<24} {'Level':<8} {'When':<8} {'Value'}")
    console.print("-" * 70)
    for name, setting in config.rules.items():
        value = setting.parameter
        if isinstance(value, tuple):
            value = ", ".join(value)
        console.print(
            f"{name:<24} {setting.severity.name.lower():<8} "
            f"{setting.applicability.value:<8} {'' if value is None else value}",
            markup=False,
        )

    console.print(f"\nstrict={config.strict} default_ignores={config.default_ignores}")


def collect_messages(
    repo_path: Path,
    edit: Optional[Path],
    from_ref: Optional[str],
    to_ref: str,
    last: bool,
) -> List[str]:
    if edit is not None:
        edit_path = edit if edit.is_absolute() else repo_path / edit
        return [read_edit_message(edit_path)]
    if from_ref or last:
        return read_commit_messages(str(repo_path), from_ref=from_ref, to_ref=to_ref, last=last)

    stdin = click.get_text_stream("stdin")
    if stdin.isatty():
        return []
    text = stdin.read()
    return [text] if text.strip() else []


@click.command()
@click.option(
    "-p",
    "--path",
    default=".",
    help="Path to git repository (defaults to current directory)",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "-g",
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Path to the config file (defaults to {DEFAULT_CONFIG_FILENAME} or pyproject.toml)",
)
@click.option(
    "-f", "--from", "from_ref", help="Lower end of the commit range to lint (exclusive)"
)
@click.option(
    "-t", "--to", "to_ref", help="Upper end of the commit range, with --from or --last (defaults to HEAD)"
)
@click.option("-l", "--last", is_flag=True, help="Lint only the last commit")
@click.option(
    "-e",
    "--edit",
    is_flag=False,
    flag_value=str(DEFAULT_EDIT_FILE),
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Lint a commit message file (defaults to {DEFAULT_EDIT_FILE.as_posix()})",
)
@click.option("-s", "--strict", is_flag=True, help="Treat warnings as failures")
@click.option("-V", "--verbose", is_flag=True, help="Also report messages without problems")
@click.option("--print-config", is_flag=True, help="Display the effective configuration and exit")
@click.option("--init", is_flag=True, help="Write the default config file and exit")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional file to log lint results to",
)
@click.option("--version", is_flag=True, help="Display version information and exit")
def main(
    path: Path,
    config_file: Optional[Path],
    from_ref: Optional[str],
    to_ref: Optional[str],
    last: bool,
    edit: Optional[Path],
    strict: bool,
    verbose: bool,
    print_config: bool,
    init: bool,
    log_file: Optional[Path],
    version: bool,
):
    """
    Lint commit messages against conventional commit rules.

    Messages are read from, in order of preference:
    1. A commit message file (--edit), as in a commit-msg hook
    2. A commit range (--from/--to) or the last commit (--last)
    3. Standard input

    Configuration is read from .commitlint.toml or the [tool.commitlint]
    table of pyproject.toml in the repository root.
    """
    if to_ref is not None and not (from_ref or last):
        raise click.UsageError("--to requires --from or --last")

    try:
        if version:
            from .version import display_version_info

            display_version_info()
            return

        repo_path = path.absolute()

        if init:
            config_path = repo_path / DEFAULT_CONFIG_FILENAME
            if config_path.exists():
                console.print(f"[yellow]Config file already exists:[/yellow] {config_path}")
                return
            Config.reference().save(repo_path)
            console.print(f"[green]Created config file:[/green] {config_path}")
            return

        try:
            config = Config.load(repo_path, config_file)
        except ConfigError as e:
            console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
            sys.exit(CONFIG_ERROR_EXIT_CODE)

        if print_config:
            display_config(config, config_file or Config.find(repo_path))
            return

        # Command line options override config
        if strict:
            config.strict = True

        messages = collect_messages(repo_path, edit, from_ref, to_ref or "HEAD", last)
        if not messages:
            console.print(
                "[red]✖   input is required: supply it via stdin, --edit, --last or --from[/red]"
            )
            sys.exit(LINT_FAILED_EXIT_CODE)

        linter = CommitLinter(config)
        linter.add_observer(
            ConsoleReportObserver(console, verbose=verbose, help_url=config.help_url)
        )
        if log_file is not None:
            linter.add_observer(FileLogObserver(str(log_file)))

        summary = asyncio.run(linter.lint_many(messages))
        if not summary.valid:
            sys.exit(LINT_FAILED_EXIT_CODE)
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise click.Abort()


if __name__ == "__main__":
    main()
