"""Version information for git-commit-lint."""

import importlib.metadata
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from . import __version__

console = Console()


def get_current_version() -> str:
    """Get the current version of git-commit-lint."""
    return __version__


def get_installed_version() -> str:
    """Get the installed version from pip metadata."""
    try:
        return importlib.metadata.version("git-commit-lint")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def get_installation_path() -> Optional[Path]:
    """Get the installation path of git-commit-lint."""
    return Path(__file__).parent


def display_version_info() -> None:
    """Display version information in a panel."""
    text = Text()
    text.append("git-commit-lint ", style="bold")
    text.append(get_current_version(), style="green")
    text.append(f"\nInstalled: {get_installed_version()}")
    text.append(f"\nLocation: {get_installation_path()}")
    text.append(f"\nPython: {sys.version.split()[0]}")
    console.print(Panel(text, title="Version", expand=False))
