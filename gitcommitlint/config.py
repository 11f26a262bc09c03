"""Configuration management for git-commit-lint."""
import os
import re
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

import tomli
import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .models import RuleConfig, RuleSetting, Severity, freeze_rules
from .presets import CONVENTIONAL, DEFAULT_RULES, PRESETS
from .rules import RULES

DEFAULT_CONFIG_FILENAME = ".commitlint.toml"
PYPROJECT_FILENAME = "pyproject.toml"
PYPROJECT_SECTION = "commitlint"


class ConfigError(ValueError):
    """Raised when a configuration can't be loaded or validated."""


def validate_rules(entries: Mapping[str, Any]) -> Dict[str, RuleSetting]:
    """Validate raw rule entries from a config file.

    Args:
        entries: Mapping of rule name to ``[severity, applicability, parameter?]``

    Returns:
        Dict[str, RuleSetting]: Validated settings with normalized parameters

    Raises:
        ConfigError: On unknown rules, bad severities, applicabilities or parameters
    """
    if not isinstance(entries, Mapping):
        raise ConfigError(f"'rules' must be a table, got {type(entries).__name__}")

    settings: Dict[str, RuleSetting] = {}
    for name, entry in entries.items():
        rule = RULES.get(name)
        if rule is None:
            raise ConfigError(f"Unknown rule '{name}'")
        try:
            setting = RuleSetting.from_entry(entry)
        except (ValidationError, ValueError) as e:
            raise ConfigError(f"Invalid entry for rule '{name}': {e}") from e

        # Disabled rules are never checked, so their parameter may be missing.
        if setting.severity != Severity.OFF and rule.takes_parameter:
            if setting.parameter is None:
                raise ConfigError(f"Rule '{name}' requires a parameter")
            try:
                parameter = rule.validate_parameter(setting.parameter)
            except ValueError as e:
                raise ConfigError(f"Invalid parameter for rule '{name}': {e}") from e
            setting = setting.model_copy(update={"parameter": parameter})
        settings[name] = setting
    return settings


def _read_toml(path: Path) -> Dict[str, Any]:
    try:
        with path.open('rb') as f:
            return tomli.load(f)
    except tomli.TOMLDecodeError as e:
        raise ConfigError(f"Error reading config file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e


def resolve_extends(
    extends: List[str], base_dir: Path, seen: Tuple[Path, ...] = ()
) -> Dict[str, RuleSetting]:
    """Merge the rules of every ``extends`` entry, left to right.

    Entries are either the name of a built-in preset or a path to another
    TOML config, relative to ``base_dir``. Later entries win on collision.

    Raises:
        ConfigError: If an entry can't be resolved or the chain has a cycle
    """
    merged: Dict[str, RuleSetting] = {}
    for reference in extends:
        if reference in PRESETS:
            data = PRESETS[reference]
            nested_dir, nested_seen = base_dir, seen
        elif reference.endswith(".toml"):
            path = (base_dir / reference).resolve()
            if path in seen:
                raise ConfigError(f"Circular extends: {reference}")
            if not path.exists():
                raise ConfigError(f"Cannot resolve extends entry '{reference}'")
            data = _read_toml(path)
            nested_dir, nested_seen = path.parent, seen + (path,)
        else:
            raise ConfigError(f"Cannot resolve extends entry '{reference}'")

        nested_extends = data.get("extends", [])
        if not isinstance(nested_extends, list) or not all(isinstance(item, str) for item in nested_extends):
            raise ConfigError(f"'extends' in '{reference}' must be a list of strings")
        merged.update(resolve_extends(nested_extends, nested_dir, nested_seen))
        merged.update(validate_rules(data.get("rules", {})))
    return merged


class Config(BaseModel):
    """Configuration settings for git-commit-lint.

    ``rules`` holds the effective rule table: the rules of every ``extends``
    entry merged in order, overridden by the file's own rules. Resolution
    happens once, in ``load``/``from_data``. Unknown keys are rejected.
    """

    model_config = ConfigDict(extra="forbid")

    extends: List[str] = Field(
        default_factory=list,
        description="Presets or config files whose rules are merged before the local ones"
    )

    rules: Dict[str, RuleSetting] = Field(
        default_factory=lambda: validate_rules(DEFAULT_RULES),
        description="Rule name to [severity, applicability, parameter]"
    )

    strict: bool = Field(
        default=False,
        description="Whether warnings also fail the run"
    )

    default_ignores: bool = Field(
        default=True,
        description="Whether merge, revert, fixup and squash messages are skipped"
    )

    ignores: List[str] = Field(
        default_factory=list,
        description="Regular expressions; matching messages are skipped"
    )

    help_url: Optional[str] = Field(
        default=None,
        description="URL shown after a failed run"
    )

    @field_validator("rules", mode="before")
    @classmethod
    def _validate_rules(cls, value: Any) -> Dict[str, RuleSetting]:
        return validate_rules(value)

    @field_validator("ignores")
    @classmethod
    def _validate_ignores(cls, value: List[str]) -> List[str]:
        for pattern in value:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"invalid ignore pattern {pattern!r}: {e}") from e
        return value

    def __init__(self, **data):
        """Initialize config with environment variable support."""
        env_data = {}

        env_mapping = {
            'GIT_COMMIT_LINT_STRICT': 'strict',
            'GIT_COMMIT_LINT_HELP_URL': 'help_url',
        }

        for env_var, field_name in env_mapping.items():
            if env_var in os.environ:
                value = os.environ[env_var]

                if field_name == 'strict':
                    value = value.lower() in ['true', '1', 'yes', 'on']

                env_data[field_name] = value

        merged_data = {**env_data, **data}

        try:
            super().__init__(**merged_data)
        except ValidationError as e:
            raise ConfigError(str(e)) from e

    @property
    def rule_config(self) -> RuleConfig:
        """Read-only view of the effective rule table."""
        return freeze_rules(self.rules)

    @classmethod
    def reference(cls) -> 'Config':
        """The configuration this project ships: conventional preset plus local rules.

        ``extends`` is left unresolved; this is the form written by ``save``.
        """
        return cls(extends=[CONVENTIONAL], rules=DEFAULT_RULES)

    @classmethod
    def from_data(cls, data: Dict[str, Any], base_dir: Path) -> 'Config':
        """Build a config from parsed TOML, resolving ``extends``.

        Raises:
            ConfigError: If the data is not a valid configuration
        """
        data = dict(data)
        extends = data.get("extends", [])
        if isinstance(extends, str):
            extends = [extends]
        if not isinstance(extends, list) or not all(isinstance(item, str) for item in extends):
            raise ConfigError("'extends' must be a list of strings")
        data["extends"] = extends

        rules = resolve_extends(extends, base_dir)
        rules.update(validate_rules(data.get("rules", {})))
        data["rules"] = rules
        return cls(**data)

    @classmethod
    def find(cls, repo_path: Path) -> Optional[Path]:
        """Locate the config file for a repository, if any."""
        config_path = repo_path / DEFAULT_CONFIG_FILENAME
        if config_path.exists():
            return config_path
        pyproject = repo_path / PYPROJECT_FILENAME
        if pyproject.exists() and PYPROJECT_SECTION in _read_toml(pyproject).get("tool", {}):
            return pyproject
        return None

    @classmethod
    def load(cls, repo_path: Path, config_file: Optional[Path] = None) -> 'Config':
        """Load configuration from the config file.

        Args:
            repo_path: Path to the git repository
            config_file: Explicit config file, overrides the lookup in ``repo_path``

        Returns:
            Config: Configuration object with values from file or defaults

        Raises:
            ConfigError: If the file is malformed or references unknown rules or presets
        """
        config_path = config_file or cls.find(repo_path)

        if config_path is None:
            return cls()
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")

        config_data = _read_toml(config_path)
        if config_path.name == PYPROJECT_FILENAME:
            config_data = config_data.get("tool", {}).get(PYPROJECT_SECTION, {})

        return cls.from_data(config_data, config_path.parent)

    def to_dict(self) -> Dict[str, Any]:
        config_dict: Dict[str, Any] = {
            "extends": list(self.extends),
            "strict": self.strict,
            "default_ignores": self.default_ignores,
            "ignores": list(self.ignores),
            "rules": {name: setting.to_entry() for name, setting in self.rules.items()},
        }
        if self.help_url:
            config_dict["help_url"] = self.help_url
        return config_dict

    def save(self, repo_path: Path) -> Path:
        """Save configuration to the config file.

        Args:
            repo_path: Path to the git repository

        Returns:
            Path: The written file
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME
        with config_path.open('wb') as f:
            tomli_w.dump(self.to_dict(), f)
        return config_path


def default_config() -> Config:
    """The default rule table, without any ``extends``."""
    return Config(rules=DEFAULT_RULES)
