"""Tests for configuration functionality."""

import pytest

from gitcommitlint.config import Config, ConfigError, default_config, validate_rules
from gitcommitlint.models import Applicability, Severity
from gitcommitlint.presets import CONVENTIONAL


def test_default_config():
    """Test default configuration values."""
    config = Config()
    assert config.extends == []
    assert config.strict is False
    assert config.default_ignores is True
    assert config.ignores == []
    assert config.help_url is None
    assert list(config.rules) == [
        "type-enum",
        "header-max-length",
        "subject-full-stop",
        "subject-case",
        "body-leading-blank",
        "footer-leading-blank",
    ]

    header = config.rules["header-max-length"]
    assert header.severity == Severity.WARNING
    assert header.applicability == Applicability.ALWAYS
    assert header.parameter == 72

    full_stop = config.rules["subject-full-stop"]
    assert full_stop.severity == Severity.ERROR
    assert full_stop.applicability == Applicability.NEVER
    assert full_stop.parameter == "."

    assert "security" in config.rules["type-enum"].parameter
    assert config.rules["body-leading-blank"].parameter is None


def test_default_config_helper():
    assert default_config().rules == Config().rules


def test_rule_config_is_read_only():
    rules = Config().rule_config
    with pytest.raises(TypeError):
        rules["type-enum"] = None


def test_config_load_nonexistent(tmp_path):
    """Test loading configuration when file doesn't exist."""
    config = Config.load(tmp_path)
    assert config.rules == Config().rules


def test_config_load_and_save(tmp_path):
    """Test saving and loading the shipped configuration."""
    path = Config.reference().save(tmp_path)
    assert path == tmp_path / ".commitlint.toml"

    loaded_config = Config.load(tmp_path)

    assert loaded_config.extends == [CONVENTIONAL]
    assert loaded_config.rules["type-enum"].parameter == (
        "feat", "fix", "refactor", "docs", "test", "chore", "perf", "ci", "security",
    )
    assert loaded_config.rules["header-max-length"].parameter == 72
    # Rules from the preset are merged in.
    assert loaded_config.rules["type-case"].parameter == ("lower-case",)
    assert loaded_config.rules["body-max-line-length"].parameter == 100


def test_local_rules_override_extends(tmp_path):
    config = Config.from_data(
        {"extends": [CONVENTIONAL], "rules": {"header-max-length": [1, "always", 60]}},
        tmp_path,
    )

    assert config.rules["header-max-length"].parameter == 60
    assert config.rules["header-max-length"].severity == Severity.WARNING


def test_extends_local_file(tmp_path):
    (tmp_path / "base.toml").write_text(
        'extends = ["@commitlint/config-conventional"]\n'
        '[rules]\n'
        'header-max-length = [2, "always", 50]\n'
    )
    (tmp_path / ".commitlint.toml").write_text(
        'extends = ["base.toml"]\n'
        '[rules]\n'
        'subject-case = [0]\n'
    )

    config = Config.load(tmp_path)

    assert config.rules["header-max-length"].parameter == 50
    assert config.rules["subject-case"].severity == Severity.OFF
    assert config.rules["type-empty"].applicability == Applicability.NEVER


def test_later_extends_win(tmp_path):
    (tmp_path / "first.toml").write_text('[rules]\nheader-max-length = [2, "always", 50]\n')
    (tmp_path / "second.toml").write_text('[rules]\nheader-max-length = [2, "always", 60]\n')

    config = Config.from_data({"extends": ["first.toml", "second.toml"]}, tmp_path)

    assert config.rules["header-max-length"].parameter == 60


def test_circular_extends(tmp_path):
    (tmp_path / "a.toml").write_text('extends = ["b.toml"]\n')
    (tmp_path / "b.toml").write_text('extends = ["a.toml"]\n')

    with pytest.raises(ConfigError, match="Circular"):
        Config.load(tmp_path, tmp_path / "a.toml")


def test_unknown_extends(tmp_path):
    with pytest.raises(ConfigError, match="Cannot resolve"):
        Config.from_data({"extends": ["@commitlint/config-angular"]}, tmp_path)


def test_extends_must_be_strings(tmp_path):
    with pytest.raises(ConfigError):
        Config.from_data({"extends": [1]}, tmp_path)


def test_config_load_pyproject(tmp_path):
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "demo"\n'
        '\n'
        '[tool.commitlint]\n'
        'strict = true\n'
        '[tool.commitlint.rules]\n'
        'type-enum = [2, "always", ["feat"]]\n'
    )

    config = Config.load(tmp_path)

    assert config.strict is True
    assert list(config.rules) == ["type-enum"]


def test_pyproject_without_section_is_ignored(tmp_path):
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n')

    assert Config.find(tmp_path) is None


def test_config_load_invalid_toml(tmp_path):
    (tmp_path / ".commitlint.toml").write_text("invalid [ toml")

    with pytest.raises(ConfigError, match="Error reading config file"):
        Config.load(tmp_path)


def test_config_load_missing_explicit_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        Config.load(tmp_path, tmp_path / "missing.toml")


@pytest.mark.parametrize("rules,message", [
    ({"no-such-rule": [2, "always"]}, "Unknown rule"),
    ({"header-max-length": [3, "always", 72]}, "Invalid entry"),
    ({"header-max-length": ["2", "always", 72]}, "Invalid entry"),
    ({"header-max-length": [2, "sometimes", 72]}, "Invalid entry"),
    ({"header-max-length": [2, "always", "72"]}, "Invalid parameter"),
    ({"header-max-length": 2}, "Invalid entry"),
    ({"type-enum": [2, "always"]}, "requires a parameter"),
    ({"subject-case": [1, "always", "title-case"]}, "Invalid parameter"),
])
def test_validate_rules_errors(rules, message):
    with pytest.raises(ConfigError, match=message):
        validate_rules(rules)


def test_disabled_rule_needs_no_parameter():
    settings = validate_rules({"type-enum": [0]})
    assert settings["type-enum"].severity == Severity.OFF


def test_constructor_raises_config_error():
    with pytest.raises(ConfigError):
        Config(rules={"no-such-rule": [2, "always"]})


def test_unknown_key_is_rejected(tmp_path):
    with pytest.raises(ConfigError, match="Extra inputs are not permitted"):
        Config.from_data({"rule": {"type-enum": [2, "always", ["feat"]]}}, tmp_path)


def test_config_file_with_misspelled_key(tmp_path):
    (tmp_path / ".commitlint.toml").write_text(
        'strict = true\n'
        'default_ignore = false\n'
    )

    with pytest.raises(ConfigError, match="default_ignore"):
        Config.load(tmp_path)


def test_invalid_ignore_pattern():
    with pytest.raises(ConfigError):
        Config(ignores=["("])


def test_strict_environment_variable(monkeypatch):
    monkeypatch.setenv("GIT_COMMIT_LINT_STRICT", "yes")
    assert Config().strict is True

    monkeypatch.setenv("GIT_COMMIT_LINT_STRICT", "0")
    assert Config().strict is False


def test_help_url_environment_variable(monkeypatch):
    monkeypatch.setenv("GIT_COMMIT_LINT_HELP_URL", "https://example.com/commits")
    assert Config().help_url == "https://example.com/commits"
    assert Config(help_url="https://example.com/other").help_url == "https://example.com/other"
