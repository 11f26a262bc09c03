import pytest
import tempfile
from pathlib import Path
from git import Repo

from gitcommitlint.config import default_config

pytest_plugins = ('pytest_asyncio',)

@pytest.fixture
def default_rules():
    """The default rule table as a read-only mapping."""
    return default_config().rule_config

@pytest.fixture
def temp_git_repo():
    """Create a temporary git repository with a short history."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        repo = Repo.init(tmp_dir)
        with repo.config_writer() as writer:
            writer.set_value("user", "name", "Test User")
            writer.set_value("user", "email", "test@example.com")

        test_file = Path(tmp_dir) / "test.txt"
        for index, message in enumerate([
            "chore: initial commit",
            "feat: add login",
            "Fix Stuff.",
        ]):
            test_file.write_text(f"content {index}")
            repo.index.add(["test.txt"])
            repo.index.commit(message)

        yield tmp_dir

@pytest.fixture
def config_repo(tmp_path):
    """A directory with a config file that turns header length into an error."""
    (tmp_path / ".commitlint.toml").write_text(
        'extends = []\n'
        '\n'
        '[rules]\n'
        'type-enum = [2, "always", ["feat", "fix"]]\n'
        'header-max-length = [2, "always", 20]\n'
    )
    return tmp_path
