"""Read commit messages to lint from a repository or a hook file."""
from pathlib import Path
from typing import List, Optional

from git import Repo

DEFAULT_EDIT_FILE = Path(".git") / "COMMIT_EDITMSG"


def read_commit_messages(
    repo_path: str,
    from_ref: Optional[str] = None,
    to_ref: str = "HEAD",
    last: bool = False,
) -> List[str]:
    """Collect commit messages from a repository, oldest first.

    Args:
        repo_path: Path to the git repository
        from_ref: Exclusive lower bound of the range; ``None`` reads all of history
        to_ref: Inclusive upper bound of the range
        last: Only read the message of ``to_ref``

    Returns:
        List[str]: Raw commit messages

    Raises:
        git.GitCommandError: If a ref can't be resolved
    """
    repo = Repo(repo_path)
    if last:
        return [repo.commit(to_ref).message]

    rev = f"{from_ref}..{to_ref}" if from_ref else to_ref
    commits = list(repo.iter_commits(rev))
    commits.reverse()
    return [commit.message for commit in commits]


def read_edit_message(path: Path) -> str:
    """Read the message file git hands to a commit-msg hook."""
    return path.read_text(encoding="utf-8")
