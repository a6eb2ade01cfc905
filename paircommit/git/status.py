"""Git status utilities.

Contains:
- has_uncommitted_changes: Whether the working tree differs from HEAD
- get_staged_files: List of staged file paths
- has_staged_changes: Whether anything is staged
"""

from paircommit.git.runner import run_git_command


def has_uncommitted_changes() -> bool:
    """Check for modified, staged or untracked files.

    Returns:
        True if 'git status --porcelain' reports anything.
    """
    return bool(run_git_command(["status", "--porcelain=v1"]))


def get_staged_files() -> list[str]:
    """Get list of staged file paths.

    Returns:
        List of staged file paths.
    """
    output = run_git_command(["diff", "--staged", "--name-only"])
    if not output:
        return []
    return output.split("\n")


def has_staged_changes() -> bool:
    """Check whether anything is staged for the next commit."""
    return bool(get_staged_files())
