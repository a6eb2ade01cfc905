"""Git staging and commit operations.

Contains:
- stage_interactively: Run 'git add -p'
- commit: Commit staged changes with a message
- commit_empty: Record a commit without file changes
"""

from paircommit.git.runner import run_git_command, run_interactive_git_command


def stage_interactively() -> None:
    """Let the user pick hunks to stage with 'git add -p'."""
    run_interactive_git_command(["add", "-p"])


def commit(message: str) -> str:
    """Commit the staged changes.

    The message is passed on stdin so it is used verbatim.

    Args:
        message: The full commit message.

    Returns:
        Output of 'git commit'.
    """
    return run_git_command(["commit", "-F", "-"], input_text=message)


def commit_empty(message: str) -> str:
    """Record a commit without any file changes.

    Args:
        message: The full commit message.

    Returns:
        Output of 'git commit'.
    """
    return run_git_command(["commit", "--allow-empty", "-F", "-"], input_text=message)
