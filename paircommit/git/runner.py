"""Git command runner and repository utilities.

Contains:
- run_git_command: Run a git command and return its output
- run_interactive_git_command: Run a git command attached to the terminal
- get_repo_root: Get the root directory of the current git repository
"""

import logging
import subprocess
from pathlib import Path
from typing import Optional

from paircommit.exceptions import GitError

logger = logging.getLogger(__name__)


def run_git_command(args: list[str], input_text: Optional[str] = None) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        input_text: Optional text sent to the command's stdin.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    logger.debug("Running: git %s", " ".join(args))
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
            input=input_text,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")


def run_interactive_git_command(args: list[str]) -> None:
    """Run a git command with the terminal attached.

    Used for commands that talk to the user themselves, like 'git add -p'.

    Args:
        args: List of arguments to pass to git.

    Raises:
        GitError: If the command exits with a non-zero code.
    """
    logger.debug("Running interactively: git %s", " ".join(args))
    try:
        result = subprocess.run(["git"] + args, check=False)
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
    if result.returncode != 0:
        raise GitError(f"Git command failed: git {' '.join(args)} (exit code {result.returncode})")


def get_repo_root() -> Path:
    """Get the root directory of the current git repository.

    Returns:
        Path to the repository root.

    Raises:
        GitError: If not in a git repository.
    """
    try:
        root = run_git_command(["rev-parse", "--show-toplevel"])
        return Path(root)
    except GitError:
        raise GitError("Not in a git repository. Please run this command from within a git repo.")
