"""Git operations used by paircommit.

This package wraps the git executable:
- runner: run_git_command, run_interactive_git_command, get_repo_root
- status: has_uncommitted_changes, get_staged_files, has_staged_changes
- operations: stage_interactively, commit, commit_empty
"""

from paircommit.exceptions import (
    GitError,
    NoChangesError,
    NoStagedChangesError,
)

from paircommit.git.runner import (
    get_repo_root,
    run_git_command,
    run_interactive_git_command,
)

from paircommit.git.status import (
    get_staged_files,
    has_staged_changes,
    has_uncommitted_changes,
)

from paircommit.git.operations import (
    commit,
    commit_empty,
    stage_interactively,
)


__all__ = [
    # Exceptions
    "GitError",
    "NoChangesError",
    "NoStagedChangesError",
    # Runner
    "get_repo_root",
    "run_git_command",
    "run_interactive_git_command",
    # Status
    "get_staged_files",
    "has_staged_changes",
    "has_uncommitted_changes",
    # Commit
    "commit",
    "commit_empty",
    "stage_interactively",
]
