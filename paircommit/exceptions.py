"""Exception classes for paircommit.

Contains the exception hierarchy shared by all modules:
- PairCommitError: Base exception, reported by the CLI with exit code 1
- ConfigError: Unreadable or malformed user configuration
- RosterError: Unreadable or malformed team roster
- TeamMemberNotFoundError: Abbreviation missing from the roster
- DuplicateTeamMemberError: Abbreviation already present in the roster
- StateError: Unreadable or unwritable pair state
- PairingError: Commit pair could not be resolved
- GitError: Git command failed or not inside a repository
- NoChangesError: Nothing changed in the working tree
- NoStagedChangesError: Nothing staged after the add step
"""


class PairCommitError(Exception):
    """Base exception for paircommit errors."""

    pass


class ConfigError(PairCommitError):
    """Raised when the user configuration cannot be loaded or saved."""

    pass


class RosterError(PairCommitError):
    """Raised when the team roster cannot be loaded or saved."""

    pass


class TeamMemberNotFoundError(RosterError):
    """Raised when an abbreviation is not part of the roster."""

    def __init__(self, abbreviation: str):
        self.abbreviation = abbreviation
        super().__init__(f"No team member with abbreviation '{abbreviation}'")


class DuplicateTeamMemberError(RosterError):
    """Raised when adding an abbreviation that is already taken."""

    def __init__(self, abbreviation: str):
        self.abbreviation = abbreviation
        super().__init__(f"Team member '{abbreviation}' already exists")


class StateError(PairCommitError):
    """Raised when the pair state file cannot be read or written."""

    pass


class PairingError(PairCommitError):
    """Raised when the commit pair cannot be resolved."""

    pass


class GitError(PairCommitError):
    """Custom exception for git-related errors."""

    pass


class NoChangesError(GitError):
    """Raised when the working tree has no changes."""

    pass


class NoStagedChangesError(GitError):
    """Raised when there are no staged changes."""

    pass
