"""Runs one commit from start to finish.

The steps, in order: check the repository, load config and roster, make sure
the current user is registered, read the previous pair state, stage changes,
resolve the pair, ask for type and scope, persist the state, ask for summary
and explanation, build the message and commit.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import typer

from paircommit.config import get_config_file_path, get_state_file_path, load_or_init_config
from paircommit.exceptions import NoChangesError, NoStagedChangesError
from paircommit.git import (
    commit,
    commit_empty,
    get_repo_root,
    get_staged_files,
    has_staged_changes,
    has_uncommitted_changes,
    stage_interactively,
)
from paircommit.message import (
    COMMIT_TYPE_DESCRIPTIONS,
    MAX_HEADER_LENGTH,
    CommitType,
    build_commit_message,
    review_summary,
    summary_too_long,
)
from paircommit.pairing import get_pair, resolve_self
from paircommit.prompts import (
    prompt_choice,
    prompt_multi_line,
    prompt_text_non_empty,
    prompt_text_with_default,
)
from paircommit.roster import load_roster
from paircommit.state import read_state, write_state

logger = logging.getLogger(__name__)

CLEAR_SCOPE = "-"


@dataclass(frozen=True)
class RunOptions:
    """Options for a single run, built once from the command line.

    Attributes:
        verbose: Debug logging enabled.
        skip_git_add: Do not run 'git add -p' before committing.
        empty_commit: Record a commit without file changes.
        message: Summary given on the command line, skips the summary prompt.
    """

    verbose: bool = False
    skip_git_add: bool = False
    empty_commit: bool = False
    message: Optional[str] = None


def prompt_commit_type() -> str:
    """Ask for the commit type."""
    types = [t.value for t in CommitType]
    return prompt_choice("What kind of change is this?", types, COMMIT_TYPE_DESCRIPTIONS)


def prompt_scope(previous_scope: str) -> str:
    """Ask for the scope, offering the previous one as default.

    Answering CLEAR_SCOPE drops the scope for this and later commits.
    """
    label = "Current scope"
    if previous_scope:
        label += f" ('{CLEAR_SCOPE}' for none)"
    answer = prompt_text_with_default(label, previous_scope)
    if answer == CLEAR_SCOPE:
        return ""
    return answer


def run(options: RunOptions) -> str:
    """Build a commit message interactively and commit.

    Args:
        options: Options for this run.

    Returns:
        The message that was committed.

    Raises:
        NoChangesError: If there is nothing to commit (and no empty commit was requested).
        NoStagedChangesError: If nothing is staged after the add step.
        PairCommitError: For any other failure.
    """
    repo_root = get_repo_root()
    logger.debug("Repository: %s", repo_root)

    if not options.empty_commit and not has_uncommitted_changes():
        raise NoChangesError("There are no changes to add!")

    config = load_or_init_config(get_config_file_path())
    logger.debug("Config: %s", config)

    roster = load_roster(config.team_members_path)
    logger.debug("Team members: %s", roster)

    me, roster = resolve_self(config, roster)

    state_path = get_state_file_path()
    state = read_state(state_path)
    logger.debug("State: %s", state)

    if not options.empty_commit:
        if not options.skip_git_add:
            stage_interactively()
        if not has_staged_changes():
            raise NoStagedChangesError("There are no staged files.")
        typer.echo("Staged files:")
        for path in get_staged_files():
            typer.echo(f"  {path}")

    pair = get_pair(config, state.current_pair, roster)
    commit_type = prompt_commit_type()
    scope = prompt_scope(state.current_scope)

    write_state(state_path, pair, scope)
    logger.debug("Pair: %s", [member.abbreviation for member in pair])
    logger.debug("Scope: %s", scope)

    if options.message:
        summary = options.message
    else:
        summary = prompt_text_non_empty("Summary of your commit")
    logger.debug("Summary: %s", summary)

    reviewed_summary = review_summary(summary)
    logger.debug("Reviewed summary: %s", reviewed_summary)
    while not reviewed_summary:
        reviewed_summary = review_summary(
            prompt_text_non_empty("The summary is empty after cleanup, please enter one")
        )
        logger.debug("Reviewed summary: %s", reviewed_summary)
    if summary_too_long(commit_type, scope, pair, reviewed_summary):
        typer.echo(
            f"Warning: the first line is longer than {MAX_HEADER_LENGTH} characters.",
            err=True,
        )

    explanation = prompt_multi_line("Why did you choose to do that?")
    logger.debug("Explanation: %s", explanation)

    message = build_commit_message(commit_type, scope, pair, reviewed_summary, explanation, me)
    logger.debug("Commit message:\n%s", message)

    if options.empty_commit:
        output = commit_empty(message)
    else:
        output = commit(message)
    if output:
        typer.echo(output)

    return message
