"""Commit message formatting.

Format:
    [<abbr>|<abbr>] <type>(<scope>): <summary>

    <explanation>

    Co-authored-by: <Name> <email>
"""

import re
from enum import Enum

from paircommit.roster import TeamMember


class CommitType(str, Enum):
    """Commit type tags offered when building a message."""

    FEAT = "feat"
    FIX = "fix"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    PERF = "perf"
    TEST = "test"
    BUILD = "build"
    CI = "ci"
    CHORE = "chore"
    REVERT = "revert"


COMMIT_TYPE_DESCRIPTIONS = {
    CommitType.FEAT.value: "A new feature",
    CommitType.FIX.value: "A bug fix",
    CommitType.DOCS.value: "Documentation only changes",
    CommitType.STYLE.value: "Formatting, no code change",
    CommitType.REFACTOR.value: "Code change that neither fixes a bug nor adds a feature",
    CommitType.PERF.value: "A performance improvement",
    CommitType.TEST.value: "Adding or correcting tests",
    CommitType.BUILD.value: "Build system or dependency changes",
    CommitType.CI.value: "CI configuration changes",
    CommitType.CHORE.value: "Other changes that don't touch src or tests",
    CommitType.REVERT.value: "Reverts a previous commit",
}

MAX_HEADER_LENGTH = 72

_TYPE_PREFIX_RE = re.compile(
    r"^(?:" + "|".join(t.value for t in CommitType) + r")(?:\([^)]*\))?!?:\s*",
    re.IGNORECASE,
)


def review_summary(summary: str) -> str:
    """Normalize the one-line summary.

    Keeps the wording and case, but:
    - only the first line is kept
    - surrounding whitespace is stripped and inner runs collapsed
    - a leading "type:" or "type(scope):" prefix is removed
    - trailing periods are removed

    Examples:
        "  fix login bug.  " -> "fix login bug"
        "fix: fix login bug" -> "fix login bug"
    """
    lines = summary.strip().splitlines()
    first_line = lines[0] if lines else ""
    first_line = " ".join(first_line.split())
    first_line = _TYPE_PREFIX_RE.sub("", first_line)
    return first_line.rstrip(".").rstrip()


def format_header(commit_type: str, scope: str, pair: list[TeamMember], summary: str) -> str:
    """Build the first line of the message."""
    tag = "|".join(member.abbreviation for member in pair)
    type_part = f"{commit_type}({scope})" if scope else commit_type
    return f"[{tag}] {type_part}: {summary}"


def summary_too_long(commit_type: str, scope: str, pair: list[TeamMember], summary: str,
                     limit: int = MAX_HEADER_LENGTH) -> bool:
    """Check whether the header line would exceed limit characters."""
    return len(format_header(commit_type, scope, pair, summary)) > limit


def build_commit_message(
    commit_type: str,
    scope: str,
    pair: list[TeamMember],
    summary: str,
    explanation: str,
    me: TeamMember,
) -> str:
    """Assemble the full commit message.

    Pure function: the same inputs always give the same output.

    Args:
        commit_type: Commit type tag (e.g., "fix").
        scope: Scope or story tag, may be empty.
        pair: The pair, in order.
        summary: One-line summary.
        explanation: Free-form rationale, may be empty or multi-line.
        me: The commit author. Not repeated as a co-author.

    Returns:
        The commit message, without a trailing newline.
    """
    commit_type = commit_type.value if isinstance(commit_type, CommitType) else commit_type

    parts = [format_header(commit_type, scope.strip(), pair, summary.strip())]

    explanation = "\n".join(line.rstrip() for line in explanation.strip("\n").splitlines()).strip()
    if explanation:
        parts.append(explanation)

    trailers = [
        f"Co-authored-by: {member.identity}"
        for member in pair
        if member.abbreviation != me.abbreviation
    ]
    if trailers:
        parts.append("\n".join(trailers))

    return "\n\n".join(parts)
