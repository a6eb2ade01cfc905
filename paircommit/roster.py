"""Team roster storage.

The roster is a YAML file listing every known team member:

    team_members:
      - abbreviation: jd
        name: John Doe
        email: john.doe@example.com

Abbreviations are unique. New members are appended at the end and the file is
rewritten through a temporary file and an atomic rename.
"""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from paircommit.exceptions import (
    DuplicateTeamMemberError,
    RosterError,
    TeamMemberNotFoundError,
)
from paircommit.utils import write_yaml_atomically

logger = logging.getLogger(__name__)


class TeamMember(BaseModel):
    """A known team member.

    Attributes:
        abbreviation: Unique short identifier (e.g., "jd").
        name: Display name used in commit trailers.
        email: Email address used in commit trailers.
    """

    abbreviation: str
    name: str
    email: str

    @field_validator("abbreviation", "name", "email")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        """Ensure fields are not empty."""
        if not v or not v.strip():
            raise ValueError("value cannot be empty")
        return v.strip()

    @property
    def identity(self) -> str:
        """Git-style identity, e.g. 'John Doe <john.doe@example.com>'."""
        return f"{self.name} <{self.email}>"


def load_roster(path: Path) -> list[TeamMember]:
    """Load the team roster.

    Args:
        path: Location of the roster file.

    Returns:
        The members in file order. Empty if the file does not exist yet.

    Raises:
        RosterError: If the file is unreadable, malformed or has duplicate abbreviations.
    """
    if not path.exists():
        logger.debug("No roster at %s, starting with an empty one", path)
        return []

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise RosterError(f"Failed to load team members from {path}: {e}")

    if not isinstance(data, dict) or not isinstance(data.get("team_members", []), list):
        raise RosterError(f"Malformed team members file {path}: expected a 'team_members' list")

    roster = []
    seen = set()
    for entry in data.get("team_members") or []:
        if not isinstance(entry, dict):
            raise RosterError(f"Malformed team member entry in {path}: {entry!r}")
        try:
            member = TeamMember(**entry)
        except ValidationError as e:
            raise RosterError(f"Malformed team member entry in {path}: {e}")
        if member.abbreviation in seen:
            raise RosterError(f"Duplicate abbreviation '{member.abbreviation}' in {path}")
        seen.add(member.abbreviation)
        roster.append(member)

    return roster


def save_roster(path: Path, roster: list[TeamMember]) -> None:
    """Rewrite the whole roster file.

    Args:
        path: Location of the roster file.
        roster: Members to write, in order.

    Raises:
        RosterError: If the file cannot be written.
    """
    data = {"team_members": [member.model_dump() for member in roster]}
    try:
        write_yaml_atomically(path, data)
    except OSError as e:
        raise RosterError(f"Failed to save team members to {path}: {e}")


def find_by_abbreviation(roster: list[TeamMember], abbreviation: str) -> TeamMember:
    """Look up a member by abbreviation.

    Raises:
        TeamMemberNotFoundError: If no member has this abbreviation.
    """
    for member in roster:
        if member.abbreviation == abbreviation:
            return member
    raise TeamMemberNotFoundError(abbreviation)


def append_member(path: Path, roster: list[TeamMember], member: TeamMember) -> list[TeamMember]:
    """Add a member to the roster and persist it.

    Args:
        path: Location of the roster file.
        roster: Current roster. Not modified.
        member: Member to add.

    Returns:
        A new roster with member appended.

    Raises:
        DuplicateTeamMemberError: If the abbreviation is already taken.
        RosterError: If the file cannot be written.
    """
    if any(m.abbreviation == member.abbreviation for m in roster):
        raise DuplicateTeamMemberError(member.abbreviation)

    updated = list(roster) + [member]
    save_roster(path, updated)
    logger.debug("Added team member %s to %s", member.abbreviation, path)
    return updated
