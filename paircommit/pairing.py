"""Pair selection.

Works out who gets credited on a commit: the current user ("self") and the
person they are pairing with. Only the current user is registered in the
roster automatically; an unknown partner is an error.
"""

import logging

import typer

from paircommit.config import CommitConfig
from paircommit.exceptions import PairingError, TeamMemberNotFoundError
from paircommit.prompts import prompt_text_non_empty, prompt_text_with_default
from paircommit.roster import TeamMember, append_member, find_by_abbreviation

logger = logging.getLogger(__name__)


def register_self(config: CommitConfig, roster: list[TeamMember]) -> tuple[TeamMember, list[TeamMember]]:
    """Ask the current user for their details and add them to the roster.

    Args:
        config: The user configuration (provides abbreviation and roster path).
        roster: The current roster.

    Returns:
        The new member and the updated roster.
    """
    typer.echo(f"'{config.abbreviation}' is not in the team members file yet, let's add you.")
    name = prompt_text_non_empty("Your name")
    email = prompt_text_non_empty("Your email")

    member = TeamMember(abbreviation=config.abbreviation, name=name, email=email)
    roster = append_member(config.team_members_path, roster, member)
    return member, roster


def resolve_self(config: CommitConfig, roster: list[TeamMember]) -> tuple[TeamMember, list[TeamMember]]:
    """Find the current user in the roster, registering them if needed.

    Args:
        config: The user configuration.
        roster: The current roster.

    Returns:
        The current user's record and the (possibly extended) roster.
    """
    try:
        me = find_by_abbreviation(roster, config.abbreviation)
    except TeamMemberNotFoundError:
        logger.debug("%s not in roster, registering", config.abbreviation)
        return register_self(config, roster)
    return me, roster


def default_partner(me: TeamMember, previous_pair: list[str], roster: list[TeamMember]) -> str:
    """Pick the partner abbreviation to offer as default.

    The previous pair is only reused when it had two members, one of them
    was the current user, and the other one is still in the roster.

    Returns:
        The partner's abbreviation, or an empty string if there is none.
    """
    if len(previous_pair) != 2 or me.abbreviation not in previous_pair:
        return ""

    others = [abbr for abbr in previous_pair if abbr != me.abbreviation]
    if len(others) != 1:
        return ""

    try:
        return find_by_abbreviation(roster, others[0]).abbreviation
    except TeamMemberNotFoundError:
        logger.debug("Previous partner %s is no longer in the roster", others[0])
        return ""


def get_pair(config: CommitConfig, previous_pair: list[str], roster: list[TeamMember]) -> list[TeamMember]:
    """Resolve the pair credited on this commit.

    Args:
        config: The user configuration.
        previous_pair: Abbreviations stored by the previous run.
        roster: The current roster (must already contain the current user).

    Returns:
        [self, partner], always with the current user first.

    Raises:
        PairingError: If the current user or the chosen partner is not in the roster.
    """
    try:
        me = find_by_abbreviation(roster, config.abbreviation)
    except TeamMemberNotFoundError as e:
        raise PairingError(str(e))

    partners = [m for m in roster if m.abbreviation != me.abbreviation]
    if partners:
        typer.echo("Known team members: " + ", ".join(f"{m.abbreviation} ({m.name})" for m in partners))

    default = default_partner(me, previous_pair, roster)
    if default:
        answer = prompt_text_with_default("Who are you pairing with?", default)
    else:
        answer = prompt_text_non_empty("Who are you pairing with?")

    if not answer:
        raise PairingError("No pairing partner given")
    if answer == me.abbreviation:
        raise PairingError("You cannot pair with yourself")

    try:
        partner = find_by_abbreviation(roster, answer)
    except TeamMemberNotFoundError:
        raise PairingError(
            f"Unknown team member '{answer}'. Add them first with: paircommit team add {answer}"
        )

    return [me, partner]
