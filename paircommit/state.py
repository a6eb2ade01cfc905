"""Pair state persistence.

Remembers the last pair and scope between runs in ~/.paircommit/state.yaml:

    current_pair:
      - jd
      - ab
    current_scope: PROJ-42
"""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from paircommit.exceptions import StateError
from paircommit.roster import TeamMember
from paircommit.utils import write_yaml_atomically

logger = logging.getLogger(__name__)


class PairState(BaseModel):
    """Defaults carried over from the previous run.

    Attributes:
        current_pair: Abbreviations of the last pair (empty before the first run).
        current_scope: Last scope or story tag.
    """

    current_pair: list[str] = []
    current_scope: str = ""

    @field_validator("current_pair", mode="before")
    @classmethod
    def pair_at_most_two(cls, v):
        """Accept a missing pair and reject more than two entries."""
        if v is None:
            return []
        if isinstance(v, list) and len(v) > 2:
            raise ValueError("current_pair holds at most two abbreviations")
        return v

    @field_validator("current_scope", mode="before")
    @classmethod
    def scope_defaults_to_empty(cls, v):
        """Treat a missing scope as empty."""
        if v is None:
            return ""
        return v


def read_state(path: Path) -> PairState:
    """Read the pair state.

    Args:
        path: Location of the state file.

    Returns:
        The stored state, or an empty state if the file does not exist.

    Raises:
        StateError: If the file is unreadable or malformed.
    """
    if not path.exists():
        logger.debug("No state at %s, using empty defaults", path)
        return PairState()

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise StateError(f"Failed to read state from {path}: {e}")

    if not isinstance(data, dict):
        raise StateError(f"Malformed state file {path}: expected a mapping")

    try:
        state = PairState(**data)
    except ValidationError as e:
        raise StateError(f"Malformed state file {path}: {e}")

    logger.debug("Read state from %s: %s", path, state)
    return state


def write_state(path: Path, pair: list[TeamMember], scope: str) -> None:
    """Overwrite the state file with the confirmed pair and scope.

    Args:
        path: Location of the state file.
        pair: The resolved pair, in order.
        scope: The confirmed scope.

    Raises:
        StateError: If the pair is invalid or the file cannot be written.
    """
    try:
        state = PairState(current_pair=[member.abbreviation for member in pair], current_scope=scope)
    except ValidationError as e:
        raise StateError(f"Refusing to store invalid state: {e}")

    try:
        write_yaml_atomically(path, state.model_dump())
    except OSError as e:
        raise StateError(f"Failed to write state to {path}: {e}")

    logger.debug("Wrote state to %s: %s", path, state)
