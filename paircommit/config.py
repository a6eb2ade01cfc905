"""User configuration management for paircommit.

Handles the user-level files stored in ~/.paircommit/:
- config.yaml: location of the team roster and the user's own abbreviation
- state.yaml: the last pair and scope (see paircommit.state)
- team-members.yaml: default roster location offered on first run
"""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from paircommit.exceptions import ConfigError
from paircommit.prompts import prompt_text_non_empty, prompt_text_with_default

logger = logging.getLogger(__name__)

_CONFIG_DIR = Path.home() / ".paircommit"


class CommitConfig(BaseModel):
    """Contents of ~/.paircommit/config.yaml.

    Attributes:
        team_members_path: File holding the team roster.
        abbreviation: Short identifier of the current user in the roster.
    """

    team_members_path: Path
    abbreviation: str

    @field_validator("team_members_path", mode="before")
    @classmethod
    def path_must_not_be_empty(cls, v):
        """Reject empty paths and expand '~'."""
        if v is None or not str(v).strip():
            raise ValueError("team_members_path cannot be empty")
        return Path(str(v).strip()).expanduser()

    @field_validator("abbreviation")
    @classmethod
    def abbreviation_must_not_be_empty(cls, v: str) -> str:
        """Ensure abbreviation is not empty."""
        if not v or not v.strip():
            raise ValueError("abbreviation cannot be empty")
        return v.strip()


def get_config_dir() -> Path:
    """Get the user-level paircommit directory.

    Returns:
        Path to ~/.paircommit/
    """
    return _CONFIG_DIR


def ensure_config_dir() -> Path:
    """Ensure the user-level paircommit directory exists.

    Returns:
        Path to ~/.paircommit/
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.paircommit/config.yaml
    """
    return get_config_dir() / "config.yaml"


def get_state_file_path() -> Path:
    """Get path to the pair state file.

    Returns:
        Path to ~/.paircommit/state.yaml
    """
    return get_config_dir() / "state.yaml"


def get_default_team_members_path() -> Path:
    """Get the roster location suggested on first run.

    Returns:
        Path to ~/.paircommit/team-members.yaml
    """
    return get_config_dir() / "team-members.yaml"


def load_config(path: Path) -> CommitConfig:
    """Parse an existing config file.

    Args:
        path: Location of the config file.

    Returns:
        The parsed configuration.

    Raises:
        ConfigError: If the file cannot be read or is malformed.
    """
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Malformed config in {path}: expected a mapping, fix the file by hand")

    try:
        return CommitConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Malformed config in {path}: {e}")


def save_config(path: Path, config: CommitConfig) -> None:
    """Write the configuration to path.

    Args:
        path: Location of the config file.
        config: Configuration to save.

    Raises:
        ConfigError: If the file cannot be written.
    """
    data = {
        "team_members_path": str(config.team_members_path),
        "abbreviation": config.abbreviation,
    }
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise ConfigError(f"Failed to save config to {path}: {e}")


def load_or_init_config(path: Path) -> CommitConfig:
    """Load the config, asking for its values on first run.

    If the file is missing, the user is asked for the roster location and
    their abbreviation, and the answers are written to path.

    Args:
        path: Location of the config file.

    Returns:
        The loaded or newly created configuration.

    Raises:
        ConfigError: If an existing file is malformed or the new one cannot be written.
    """
    if path.exists():
        config = load_config(path)
        logger.debug("Loaded config from %s: %s", path, config)
        return config

    logger.debug("No config at %s, asking for values", path)
    team_members_path = prompt_text_with_default(
        "Where should the team members be stored?",
        str(get_default_team_members_path()),
    )
    abbreviation = prompt_text_non_empty("What is your abbreviation?")

    try:
        config = CommitConfig(team_members_path=team_members_path, abbreviation=abbreviation)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration values: {e}")

    save_config(path, config)
    logger.debug("Created config at %s: %s", path, config)
    return config
