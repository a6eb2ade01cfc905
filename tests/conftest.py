"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest
import yaml

from paircommit.config import CommitConfig
from paircommit.roster import TeamMember


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_home(temp_dir, mocker):
    """Point ~/.paircommit at a temporary directory."""
    config_dir = temp_dir / ".paircommit"
    mocker.patch("paircommit.config._CONFIG_DIR", config_dir)
    return config_dir


@pytest.fixture
def john():
    """The current user in most tests."""
    return TeamMember(abbreviation="jd", name="John Doe", email="john.doe@example.com")


@pytest.fixture
def alice():
    """A pairing partner."""
    return TeamMember(abbreviation="ab", name="Alice Brown", email="alice.brown@example.com")


@pytest.fixture
def sample_roster(john, alice):
    """Roster with two members."""
    return [john, alice]


@pytest.fixture
def roster_file(temp_dir, sample_roster):
    """Roster file containing sample_roster."""
    path = temp_dir / "team-members.yaml"
    data = {"team_members": [member.model_dump() for member in sample_roster]}
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def commit_config(roster_file):
    """Config for 'jd' pointing at roster_file."""
    return CommitConfig(team_members_path=roster_file, abbreviation="jd")


@pytest.fixture
def written_config(config_home, commit_config):
    """config.yaml on disk for commit_config."""
    config_home.mkdir(parents=True, exist_ok=True)
    path = config_home / "config.yaml"
    with open(path, "w") as f:
        yaml.dump(
            {
                "team_members_path": str(commit_config.team_members_path),
                "abbreviation": commit_config.abbreviation,
            },
            f,
        )
    return path
