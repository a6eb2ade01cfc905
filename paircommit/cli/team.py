"""CLI commands for team roster management."""

import typer

from paircommit.config import get_config_file_path, load_config
from paircommit.exceptions import PairCommitError
from paircommit.roster import TeamMember, append_member, load_roster

# Subcommand group for team roster management
team_app = typer.Typer(
    name="team",
    help="Manage the team members file",
    add_completion=False,
)


def _load_configured_roster():
    config_path = get_config_file_path()
    if not config_path.exists():
        typer.echo("No configuration found. Run 'paircommit' once to set up.", err=True)
        raise typer.Exit(1)
    config = load_config(config_path)
    return config, load_roster(config.team_members_path)


@team_app.command("list")
def team_list() -> None:
    """Show all known team members."""
    try:
        config, roster = _load_configured_roster()

        typer.echo(f"Team members in {config.team_members_path}:")
        typer.echo()
        if roster:
            for member in roster:
                marker = " (you)" if member.abbreviation == config.abbreviation else ""
                typer.echo(f"  {member.abbreviation:<6} {member.identity}{marker}")
            typer.echo()
            typer.echo(f"Total: {len(roster)} member(s)")
        else:
            typer.echo("  (no team members yet)")

    except PairCommitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@team_app.command("add")
def team_add(
    abbreviation: str = typer.Argument(
        ...,
        help="Short unique identifier (e.g., jd)",
    ),
    name: str = typer.Option(
        ...,
        "--name",
        "-n",
        prompt="Name",
        help="Display name",
    ),
    email: str = typer.Option(
        ...,
        "--email",
        prompt="Email",
        help="Email address",
    ),
) -> None:
    """Add a team member to the team members file."""
    try:
        config, roster = _load_configured_roster()
        try:
            member = TeamMember(abbreviation=abbreviation, name=name, email=email)
        except ValueError as e:
            typer.echo(f"Invalid team member: {e}", err=True)
            raise typer.Exit(1)

        append_member(config.team_members_path, roster, member)
        typer.echo(f"Added team member: {member.abbreviation} {member.identity}")

    except PairCommitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
