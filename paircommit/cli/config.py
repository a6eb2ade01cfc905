"""CLI commands for configuration management."""

import typer

from paircommit.config import get_config_file_path, get_state_file_path, load_config
from paircommit.exceptions import PairCommitError
from paircommit.state import read_state

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Inspect paircommit configuration in ~/.paircommit/",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show the current configuration and remembered pair."""
    try:
        config_path = get_config_file_path()
        if not config_path.exists():
            typer.echo("No configuration found. Run 'paircommit' once to set up.")
            return

        config = load_config(config_path)
        state = read_state(get_state_file_path())

        typer.echo(f"Current paircommit configuration ({config_path}):")
        typer.echo()
        typer.echo(f"  Abbreviation: {config.abbreviation}")
        typer.echo(f"  Team members file: {config.team_members_path}")
        typer.echo()
        typer.echo(f"  Last pair: {', '.join(state.current_pair) or 'not set'}")
        typer.echo(f"  Last scope: {state.current_scope or 'not set'}")

    except PairCommitError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)
