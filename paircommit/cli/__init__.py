"""CLI entry point for paircommit.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from paircommit.cli.config import config_app
from paircommit.cli.main import main_command
from paircommit.cli.team import team_app

# Main application
app = typer.Typer(
    name="paircommit",
    help="paircommit: build commit messages that follow your team conventions",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(team_app, name="team")
app.add_typer(config_app, name="config")

# Set the main callback for default behavior
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "team_app",
    "config_app",
    "main_command",
]
