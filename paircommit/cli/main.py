"""Main CLI command: build a pair commit interactively."""

from typing import Optional

import typer

from paircommit import __version__
from paircommit.exceptions import NoChangesError, NoStagedChangesError, PairCommitError
from paircommit.logging import configure_logging
from paircommit.orchestrator import RunOptions, run


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"paircommit {__version__}")
        raise typer.Exit(0)


def main_command(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
    skip_git_add: bool = typer.Option(
        False,
        "--skip-git-add",
        "-s",
        help="Do not run 'git add -p' beforehand",
    ),
    empty_commit: bool = typer.Option(
        False,
        "--empty-commit",
        "-e",
        help="Make an empty commit",
    ),
    message: Optional[str] = typer.Option(
        None,
        "--message",
        "-m",
        help="Provide the commit summary instead of being asked for it",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Build a commit message that follows your team conventions and commit."""
    configure_logging(verbose)

    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    options = RunOptions(
        verbose=verbose,
        skip_git_add=skip_git_add,
        empty_commit=empty_commit,
        message=message,
    )

    try:
        run(options)
    except (NoChangesError, NoStagedChangesError) as e:
        typer.echo(str(e))
        raise typer.Exit(0)
    except PairCommitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("Commit successful!", err=True)
