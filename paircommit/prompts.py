"""Interactive prompts used while building a commit.

All prompts go through typer so they can be driven by CliRunner input in
tests. Ctrl-C and EOF raise click's Abort, which typer turns into exit code 1.
"""

from typing import Sequence

import typer


def prompt_choice(label: str, choices: Sequence[str], descriptions: dict[str, str] | None = None) -> str:
    """Ask the user to pick one value from a numbered list.

    Accepts either the number shown next to an entry or the value itself.
    Invalid answers are reported and the question is asked again.

    Args:
        label: Question shown above the list.
        choices: Values to choose from, in display order.
        descriptions: Optional description per value, shown next to it.

    Returns:
        The chosen value.
    """
    if not choices:
        raise ValueError("prompt_choice needs at least one choice")

    descriptions = descriptions or {}
    typer.echo(f"{label}:")
    for i, choice in enumerate(choices, 1):
        description = descriptions.get(choice)
        if description:
            typer.echo(f"  {i}. {choice:<10} {description}")
        else:
            typer.echo(f"  {i}. {choice}")

    while True:
        answer = typer.prompt(f"Select (1-{len(choices)})").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(choices):
            return choices[int(answer) - 1]
        if answer in choices:
            return answer
        typer.echo(f"Invalid choice: {answer}", err=True)


def prompt_text_non_empty(label: str) -> str:
    """Ask for a line of text, repeating the question until it is non-empty."""
    while True:
        answer = typer.prompt(label, default="", show_default=False).strip()
        if answer:
            return answer
        typer.echo("A value is required.", err=True)


def prompt_text_with_default(label: str, default: str) -> str:
    """Ask for a line of text, falling back to default on an empty answer.

    The default may itself be empty, in which case an empty answer is returned.
    """
    answer = typer.prompt(label, default=default, show_default=bool(default))
    return answer.strip()


def prompt_multi_line(label: str) -> str:
    """Read lines until the user enters an empty line.

    Args:
        label: Question shown before reading.

    Returns:
        The entered lines joined by newlines (empty string if none).
    """
    typer.echo(f"{label} (finish with an empty line)")
    lines = []
    while True:
        line = typer.prompt("", default="", show_default=False, prompt_suffix="> ")
        if not line.strip():
            break
        lines.append(line.rstrip())
    return "\n".join(lines)
