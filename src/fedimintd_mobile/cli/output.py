"""Output routing for CLI commands.

Human-readable messages go to stderr, machine-readable data to stdout, so
`--json` output can be piped without filtering.
"""

import click


def user_output(message: str = "") -> None:
    """Print a message for humans (stderr)."""
    click.echo(message, err=True)


def machine_output(message: str) -> None:
    """Print data for programs (stdout)."""
    click.echo(message)
