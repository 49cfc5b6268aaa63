"""CLI error handling utilities with styled output.

All errors use a red "Error:" prefix for visual consistency and exit with
status 1.
"""

import click

from fedimintd_mobile.cli.output import user_output


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def not_empty(value: str | None, error_message: str) -> None:
        """Ensure value is a non-blank string, otherwise exit.

        Example:
            >>> Ensure.not_empty(data_dir, "DATA_DIR must not be empty")
        """
        if value is None or not value.strip():
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)
