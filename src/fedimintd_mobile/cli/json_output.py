"""JSON output utilities and the error boundary for CLI commands."""

import json
from collections.abc import Callable
from functools import wraps
from typing import Any

import click
from pydantic import BaseModel, ConfigDict, Field

from fedimintd_mobile.cli.output import machine_output, user_output
from fedimintd_mobile.core.errors import FedimintdMobileError


class ErrorResponse(BaseModel):
    """Pydantic model for error JSON responses.

    Attributes:
        error: Error message
        error_type: Error class name (e.g., "NetworkMismatchError")
        exit_code: Exit code for the process
    """

    model_config = ConfigDict(strict=True)

    error: str
    error_type: str
    exit_code: int = Field(default=1, ge=0, le=255)


def emit_json(data: dict[str, Any]) -> None:
    """Output JSON data to stdout for machine consumption.

    For Pydantic models, call model.model_dump(mode='json') before
    passing to this function.
    """
    machine_output(json.dumps(data, indent=2))


def emit_json_error(error: str, error_type: str, exit_code: int = 1) -> None:
    """Output error as JSON and exit.

    Raises:
        SystemExit: Always raises to terminate with specified exit code
    """
    error_response = ErrorResponse(
        error=error,
        error_type=error_type,
        exit_code=exit_code,
    )
    emit_json(error_response.model_dump(mode="json"))
    raise SystemExit(exit_code)


def error_boundary(func: Callable) -> Callable:
    """Decorator that turns package errors into CLI errors.

    Catches FedimintdMobileError. When the command was called with
    output_json=True the error is emitted as a JSON ErrorResponse; otherwise
    a styled "Error:" line is printed. Both exit with status 1. Other
    exceptions bubble up unchanged.

    Example:
        @click.command()
        @click.option("--json", "output_json", is_flag=True)
        @error_boundary
        def my_command(output_json: bool) -> None:
            ...
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except FedimintdMobileError as e:
            if kwargs.get("output_json", False):
                emit_json_error(str(e), type(e).__name__, exit_code=1)
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from e

    return wrapper
