"""Launch lifecycle states."""

from enum import Enum


class LaunchState(str, Enum):
    """Progress of a single launch call.

    Transitions only move forward. A failure before RUNNING ends the call
    without attempting any later state.
    """

    NOT_STARTED = "not_started"
    DIRECTORY_READY = "directory_ready"
    LOGGING_READY = "logging_ready"
    RUNNING = "running"
    TERMINATED = "terminated"
