"""Launcher configuration from environment variables."""

import os
from dataclasses import dataclass

DEFAULT_BIND_P2P = "0.0.0.0:8174"
DEFAULT_BIND_UI = "0.0.0.0:8175"
DEFAULT_VERIFY_TIMEOUT_SECONDS = 20.0


@dataclass(frozen=True)
class LauncherConfig:
    """Launcher configuration loaded from environment variables.

    These are host-level defaults. Per-launch choices such as the network
    and backend are always passed explicitly.
    """

    fedimintd_binary: str
    verify_timeout_seconds: float
    bind_p2p: str
    bind_ui: str

    @staticmethod
    def from_env() -> "LauncherConfig":
        """Load configuration from environment variables."""
        return LauncherConfig(
            fedimintd_binary=os.environ.get("FEDIMINTD_MOBILE_BINARY", "fedimintd"),
            verify_timeout_seconds=float(
                os.environ.get(
                    "FEDIMINTD_MOBILE_VERIFY_TIMEOUT", str(DEFAULT_VERIFY_TIMEOUT_SECONDS)
                )
            ),
            bind_p2p=os.environ.get("FEDIMINTD_MOBILE_BIND_P2P", DEFAULT_BIND_P2P),
            bind_ui=os.environ.get("FEDIMINTD_MOBILE_BIND_UI", DEFAULT_BIND_UI),
        )
