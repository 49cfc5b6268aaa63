"""Exception hierarchy for backend verification and node bootstrap.

Every step is fail-fast: the first failure is raised to the caller unchanged,
with the underlying cause chained via ``raise ... from``.
"""

from fedimintd_mobile.core.network import NetworkKind
from fedimintd_mobile.core.state import LaunchState


class FedimintdMobileError(Exception):
    """Base class for all errors raised by this package."""


class BackendSelectionError(FedimintdMobileError):
    """Raised when backend fields do not describe exactly one backend."""


class VerificationError(FedimintdMobileError):
    """Base class for backend identity verification failures."""


class BackendConnectionError(VerificationError):
    """Raised when the backend is unreachable, times out, or answers garbage."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Could not fetch genesis block from {url}: {reason}")


class UnrecognizedGenesisError(VerificationError):
    """Raised when the backend's genesis hash matches no known network."""

    def __init__(self, genesis_hash: str) -> None:
        self.genesis_hash = genesis_hash
        super().__init__(f"Backend serves an unknown chain (genesis block {genesis_hash})")


class NetworkMismatchError(VerificationError):
    """Raised when the backend serves a different network than claimed."""

    def __init__(self, expected: NetworkKind, actual: NetworkKind) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Backend serves {actual.display_name}, but {expected.display_name} was selected"
        )


class LaunchError(FedimintdMobileError):
    """Base class for failures of a launch call.

    Attributes:
        state: Last state the launch reached before failing
    """

    def __init__(self, message: str, state: LaunchState) -> None:
        self.state = state
        super().__init__(message)


class LaunchIOError(LaunchError):
    """Directory or log file setup failed before the node runtime started."""


class DirectoryError(LaunchIOError):
    """The working directory could not be created."""


class LogSetupError(LaunchIOError):
    """The log file could not be opened for output redirection."""


class NodeRuntimeError(LaunchError):
    """The node runtime failed to start or terminated with an error."""

    def __init__(self, cause: BaseException, state: LaunchState) -> None:
        self.cause = cause
        super().__init__(f"fedimintd failed: {cause}", state)
