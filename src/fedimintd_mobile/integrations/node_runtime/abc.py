"""Abstract interface for the fedimintd node runtime."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

DEFAULT_MODULE_SET = "default"


@dataclass(frozen=True)
class NodeRuntimeConfig:
    """Fully assembled configuration handed to the node runtime.

    Attributes:
        settings: fedimintd settings keyed by their FM_* names
        version: Code version reported by the node
        module_set: Which server modules to enable
        version_vendor_suffix: Optional override appended to the version
    """

    settings: dict[str, str]
    version: str
    module_set: str = DEFAULT_MODULE_SET
    version_vendor_suffix: str | None = field(default=None)


class NodeStartError(Exception):
    """The node could not be started, so it never reached the running state."""


class NodeRuntime(ABC):
    """Abstract interface for starting the long-running mint node.

    All implementations must implement this interface for testability.
    """

    @abstractmethod
    async def run(self, config: NodeRuntimeConfig) -> None:
        """Start the node and wait until it stops.

        Does not return during normal operation. Returns only when the node
        terminates cleanly.

        Args:
            config: Assembled runtime configuration

        Raises:
            NodeStartError: If the node cannot be started
            Exception: Whatever the runtime reports when the running node
                terminates with an error
        """
        ...
