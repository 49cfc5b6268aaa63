"""In-memory fake implementation of NodeRuntime for testing."""

from fedimintd_mobile.integrations.node_runtime.abc import NodeRuntime, NodeRuntimeConfig


class FakeNodeRuntime(NodeRuntime):
    """Fake that records start calls and returns immediately.

    All state is provided via constructor using keyword arguments.
    This class has NO public setup methods.
    """

    def __init__(self, *, error: Exception | None = None) -> None:
        """Create FakeNodeRuntime.

        Args:
            error: If set, raised from run() to simulate a startup or
                runtime failure
        """
        self._error = error
        self._started_configs: list[NodeRuntimeConfig] = []

    @property
    def started_configs(self) -> list[NodeRuntimeConfig]:
        """Configurations passed to run(), for test assertions."""
        return self._started_configs.copy()

    async def run(self, config: NodeRuntimeConfig) -> None:
        """Record the configuration, then fail or terminate normally."""
        self._started_configs.append(config)
        if self._error is not None:
            raise self._error
