"""Application context with dependency injection."""

from dataclasses import dataclass

from fedimintd_mobile.core.config import (
    DEFAULT_BIND_P2P,
    DEFAULT_BIND_UI,
    DEFAULT_VERIFY_TIMEOUT_SECONDS,
    LauncherConfig,
)
from fedimintd_mobile.integrations.chain_source.abc import ChainSource
from fedimintd_mobile.integrations.chain_source.real import RealChainSource
from fedimintd_mobile.integrations.node_runtime.abc import NodeRuntime
from fedimintd_mobile.integrations.node_runtime.real import RealNodeRuntime
from fedimintd_mobile.integrations.output_redirect.abc import OutputRedirect
from fedimintd_mobile.integrations.output_redirect.real import RealOutputRedirect


@dataclass(frozen=True)
class MintContext:
    """Immutable context holding all dependencies for launch and verify.

    Created at the host or CLI entry point and passed to every operation.
    Holds no per-call state, so one context can serve concurrent calls.
    """

    chain_source: ChainSource
    output_redirect: OutputRedirect
    node_runtime: NodeRuntime
    config: LauncherConfig

    @staticmethod
    def for_test(
        chain_source: ChainSource | None = None,
        output_redirect: OutputRedirect | None = None,
        node_runtime: NodeRuntime | None = None,
        config: LauncherConfig | None = None,
    ) -> "MintContext":
        """Create test context with fake implementations for anything omitted.

        Args:
            chain_source: Optional ChainSource. If None, creates a
                FakeChainSource where every backend is unreachable.
            output_redirect: Optional OutputRedirect. If None, creates
                FakeOutputRedirect.
            node_runtime: Optional NodeRuntime. If None, creates FakeNodeRuntime.
            config: Optional LauncherConfig. If None, uses the built-in defaults.

        Returns:
            MintContext for use in tests
        """
        from fedimintd_mobile.integrations.chain_source.fake import FakeChainSource
        from fedimintd_mobile.integrations.node_runtime.fake import FakeNodeRuntime
        from fedimintd_mobile.integrations.output_redirect.fake import FakeOutputRedirect

        return MintContext(
            chain_source=chain_source or FakeChainSource(),
            output_redirect=output_redirect or FakeOutputRedirect(),
            node_runtime=node_runtime or FakeNodeRuntime(),
            config=config
            or LauncherConfig(
                fedimintd_binary="fedimintd",
                verify_timeout_seconds=DEFAULT_VERIFY_TIMEOUT_SECONDS,
                bind_p2p=DEFAULT_BIND_P2P,
                bind_ui=DEFAULT_BIND_UI,
            ),
        )


def create_context(config: LauncherConfig | None = None) -> MintContext:
    """Create production context with real implementations.

    Args:
        config: Optional LauncherConfig. If None, loads it from the environment.
    """
    if config is None:
        config = LauncherConfig.from_env()
    return MintContext(
        chain_source=RealChainSource(timeout_seconds=config.verify_timeout_seconds),
        output_redirect=RealOutputRedirect(),
        node_runtime=RealNodeRuntime(binary=config.fedimintd_binary),
        config=config,
    )
