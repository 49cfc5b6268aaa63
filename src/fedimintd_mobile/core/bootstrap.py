"""Bootstrap orchestration: prepare the working directory, then start fedimintd.

A launch moves through LaunchState in order. Directory creation strictly
precedes log redirection, which strictly precedes starting the node runtime.
A failure at any step before RUNNING ends the call; the node runtime is never
started without a working directory and a captured log.
"""

import logging
import os
from contextlib import ExitStack
from dataclasses import dataclass
from pathlib import Path

from fedimintd_mobile import __version__
from fedimintd_mobile.core.backend import BackendDescriptor
from fedimintd_mobile.core.context import MintContext
from fedimintd_mobile.core.errors import DirectoryError, LogSetupError, NodeRuntimeError
from fedimintd_mobile.core.network import NetworkKind
from fedimintd_mobile.core.state import LaunchState
from fedimintd_mobile.core.verifier import verify_backend_network
from fedimintd_mobile.integrations.node_runtime.abc import NodeRuntimeConfig, NodeStartError

logger = logging.getLogger(__name__)

WORKDIR_NAME = "fedimintd"
LOG_FILENAME = "fedimintd.log"


@dataclass(frozen=True)
class LaunchParams:
    """Caller-supplied inputs for one launch.

    The network is always an explicit choice. Bind addresses left as None
    fall back to the launcher configuration.
    """

    data_dir: Path
    network: NetworkKind
    backend: BackendDescriptor
    bind_p2p: str | None = None
    bind_ui: str | None = None
    enable_iroh: bool = True
    verify_backend: bool = True


@dataclass(frozen=True)
class BootstrapConfig:
    """Resolved runtime parameters for one launch.

    Attributes:
        data_dir: Absolute working directory, existing and writable
        network: Network the node runs on
        backend: Where the node reads chain data
        bind_p2p: Bind address for the peer API over iroh
        bind_ui: Bind address for the local admin UI
        enable_iroh: Whether the iroh peer-discovery transport is forced on
    """

    data_dir: Path
    network: NetworkKind
    backend: BackendDescriptor
    bind_p2p: str
    bind_ui: str
    enable_iroh: bool

    def node_settings(self) -> dict[str, str]:
        """Settings for fedimintd, keyed by their FM_* names."""
        settings = {
            "FM_DATA_DIR": str(self.data_dir),
            "FM_BITCOIN_NETWORK": self.network.value,
            "FM_BITCOIN_RPC_KIND": self.backend.rpc_kind,
            "FM_BITCOIN_RPC_URL": self.backend.node_url(),
            "FM_BIND_API_IROH": self.bind_p2p,
            "FM_BIND_UI": self.bind_ui,
        }
        if self.enable_iroh:
            settings["FM_FORCE_IROH"] = "1"
        return settings

    def to_node_runtime_config(self) -> NodeRuntimeConfig:
        return NodeRuntimeConfig(settings=self.node_settings(), version=__version__)


@dataclass(frozen=True)
class LaunchOutcome:
    """Result of a launch whose node terminated normally."""

    config: BootstrapConfig
    state: LaunchState


def resolve_working_directory(data_dir: Path) -> Path:
    """Create the fedimintd working directory under data_dir.

    Safe to call repeatedly: an existing directory is reused.

    Args:
        data_dir: Base directory supplied by the host

    Returns:
        Absolute path of the working directory

    Raises:
        DirectoryError: If the directory cannot be created or is not writable
    """
    try:
        workdir = Path(data_dir).absolute() / WORKDIR_NAME
        workdir.mkdir(parents=True, exist_ok=True)
    except (OSError, ValueError) as err:
        raise DirectoryError(
            f"Could not create working directory under {data_dir!r}: {err}",
            state=LaunchState.NOT_STARTED,
        ) from err

    if not os.access(workdir, os.W_OK):
        raise DirectoryError(
            f"Working directory {workdir} is not writable",
            state=LaunchState.NOT_STARTED,
        )
    return workdir


def build_bootstrap_config(
    ctx: MintContext, params: LaunchParams, workdir: Path
) -> BootstrapConfig:
    return BootstrapConfig(
        data_dir=workdir,
        network=params.network,
        backend=params.backend,
        bind_p2p=params.bind_p2p or ctx.config.bind_p2p,
        bind_ui=params.bind_ui or ctx.config.bind_ui,
        enable_iroh=params.enable_iroh,
    )


async def launch(ctx: MintContext, params: LaunchParams) -> LaunchOutcome:
    """Prepare the environment and run fedimintd until it stops.

    Does not return during normal operation. The working directory is
    created, output is redirected into its log file, the backend is
    optionally verified, and the assembled configuration is handed to the
    node runtime.

    Args:
        ctx: Context with the chain source, output redirect and node runtime
        params: Caller-supplied launch inputs

    Returns:
        LaunchOutcome once the node runtime terminates normally

    Raises:
        DirectoryError: If the working directory cannot be prepared
        LogSetupError: If the log file cannot be opened
        VerificationError: If pre-flight verification is enabled and fails
        NodeRuntimeError: If the node runtime fails to start or errors out
    """
    workdir = resolve_working_directory(params.data_dir)
    state = LaunchState.DIRECTORY_READY
    logger.info("Working directory ready at %s", workdir)

    log_path = workdir / LOG_FILENAME
    with ExitStack() as stack:
        try:
            stack.enter_context(ctx.output_redirect.redirect(log_path))
        except OSError as err:
            raise LogSetupError(
                f"Could not open log file {log_path}: {err}",
                state=state,
            ) from err
        state = LaunchState.LOGGING_READY
        logger.info("Output redirected to %s", log_path)

        if params.verify_backend:
            await verify_backend_network(ctx.chain_source, params.backend, params.network)

        config = build_bootstrap_config(ctx, params, workdir)
        logger.info(
            "Starting fedimintd on %s via %s backend %s",
            config.network.display_name,
            config.backend.rpc_kind,
            config.backend.base_url,
        )
        try:
            await ctx.node_runtime.run(config.to_node_runtime_config())
        except NodeStartError as err:
            raise NodeRuntimeError(err, state=state) from err
        except Exception as err:
            raise NodeRuntimeError(err, state=LaunchState.RUNNING) from err

    state = LaunchState.TERMINATED
    logger.info("fedimintd terminated")
    return LaunchOutcome(config=config, state=state)
