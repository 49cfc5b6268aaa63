"""Real node runtime that runs the fedimintd binary as a child process."""

import asyncio
import logging
import os

from fedimintd_mobile.integrations.node_runtime.abc import (
    DEFAULT_MODULE_SET,
    NodeRuntime,
    NodeRuntimeConfig,
    NodeStartError,
)

logger = logging.getLogger(__name__)


class RealNodeRuntime(NodeRuntime):
    """Production implementation using asyncio subprocesses.

    Settings reach the child through its own environment; this process's
    environment is never modified. The child inherits fds 1 and 2, so its
    output lands wherever they currently point.
    """

    def __init__(self, binary: str) -> None:
        """Create RealNodeRuntime.

        Args:
            binary: Path or name of the fedimintd executable
        """
        self._binary = binary

    async def run(self, config: NodeRuntimeConfig) -> None:
        """Run fedimintd until it exits.

        Raises:
            NodeStartError: If a module set other than the default is requested
                or the fedimintd binary cannot be executed
            RuntimeError: If fedimintd exits with a non-zero status
        """
        if config.module_set != DEFAULT_MODULE_SET:
            raise NodeStartError(
                f"fedimintd binary only supports the '{DEFAULT_MODULE_SET}' module set, "
                f"got '{config.module_set}'"
            )

        version = config.version
        if config.version_vendor_suffix is not None:
            version = f"{version}-{config.version_vendor_suffix}"
        print(f"Starting fedimintd {version}...", flush=True)

        # FM_* values from this process never reach the child
        env = {key: value for key, value in os.environ.items() if not key.startswith("FM_")}
        env.update(config.settings)
        try:
            process = await asyncio.create_subprocess_exec(self._binary, env=env)
        except OSError as err:
            raise NodeStartError(f"Could not execute {self._binary}: {err}") from err
        logger.info("fedimintd started with pid %d", process.pid)

        try:
            returncode = await process.wait()
        except asyncio.CancelledError:
            process.terminate()
            await process.wait()
            raise

        if returncode != 0:
            raise RuntimeError(f"fedimintd exited with status {returncode}")
        logger.info("fedimintd exited cleanly")
