"""Entry points called by the mobile shell across the FFI boundary.

Arguments arrive as plain strings, so these functions parse them into typed
values and delegate to the orchestrator and the verifier.
"""

from pathlib import Path

from fedimintd_mobile.core.backend import backend_from_fields
from fedimintd_mobile.core.bootstrap import LaunchOutcome, LaunchParams, launch
from fedimintd_mobile.core.context import MintContext, create_context
from fedimintd_mobile.core.errors import BackendSelectionError
from fedimintd_mobile.core.network import NetworkKind, parse_network
from fedimintd_mobile.core.verifier import verify_backend_network


def _parse_network_field(network: str) -> NetworkKind:
    try:
        return parse_network(network)
    except ValueError as err:
        raise BackendSelectionError(str(err)) from err


async def start_fedimintd(
    path: str,
    network: str,
    *,
    esplora_url: str | None = None,
    bitcoind_url: str | None = None,
    bitcoind_username: str | None = None,
    bitcoind_password: str | None = None,
    verify: bool = True,
    ctx: MintContext | None = None,
) -> LaunchOutcome:
    """Launch fedimintd under path, bound to the given network and backend.

    Suspends until the node terminates. See launch() for the failure modes.
    """
    backend = backend_from_fields(
        esplora_url=esplora_url,
        bitcoind_url=bitcoind_url,
        bitcoind_username=bitcoind_username,
        bitcoind_password=bitcoind_password,
    )
    params = LaunchParams(
        data_dir=Path(path),
        network=_parse_network_field(network),
        backend=backend,
        verify_backend=verify,
    )
    return await launch(ctx or create_context(), params)


async def verify_backend(
    network: str,
    *,
    esplora_url: str | None = None,
    bitcoind_url: str | None = None,
    bitcoind_username: str | None = None,
    bitcoind_password: str | None = None,
    ctx: MintContext | None = None,
) -> NetworkKind:
    """Check that a backend serves the given network before launching."""
    backend = backend_from_fields(
        esplora_url=esplora_url,
        bitcoind_url=bitcoind_url,
        bitcoind_username=bitcoind_username,
        bitcoind_password=bitcoind_password,
    )
    ctx = ctx or create_context()
    return await verify_backend_network(ctx.chain_source, backend, _parse_network_field(network))
