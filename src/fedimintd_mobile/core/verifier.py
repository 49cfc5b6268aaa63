"""Backend identity verification by genesis block fingerprint."""

import logging

from fedimintd_mobile.core.backend import BackendDescriptor
from fedimintd_mobile.core.errors import NetworkMismatchError, UnrecognizedGenesisError
from fedimintd_mobile.core.network import NetworkKind, network_for_genesis_hash
from fedimintd_mobile.integrations.chain_source.abc import ChainSource

logger = logging.getLogger(__name__)


async def verify_backend_network(
    chain_source: ChainSource,
    backend: BackendDescriptor,
    claimed: NetworkKind,
) -> NetworkKind:
    """Confirm that a backend serves the network the caller selected.

    Fetches the genesis block hash once and looks it up in the fixed table
    of known networks. A negative result is final; nothing is retried.

    Args:
        chain_source: Client used to query the backend
        backend: Backend to verify
        claimed: Network the caller believes the backend serves

    Returns:
        The verified network (always equal to claimed)

    Raises:
        BackendConnectionError: If the backend could not be queried
        UnrecognizedGenesisError: If the hash is not a known genesis block
        NetworkMismatchError: If the hash belongs to a different network
    """
    genesis_hash = await chain_source.get_genesis_block_hash(backend)

    actual = network_for_genesis_hash(genesis_hash)
    if actual is None:
        logger.warning("Backend %s has unknown genesis block %s", backend.base_url, genesis_hash)
        raise UnrecognizedGenesisError(genesis_hash)

    if actual is not claimed:
        logger.warning(
            "Backend %s serves %s, expected %s",
            backend.base_url,
            actual.display_name,
            claimed.display_name,
        )
        raise NetworkMismatchError(expected=claimed, actual=actual)

    logger.info("Backend %s verified as %s", backend.base_url, actual.display_name)
    return actual
