"""Tests for backend identity verification."""

import pytest

from fedimintd_mobile.core.backend import IndexerBackend, RpcBackend
from fedimintd_mobile.core.errors import (
    BackendConnectionError,
    NetworkMismatchError,
    UnrecognizedGenesisError,
)
from fedimintd_mobile.core.network import MAINNET_GENESIS_HASH, NetworkKind
from fedimintd_mobile.core.verifier import verify_backend_network
from fedimintd_mobile.integrations.chain_source.fake import FakeChainSource

MAINNET_INDEXER = IndexerBackend(base_url="https://valid-mainnet-indexer")
UNKNOWN_HASH = "deadbeef" * 8


@pytest.mark.parametrize("network", list(NetworkKind))
async def test_matching_claim_succeeds(network: NetworkKind) -> None:
    """Each known genesis hash verifies against its own network."""
    backend = IndexerBackend(base_url="https://indexer.example")
    chain_source = FakeChainSource(default_genesis_hash=network.genesis_hash)

    result = await verify_backend_network(chain_source, backend, network)

    assert result is network
    assert chain_source.queried_backends == [backend]


@pytest.mark.parametrize("actual", list(NetworkKind))
@pytest.mark.parametrize("claimed", list(NetworkKind))
async def test_other_claims_raise_network_mismatch(
    actual: NetworkKind, claimed: NetworkKind
) -> None:
    if actual is claimed:
        pytest.skip("matching claim is covered separately")
    chain_source = FakeChainSource(default_genesis_hash=actual.genesis_hash)

    with pytest.raises(NetworkMismatchError) as exc_info:
        await verify_backend_network(chain_source, MAINNET_INDEXER, claimed)

    assert exc_info.value.expected is claimed
    assert exc_info.value.actual is actual


async def test_mainnet_indexer_verifies_as_mainnet() -> None:
    chain_source = FakeChainSource(
        genesis_hashes={"https://valid-mainnet-indexer": MAINNET_GENESIS_HASH}
    )

    result = await verify_backend_network(chain_source, MAINNET_INDEXER, NetworkKind.MAINNET)

    assert result is NetworkKind.MAINNET


async def test_mainnet_indexer_claimed_as_signet_is_mismatch() -> None:
    chain_source = FakeChainSource(
        genesis_hashes={"https://valid-mainnet-indexer": MAINNET_GENESIS_HASH}
    )

    with pytest.raises(NetworkMismatchError) as exc_info:
        await verify_backend_network(chain_source, MAINNET_INDEXER, NetworkKind.SIGNET)

    assert exc_info.value.expected is NetworkKind.SIGNET
    assert exc_info.value.actual is NetworkKind.MAINNET
    assert str(exc_info.value) == "Backend serves mainnet, but signet was selected"


@pytest.mark.parametrize("claimed", list(NetworkKind))
async def test_unknown_hash_is_unrecognized_for_any_claim(claimed: NetworkKind) -> None:
    chain_source = FakeChainSource(default_genesis_hash=UNKNOWN_HASH)

    with pytest.raises(UnrecognizedGenesisError) as exc_info:
        await verify_backend_network(chain_source, MAINNET_INDEXER, claimed)

    assert exc_info.value.genesis_hash == UNKNOWN_HASH


async def test_unreachable_backend_raises_connection_error_once() -> None:
    backend = RpcBackend(base_url="http://127.0.0.1:8332", username="u", password="p")
    chain_source = FakeChainSource(unreachable_urls={"http://127.0.0.1:8332"})

    with pytest.raises(BackendConnectionError):
        await verify_backend_network(chain_source, backend, NetworkKind.REGTEST)

    # No retries
    assert len(chain_source.queried_backends) == 1


async def test_uppercase_hash_from_backend_is_accepted() -> None:
    chain_source = FakeChainSource(default_genesis_hash=MAINNET_GENESIS_HASH.upper())

    result = await verify_backend_network(chain_source, MAINNET_INDEXER, NetworkKind.MAINNET)

    assert result is NetworkKind.MAINNET
